"""Tests for key format validators."""

import pytest
from faker import Faker

from pix_keys.exceptions import BusinessRuleViolation, FormatError
from pix_keys.generators import KeyValueGenerator
from pix_keys.models import KeyCategory
from pix_keys.validation import (
    CnpjKeyValidator,
    CpfKeyValidator,
    EmailKeyValidator,
    PhoneKeyValidator,
    RandomKeyValidator,
    check_digit,
)


def _perturb(value: str, index: int) -> str:
    """Replace the digit at ``index`` with the next digit (mod 10)."""
    digit = (int(value[index]) + 1) % 10
    return value[:index] + str(digit) + value[index + 1 :]


class TestCheckDigit:
    """Tests for the modulo-11 helper."""

    def test_remainder_below_two_is_zero(self) -> None:
        # 0 * anything -> remainder 0
        assert check_digit("000000000", tuple(range(10, 1, -1))) == 0

    def test_cpf_first_digit(self) -> None:
        assert check_digit("529982247", tuple(range(10, 1, -1))) == 2

    def test_cpf_second_digit(self) -> None:
        assert check_digit("5299822472", tuple(range(11, 1, -1))) == 5


class TestCpfKeyValidator:
    """Tests for CpfKeyValidator."""

    validator = CpfKeyValidator()

    def test_category(self) -> None:
        assert self.validator.category == KeyCategory.CPF

    def test_accepts_masked(self, valid_cpf: str) -> None:
        self.validator.validate(valid_cpf)

    def test_accepts_raw_digits(self) -> None:
        self.validator.validate("52998224725")

    def test_rejects_bad_check_digit(self) -> None:
        with pytest.raises(FormatError, match="check digits"):
            self.validator.validate("529.982.247-24")

    @pytest.mark.parametrize("value", ["111.111.111-11", "00000000000", "99999999999"])
    def test_rejects_all_equal_digits(self, value: str) -> None:
        # 111.111.111-11 passes the checksum but is still rejected
        with pytest.raises(FormatError, match="repeated"):
            self.validator.validate(value)

    @pytest.mark.parametrize("value", [None, "", "5299822472", "529982247250", "abc"])
    def test_rejects_wrong_length(self, value: str | None) -> None:
        with pytest.raises(FormatError, match="11 digits"):
            self.validator.validate(value)

    def test_format_error_is_business_rule_violation(self) -> None:
        with pytest.raises(BusinessRuleViolation):
            self.validator.validate("529.982.247-24")

    def test_generated_values_are_valid(self, seed: int) -> None:
        gen = KeyValueGenerator(seed=seed)
        for _ in range(200):
            self.validator.validate(gen.cpf())
            self.validator.validate(gen.cpf(formatted=True))

    def test_faker_values_are_valid(self, seed: int) -> None:
        fake = Faker("pt_BR")
        fake.seed_instance(seed)
        for _ in range(100):
            self.validator.validate(fake.cpf())

    @pytest.mark.parametrize("index", [9, 10])
    def test_perturbed_check_digit_fails(self, seed: int, index: int) -> None:
        gen = KeyValueGenerator(seed=seed)
        for _ in range(200):
            with pytest.raises(FormatError):
                self.validator.validate(_perturb(gen.cpf(), index))


class TestCnpjKeyValidator:
    """Tests for CnpjKeyValidator."""

    validator = CnpjKeyValidator()

    def test_category(self) -> None:
        assert self.validator.category == KeyCategory.CNPJ

    def test_accepts_masked(self, valid_cnpj: str) -> None:
        self.validator.validate(valid_cnpj)

    def test_accepts_raw_and_spaced(self) -> None:
        self.validator.validate("12345678000195")
        self.validator.validate("  12 345 678 0001 95  ")

    @pytest.mark.parametrize(
        "value",
        [
            "12.345.678/0001-94",  # bad second check digit
            "12.345.678/0001-9",  # 13 digits
            "1234567800019",
            "00.000.000/0000-00",  # all zeros, checksum coincidentally passes
            "11111111111111",
            "12.345.678/0001-95a",  # disallowed character
            "12_345_678_0001_95",
            "",
            "   ",
            None,
        ],
    )
    def test_rejects_invalid(self, value: str | None) -> None:
        with pytest.raises(FormatError, match="invalid cnpj"):
            self.validator.validate(value)

    def test_generated_values_are_valid(self, seed: int) -> None:
        gen = KeyValueGenerator(seed=seed)
        for _ in range(200):
            self.validator.validate(gen.cnpj())
            self.validator.validate(gen.cnpj(formatted=True))

    def test_faker_values_are_valid(self, seed: int) -> None:
        fake = Faker("pt_BR")
        fake.seed_instance(seed)
        for _ in range(100):
            self.validator.validate(fake.cnpj())

    @pytest.mark.parametrize("index", [12, 13])
    def test_perturbed_check_digit_fails(self, seed: int, index: int) -> None:
        gen = KeyValueGenerator(seed=seed)
        for _ in range(200):
            with pytest.raises(FormatError):
                self.validator.validate(_perturb(gen.cnpj(), index))


class TestEmailKeyValidator:
    """Tests for EmailKeyValidator."""

    validator = EmailKeyValidator()

    def test_category(self) -> None:
        assert self.validator.category == KeyCategory.EMAIL

    @pytest.mark.parametrize(
        "value",
        ["ana@example.com", "ana.silva+pix@banco.com.br", "  a_b%c@x-y.io  "],
    )
    def test_accepts_valid(self, value: str) -> None:
        self.validator.validate(value)

    def test_accepts_exactly_77_characters(self) -> None:
        value = "a" * 65 + "@example.com"
        assert len(value) == 77
        self.validator.validate(value)

    def test_rejects_78_characters(self) -> None:
        value = "a" * 66 + "@example.com"
        assert len(value) == 78
        with pytest.raises(FormatError, match="exceeds 77"):
            self.validator.validate(value)

    def test_rejects_null(self) -> None:
        with pytest.raises(FormatError, match="null"):
            self.validator.validate(None)

    def test_rejects_blank(self) -> None:
        with pytest.raises(FormatError, match="blank"):
            self.validator.validate("   ")

    @pytest.mark.parametrize(
        "value",
        ["ana", "ana@example", "ana@example.c", "@example.com", "ana@@example.com", "ána@example.com"],
    )
    def test_rejects_bad_format(self, value: str) -> None:
        with pytest.raises(FormatError, match="format"):
            self.validator.validate(value)

    def test_generated_values_are_valid(self, seed: int) -> None:
        gen = KeyValueGenerator(seed=seed)
        for _ in range(100):
            self.validator.validate(gen.email())


class TestPhoneKeyValidator:
    """Tests for PhoneKeyValidator."""

    validator = PhoneKeyValidator()

    def test_category(self) -> None:
        assert self.validator.category == KeyCategory.PHONE

    @pytest.mark.parametrize("value", ["+5511987654321", "+551138765432", " +5511987654321 "])
    def test_accepts_10_or_11_digits(self, value: str) -> None:
        self.validator.validate(value)

    def test_rejects_null(self) -> None:
        with pytest.raises(FormatError, match="null"):
            self.validator.validate(None)

    def test_rejects_blank(self) -> None:
        with pytest.raises(FormatError, match="blank"):
            self.validator.validate("  ")

    @pytest.mark.parametrize("value", ["5511987654321", "11987654321", "+1511987654321", "55+11987654321"])
    def test_rejects_missing_prefix(self, value: str) -> None:
        with pytest.raises(FormatError, match=r"start with \+55"):
            self.validator.validate(value)

    @pytest.mark.parametrize(
        "value",
        ["+55119876543", "+55119876543210", "+55", "+5511 98765432", "+5511-98765432"],
    )
    def test_rejects_wrong_digit_count(self, value: str) -> None:
        with pytest.raises(FormatError, match="10-11 digits"):
            self.validator.validate(value)

    def test_generated_values_are_valid(self, seed: int) -> None:
        gen = KeyValueGenerator(seed=seed)
        for _ in range(100):
            self.validator.validate(gen.phone())


class TestRandomKeyValidator:
    """Tests for RandomKeyValidator."""

    validator = RandomKeyValidator()

    def test_category(self) -> None:
        assert self.validator.category == KeyCategory.RANDOM

    @pytest.mark.parametrize("value", ["A" * 32, "a" * 32, "1" * 32, "Ab01" * 8])
    def test_accepts_32_alphanumeric(self, value: str) -> None:
        self.validator.validate(value)

    def test_accepts_surrounding_whitespace(self) -> None:
        self.validator.validate("   " + "Ab01" * 8 + "   ")

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_rejects_null_or_blank(self, value: str | None) -> None:
        with pytest.raises(FormatError):
            self.validator.validate(value)

    @pytest.mark.parametrize("value", ["A" * 31, "A" * 33])
    def test_rejects_other_lengths(self, value: str) -> None:
        with pytest.raises(FormatError, match="32 alphanumeric"):
            self.validator.validate(value)

    @pytest.mark.parametrize(
        "value",
        [
            "A" * 31 + "-",
            "A" * 31 + "_",
            "á" * 32,
            "550e8400-e29b-41d4-a716-446655440000",
            "A" * 31 + "\n",
        ],
    )
    def test_rejects_non_alphanumeric(self, value: str) -> None:
        with pytest.raises(FormatError):
            self.validator.validate(value)

    def test_generated_values_are_valid(self, seed: int) -> None:
        gen = KeyValueGenerator(seed=seed)
        for _ in range(100):
            self.validator.validate(gen.random_key())
