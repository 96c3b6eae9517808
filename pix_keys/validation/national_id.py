"""CPF and CNPJ validators (modulo-11 check digits)."""

import re

from pix_keys.exceptions import FormatError
from pix_keys.models.enums import KeyCategory
from pix_keys.validation.base import KeyValidator

CPF_LENGTH = 11
CPF_WEIGHTS_1 = tuple(range(10, 1, -1))
CPF_WEIGHTS_2 = tuple(range(11, 1, -1))

CNPJ_LENGTH = 14
CNPJ_WEIGHTS_1 = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
CNPJ_WEIGHTS_2 = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)

_NON_DIGITS = re.compile(r"[^0-9]")
_CNPJ_ALLOWED = re.compile(r"[0-9 .\-/]+")


def check_digit(digits: str, weights: tuple[int, ...]) -> int:
    """Compute one modulo-11 check digit.

    Parameters
    ----------
    digits : str
        Leading digits, at least ``len(weights)`` long.
    weights : tuple[int, ...]
        Weight per position.

    Returns
    -------
    int
        0 when the remainder is below 2, otherwise ``11 - remainder``.
    """
    total = sum(int(d) * w for d, w in zip(digits, weights))
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def _has_valid_check_digits(
    digits: str, weights_1: tuple[int, ...], weights_2: tuple[int, ...]
) -> bool:
    base = len(weights_1)
    dv1 = check_digit(digits[:base], weights_1)
    dv2 = check_digit(digits[:base] + str(dv1), weights_2)
    return digits[base:] == f"{dv1}{dv2}"


def _all_equal(digits: str) -> bool:
    return len(set(digits)) == 1


class CpfKeyValidator(KeyValidator):
    """Individual taxpayer ID, 11 digits with or without mask."""

    category = KeyCategory.CPF

    def validate(self, raw: str | None) -> None:
        digits = _NON_DIGITS.sub("", raw or "")
        if len(digits) != CPF_LENGTH:
            raise FormatError("invalid cpf: expected 11 digits")
        if _all_equal(digits):
            raise FormatError("invalid cpf: repeated digits")
        if not _has_valid_check_digits(digits, CPF_WEIGHTS_1, CPF_WEIGHTS_2):
            raise FormatError("invalid cpf: check digits do not match")


class CnpjKeyValidator(KeyValidator):
    """Company registry ID, 14 digits with or without mask."""

    category = KeyCategory.CNPJ

    MESSAGE = "invalid cnpj: expected 14 valid digits (with or without mask)"

    def validate(self, raw: str | None) -> None:
        if raw is None:
            raise FormatError(self.MESSAGE)
        value = raw.strip()
        # Only digits, spaces and . - / may appear before stripping the mask
        if not value or not _CNPJ_ALLOWED.fullmatch(value):
            raise FormatError(self.MESSAGE)

        digits = _NON_DIGITS.sub("", value)
        if len(digits) != CNPJ_LENGTH or _all_equal(digits):
            raise FormatError(self.MESSAGE)
        if not _has_valid_check_digits(digits, CNPJ_WEIGHTS_1, CNPJ_WEIGHTS_2):
            raise FormatError(self.MESSAGE)
