"""Valid sample values for every key category."""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Iterator

from pix_keys.generators.base import BaseGenerator
from pix_keys.models import AccountType, KeyCategory
from pix_keys.models.pix_key import HOLDER_NAME_MAX_LEN, HOLDER_SURNAME_MAX_LEN
from pix_keys.validation.national_id import (
    CNPJ_WEIGHTS_1,
    CNPJ_WEIGHTS_2,
    CPF_WEIGHTS_1,
    CPF_WEIGHTS_2,
    check_digit,
)
from pix_keys.validation.random_key import RANDOM_KEY_LENGTH

RANDOM_KEY_ALPHABET = string.ascii_letters + string.digits
EMAIL_LOCAL_ALPHABET = frozenset(string.ascii_letters + string.digits + "._")


@dataclass(frozen=True)
class KeyRequest:
    """Arguments for ``PixKeyService.create``."""

    category: KeyCategory
    value: str
    account_type: AccountType
    agency: str
    account: str
    holder_name: str
    holder_surname: str


class KeyValueGenerator(BaseGenerator):
    """Generate values that pass the category validators.

    CPF and CNPJ check digits are computed arithmetically; names come from
    Faker.
    """

    EMAIL_DOMAINS = [
        "gmail.com",
        "hotmail.com",
        "outlook.com",
        "yahoo.com.br",
        "uol.com.br",
        "bol.com.br",
    ]

    def cpf(self, formatted: bool = False) -> str:
        """Return a valid CPF, raw (11 digits) or as XXX.XXX.XXX-XX."""
        while True:
            base = "".join(str(self.random.randint(0, 9)) for _ in range(9))
            if len(set(base)) > 1:
                break
        base += str(check_digit(base, CPF_WEIGHTS_1))
        raw = base + str(check_digit(base, CPF_WEIGHTS_2))
        if formatted:
            return f"{raw[:3]}.{raw[3:6]}.{raw[6:9]}-{raw[9:]}"
        return raw

    def cnpj(self, formatted: bool = False) -> str:
        """Return a valid headquarters CNPJ, raw or as XX.XXX.XXX/XXXX-XX."""
        base = "".join(str(self.random.randint(0, 9)) for _ in range(8)) + "0001"
        base += str(check_digit(base, CNPJ_WEIGHTS_1))
        raw = base + str(check_digit(base, CNPJ_WEIGHTS_2))
        if formatted:
            return f"{raw[:2]}.{raw[2:5]}.{raw[5:8]}/{raw[8:12]}-{raw[12:]}"
        return raw

    def email(self) -> str:
        prefix = "".join(c for c in self.fake.user_name() if c in EMAIL_LOCAL_ALPHABET) or "user"
        domain = self.random.choice(self.EMAIL_DOMAINS)
        return f"{prefix}{self.random.randint(1, 9999)}@{domain}"

    def phone(self) -> str:
        """Return a ``+55`` mobile number: 2-digit area code, 9, 8 digits."""
        area_code = self.random.randint(11, 99)
        subscriber = "".join(str(self.random.randint(0, 9)) for _ in range(8))
        return f"+55{area_code}9{subscriber}"

    def random_key(self) -> str:
        return "".join(self.random.choices(RANDOM_KEY_ALPHABET, k=RANDOM_KEY_LENGTH))

    def value_for(self, category: KeyCategory) -> str:
        """Return a valid value for ``category``."""
        if category == KeyCategory.CPF:
            return self.cpf(formatted=self.random.random() < 0.5)
        elif category == KeyCategory.CNPJ:
            return self.cnpj(formatted=self.random.random() < 0.5)
        elif category == KeyCategory.EMAIL:
            return self.email()
        elif category == KeyCategory.PHONE:
            return self.phone()
        return self.random_key()

    def agency(self) -> str:
        return f"{self.random.randint(1, 9999):04d}"

    def account(self) -> str:
        return f"{self.random.randint(1, 99_999_999):08d}"

    def generate(
        self,
        category: KeyCategory | None = None,
        agency: str | None = None,
        account: str | None = None,
    ) -> KeyRequest:
        """Generate arguments for one key creation.

        Parameters
        ----------
        category : KeyCategory | None
            Key category (random when None).
        agency, account : str | None
            Account locator (random when None).

        Returns
        -------
        KeyRequest
            Values accepted by the validators and the entity.
        """
        category = category or self.random.choice(list(KeyCategory))
        return KeyRequest(
            category=category,
            value=self.value_for(category),
            account_type=self.random.choice(list(AccountType)),
            agency=agency or self.agency(),
            account=account or self.account(),
            holder_name=self.fake.first_name()[:HOLDER_NAME_MAX_LEN],
            holder_surname=self.fake.last_name()[:HOLDER_SURNAME_MAX_LEN],
        )

    def generate_batch(self, count: int, **kwargs) -> Iterator[KeyRequest]:
        """Generate multiple key requests.

        Parameters
        ----------
        count : int
            Number of requests to generate.

        Yields
        ------
        KeyRequest
            Generated requests.
        """
        for _ in range(count):
            yield self.generate(**kwargs)
