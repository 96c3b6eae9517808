"""Enumeration types for pix key entities."""

import unicodedata
from enum import Enum

from pix_keys.exceptions import FormatError


class KeyCategory(str, Enum):
    CPF = "CPF"
    CNPJ = "CNPJ"
    EMAIL = "EMAIL"
    PHONE = "PHONE"
    RANDOM = "RANDOM"

    @classmethod
    def parse(cls, raw: "str | KeyCategory | None") -> "KeyCategory":
        """Parse a required category by name, ignoring case and padding.

        Raises
        ------
        FormatError
            If ``raw`` is None, blank or names no category.
        """
        if isinstance(raw, cls):
            return raw
        if raw is None or not raw.strip():
            raise FormatError("category is required")
        try:
            return cls(raw.strip().upper())
        except ValueError as e:
            raise FormatError(f"invalid category: {raw}") from e


class KeyStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class AccountType(str, Enum):
    """Bank account type linked to a key.

    Members serialize by name; ``label`` carries the Portuguese wire label
    (``corrente`` / ``poupanca``) that ``parse`` also accepts.
    """

    CHECKING = "CHECKING"
    SAVINGS = "SAVINGS"

    @property
    def label(self) -> str:
        return _ACCOUNT_TYPE_LABELS[self]

    @classmethod
    def parse(cls, raw: "str | AccountType | None") -> "AccountType | None":
        """Parse an account type from its name or Portuguese label.

        Matching ignores case and accents, so ``"Poupança"`` and
        ``"POUPANCA"`` both resolve to ``SAVINGS``.

        Parameters
        ----------
        raw : str | AccountType | None
            Value to parse.

        Returns
        -------
        AccountType | None
            Parsed member, or None when ``raw`` is None or blank.

        Raises
        ------
        FormatError
            If ``raw`` matches no member.
        """
        if raw is None or isinstance(raw, cls):
            return raw

        stripped = raw.strip()
        if not stripped:
            return None

        decomposed = unicodedata.normalize("NFD", stripped)
        folded = "".join(c for c in decomposed if not unicodedata.combining(c)).lower()

        for member in cls:
            if folded in (member.value.lower(), member.label):
                return member
        raise FormatError(f"invalid account type: {raw}")


_ACCOUNT_TYPE_LABELS = {
    AccountType.CHECKING: "corrente",
    AccountType.SAVINGS: "poupanca",
}
