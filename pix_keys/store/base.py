"""Storage interface consumed by the key service."""

from __future__ import annotations

from typing import Protocol

from pix_keys.models import PixKey


class PixKeyStore(Protocol):
    """Keyed store for pix keys.

    Implementations must enforce uniqueness of ``PixKey.value`` on ``save``
    by raising ``DuplicateKeyValueError`` when another id already holds the
    value, and must refuse to replace a stored inactive key with a differing
    snapshot by raising ``InactiveKeyOverwriteError``.
    """

    def find_by_value(self, value: str) -> PixKey | None:
        ...

    def count_by_agency_account(self, agency: str, account: str) -> int:
        ...

    def find_by_id(self, key_id: str) -> PixKey | None:
        ...

    def save(self, key: PixKey) -> PixKey:
        ...
