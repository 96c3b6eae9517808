"""In-memory key store with unique value index."""

from __future__ import annotations

import threading

from pix_keys.exceptions import DuplicateKeyValueError, InactiveKeyOverwriteError
from pix_keys.models import PixKey


class InMemoryPixKeyStore:
    """Dict-backed store keeping value and account indexes in sync.

    All mutations run under a lock, so the unique value index holds even
    when ``save`` is called from several threads at once. An inactive key
    is final: once stored, no differing snapshot may replace it.
    """

    def __init__(self, keys: list[PixKey] | None = None) -> None:
        self._lock = threading.Lock()
        self.keys: dict[str, PixKey] = {}

        # Relationship indexes
        self._by_value: dict[str, str] = {}
        self._by_account: dict[tuple[str, str], set[str]] = {}

        for key in keys or []:
            self.save(key)

    def find_by_value(self, value: str) -> PixKey | None:
        key_id = self._by_value.get(value)
        return self.keys.get(key_id) if key_id is not None else None

    def count_by_agency_account(self, agency: str, account: str) -> int:
        return len(self._by_account.get((agency, account), ()))

    def find_by_id(self, key_id: str) -> PixKey | None:
        return self.keys.get(key_id)

    def save(self, key: PixKey) -> PixKey:
        """Insert or replace ``key`` by id.

        Raises
        ------
        DuplicateKeyValueError
            If a different key already holds ``key.value``.
        InactiveKeyOverwriteError
            If the stored snapshot is inactive and differs from ``key``.
        """
        with self._lock:
            self._put(key)
        return key

    def summary(self) -> dict[str, int]:
        """Return key counts by status."""
        counts: dict[str, int] = {}
        for key in self.keys.values():
            counts[key.status.value] = counts.get(key.status.value, 0) + 1
        counts["total"] = len(self.keys)
        return counts

    def _put(self, key: PixKey) -> PixKey | None:
        """Index ``key`` and return the snapshot it replaced, if any."""
        owner = self._by_value.get(key.value)
        if owner is not None and owner != key.id:
            raise DuplicateKeyValueError(f"Key value already stored under id {owner}")

        previous = self.keys.get(key.id)
        if previous is not None and previous.is_inactive and previous != key:
            raise InactiveKeyOverwriteError(f"Key {key.id} is inactive and cannot be replaced")

        if previous is not None:
            del self._by_value[previous.value]
            self._by_account[(previous.agency, previous.account)].discard(previous.id)

        self.keys[key.id] = key
        self._by_value[key.value] = key.id
        self._by_account.setdefault((key.agency, key.account), set()).add(key.id)
        return previous

    def _remove(self, key: PixKey) -> None:
        del self.keys[key.id]
        del self._by_value[key.value]
        self._by_account[(key.agency, key.account)].discard(key.id)

    def __len__(self) -> int:
        return len(self.keys)
