"""JSON file-backed key store."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path

from pix_keys.exceptions import StoreError
from pix_keys.logging import get_logger
from pix_keys.models import PixKey
from pix_keys.store.memory import InMemoryPixKeyStore
from pix_keys.store.serialization import key_from_dict, key_to_dict

logger = get_logger(__name__)


class JsonFilePixKeyStore(InMemoryPixKeyStore):
    """Key store persisted to a single JSON file.

    The file is loaded once at construction and rewritten atomically after
    every save. A failed write rolls back the in-memory change.
    """

    def __init__(self, path: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file store.

        Parameters
        ----------
        path : str | Path
            File holding the key records. Created on first save.
        pretty : bool
            Pretty-print JSON output.
        """
        super().__init__()
        self.path = Path(path)
        self.pretty = pretty
        self._load()

    def save(self, key: PixKey) -> PixKey:
        with self._lock:
            previous = self._put(key)
            try:
                self._write()
            except OSError as e:
                self._remove(key)
                if previous is not None:
                    self._put(previous)
                raise StoreError(f"Failed to write {self.path}: {e}") from e
        return key

    def _load(self) -> None:
        if not self.path.exists():
            return

        try:
            with open(self.path, encoding="utf-8") as f:
                records = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise StoreError(f"Failed to read {self.path}: {e}") from e

        if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
            raise StoreError(f"{self.path} must hold a JSON list of key records")

        for record in records:
            self._put(key_from_dict(record))
        logger.info("Loaded %d pix keys from %s", len(self.keys), self.path)

    def _write(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data = [key_to_dict(key) for key in self.keys.values()]

        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                if self.pretty:
                    json.dump(data, f, indent=2, ensure_ascii=False)
                else:
                    json.dump(data, f, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except OSError:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise
