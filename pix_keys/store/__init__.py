"""Key stores and their serialization."""

from pix_keys.store.base import PixKeyStore
from pix_keys.store.json_file import JsonFilePixKeyStore
from pix_keys.store.memory import InMemoryPixKeyStore

__all__ = ["InMemoryPixKeyStore", "JsonFilePixKeyStore", "PixKeyStore"]
