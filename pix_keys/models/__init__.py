"""Domain models for pix keys."""

from pix_keys.models.enums import AccountType, KeyCategory, KeyStatus
from pix_keys.models.pix_key import PixKey

__all__ = ["AccountType", "KeyCategory", "KeyStatus", "PixKey"]
