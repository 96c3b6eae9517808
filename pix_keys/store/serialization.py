"""Dict conversion for persisted pix keys."""

from dataclasses import fields
from datetime import datetime
from enum import Enum
from typing import Any

from pix_keys.exceptions import StoreError
from pix_keys.models import AccountType, KeyCategory, KeyStatus, PixKey


def serialize_value(value: Any) -> Any:
    """Serialize a key field for JSON output."""
    if isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    return value


def key_to_dict(key: PixKey) -> dict[str, Any]:
    """Convert a key to a JSON-compatible dict."""
    return {f.name: serialize_value(getattr(key, f.name)) for f in fields(key)}


def key_from_dict(data: dict[str, Any]) -> PixKey:
    """Rebuild a key from the output of ``key_to_dict``.

    Raises
    ------
    StoreError
        If a field is missing or holds an unparseable value.
    """
    try:
        inactivated_at = data.get("inactivated_at")
        return PixKey(
            id=data["id"],
            category=KeyCategory(data["category"]),
            value=data["value"],
            account_type=AccountType(data["account_type"]),
            agency=data["agency"],
            account=data["account"],
            holder_name=data["holder_name"],
            holder_surname=data.get("holder_surname") or "",
            status=KeyStatus(data["status"]),
            created_at=datetime.fromisoformat(data["created_at"]),
            inactivated_at=datetime.fromisoformat(inactivated_at) if inactivated_at else None,
        )
    except (KeyError, TypeError, ValueError) as e:
        raise StoreError(f"Malformed pix key record {data.get('id', '?')!r}: {e}") from e
