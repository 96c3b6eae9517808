"""Pix key entity and its lifecycle transitions."""

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass, replace
from datetime import datetime, timezone

from pix_keys.exceptions import BusinessRuleViolation, FormatError
from pix_keys.models.enums import AccountType, KeyCategory, KeyStatus

AGENCY_PATTERN = re.compile(r"[0-9]{4}")
ACCOUNT_PATTERN = re.compile(r"[0-9]{8}")
HOLDER_NAME_MAX_LEN = 30
HOLDER_SURNAME_MAX_LEN = 45


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class PixKey:
    """Alias that resolves to a bank account.

    Instances are immutable snapshots. ``inactivate`` and ``update_account``
    return a new snapshot and leave the receiver untouched.

    Account locator:
    - agency: 4 digits (e.g. ``"0001"``)
    - account: 8 digits (e.g. ``"00012345"``)
    """

    id: str
    category: KeyCategory
    value: str
    account_type: AccountType
    agency: str
    account: str
    holder_name: str
    holder_surname: str
    status: KeyStatus
    created_at: datetime
    inactivated_at: datetime | None = None

    @classmethod
    def create(
        cls,
        category: KeyCategory,
        value: str,
        account_type: AccountType,
        agency: str,
        account: str,
        holder_name: str,
        holder_surname: str | None = None,
    ) -> PixKey:
        """Create a new ACTIVE key with normalized fields.

        The value is only trimmed here; format checks belong to the
        category validators.

        Raises
        ------
        FormatError
            If a required field is missing or an account/holder field is
            malformed.
        """
        return cls(
            id=str(uuid.uuid4()),
            category=KeyCategory.parse(category),
            value=_require_and_strip(value, "value"),
            account_type=_require_account_type(account_type),
            agency=_normalize_agency(agency),
            account=_normalize_account(account),
            holder_name=_normalize_holder_name(holder_name),
            holder_surname=_normalize_holder_surname(holder_surname),
            status=KeyStatus.ACTIVE,
            created_at=_utcnow(),
        )

    @property
    def is_active(self) -> bool:
        return self.status == KeyStatus.ACTIVE

    @property
    def is_inactive(self) -> bool:
        return self.status == KeyStatus.INACTIVE

    def inactivate(self) -> PixKey:
        """Return an INACTIVE snapshot stamped with the inactivation time."""
        if self.is_inactive:
            raise BusinessRuleViolation("key already inactive")
        return replace(self, status=KeyStatus.INACTIVE, inactivated_at=_utcnow())

    def update_account(
        self,
        account_type: AccountType,
        agency: str,
        account: str,
        holder_name: str,
        holder_surname: str | None = None,
    ) -> PixKey:
        """Return a snapshot linked to a new account and holder.

        Identity, category, value, status and timestamps are carried over.
        """
        if self.is_inactive:
            raise BusinessRuleViolation("key is inactive and cannot be updated")

        return replace(
            self,
            account_type=_require_account_type(account_type),
            agency=_normalize_agency(agency),
            account=_normalize_account(account),
            holder_name=_normalize_holder_name(holder_name),
            holder_surname=_normalize_holder_surname(holder_surname),
        )


def _require_and_strip(value: str | None, field_name: str) -> str:
    if value is None:
        raise FormatError(f"{field_name} is required")
    stripped = value.strip()
    if not stripped:
        raise FormatError(f"{field_name} must not be blank")
    return stripped


def _require_account_type(account_type: AccountType | str | None) -> AccountType:
    parsed = AccountType.parse(account_type)
    if parsed is None:
        raise FormatError("account_type is required")
    return parsed


def _normalize_agency(agency: str | None) -> str:
    value = _require_and_strip(agency, "agency")
    if not AGENCY_PATTERN.fullmatch(value):
        raise FormatError("agency must have 4 digits")
    return value


def _normalize_account(account: str | None) -> str:
    value = _require_and_strip(account, "account")
    if not ACCOUNT_PATTERN.fullmatch(value):
        raise FormatError("account must have 8 digits")
    return value


def _normalize_holder_name(holder_name: str | None) -> str:
    value = _require_and_strip(holder_name, "holder_name")
    if len(value) > HOLDER_NAME_MAX_LEN:
        raise FormatError(f"holder_name exceeds {HOLDER_NAME_MAX_LEN} characters")
    return value


def _normalize_holder_surname(holder_surname: str | None) -> str:
    value = "" if holder_surname is None else holder_surname.strip()
    if len(value) > HOLDER_SURNAME_MAX_LEN:
        raise FormatError(f"holder_surname exceeds {HOLDER_SURNAME_MAX_LEN} characters")
    return value
