"""Email and phone validators."""

import re

from pix_keys.exceptions import FormatError
from pix_keys.models.enums import KeyCategory
from pix_keys.validation.base import KeyValidator

EMAIL_MAX_LEN = 77
EMAIL_PATTERN = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")

PHONE_PREFIX = "+55"
PHONE_DIGITS_PATTERN = re.compile(r"[0-9]{10,11}")


class EmailKeyValidator(KeyValidator):
    category = KeyCategory.EMAIL

    def validate(self, raw: str | None) -> None:
        if raw is None:
            raise FormatError("email must not be null")
        value = raw.strip()
        if not value:
            raise FormatError("email must not be blank")
        if len(value) > EMAIL_MAX_LEN:
            raise FormatError(f"email exceeds {EMAIL_MAX_LEN} characters")
        if not EMAIL_PATTERN.fullmatch(value):
            raise FormatError("invalid email format")


class PhoneKeyValidator(KeyValidator):
    """Brazilian phone number: ``+55`` followed by DDD and 8-9 digits."""

    category = KeyCategory.PHONE

    def validate(self, raw: str | None) -> None:
        if raw is None:
            raise FormatError("phone must not be null")
        value = raw.strip()
        if not value:
            raise FormatError("phone must not be blank")
        if not value.startswith(PHONE_PREFIX):
            raise FormatError(f"phone must start with {PHONE_PREFIX}")
        if not PHONE_DIGITS_PATTERN.fullmatch(value[len(PHONE_PREFIX):]):
            raise FormatError(f"invalid phone: expected {PHONE_PREFIX} and 10-11 digits")
