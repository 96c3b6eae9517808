"""Key format validators and the category registry."""

from pix_keys.validation.base import KeyValidator
from pix_keys.validation.contact import EmailKeyValidator, PhoneKeyValidator
from pix_keys.validation.national_id import CnpjKeyValidator, CpfKeyValidator, check_digit
from pix_keys.validation.random_key import RandomKeyValidator
from pix_keys.validation.registry import (
    KeyValidatorRegistry,
    default_registry,
    default_validators,
)

__all__ = [
    "CnpjKeyValidator",
    "CpfKeyValidator",
    "EmailKeyValidator",
    "KeyValidator",
    "KeyValidatorRegistry",
    "PhoneKeyValidator",
    "RandomKeyValidator",
    "check_digit",
    "default_registry",
    "default_validators",
]
