"""Random (EVP) key validator."""

import re

from pix_keys.exceptions import FormatError
from pix_keys.models.enums import KeyCategory
from pix_keys.validation.base import KeyValidator

RANDOM_KEY_LENGTH = 32
RANDOM_KEY_PATTERN = re.compile(rf"[A-Za-z0-9]{{{RANDOM_KEY_LENGTH}}}")


class RandomKeyValidator(KeyValidator):
    """Opaque key of exactly 32 ASCII alphanumeric characters.

    Surrounding whitespace is ignored. UUID strings are rejected because of
    their hyphens.
    """

    category = KeyCategory.RANDOM

    def validate(self, raw: str | None) -> None:
        if raw is None or not RANDOM_KEY_PATTERN.fullmatch(raw.strip()):
            raise FormatError(
                f"invalid random key: expected {RANDOM_KEY_LENGTH} alphanumeric characters"
            )
