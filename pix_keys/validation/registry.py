"""Registry mapping each key category to its validator."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable

from pix_keys.exceptions import ConfigurationError
from pix_keys.logging import get_logger
from pix_keys.models.enums import KeyCategory
from pix_keys.validation.base import KeyValidator
from pix_keys.validation.contact import EmailKeyValidator, PhoneKeyValidator
from pix_keys.validation.national_id import CnpjKeyValidator, CpfKeyValidator
from pix_keys.validation.random_key import RandomKeyValidator

logger = get_logger(__name__)


class KeyValidatorRegistry:
    """Immutable category -> validator lookup table, built once at startup.

    Parameters
    ----------
    validators : Iterable[KeyValidator]
        One validator per category.

    Raises
    ------
    ConfigurationError
        If ``validators`` or any element is None, a validator declares no
        category, or two validators declare the same category.
    """

    def __init__(self, validators: Iterable[KeyValidator] | None) -> None:
        if validators is None:
            raise ConfigurationError("validator list must not be None")

        by_category: dict[KeyCategory, KeyValidator] = {}
        for validator in validators:
            if validator is None:
                raise ConfigurationError("validator must not be None")
            category = validator.category
            if category is None:
                raise ConfigurationError(
                    f"{type(validator).__name__} does not declare a category"
                )
            previous = by_category.get(category)
            if previous is not None:
                raise ConfigurationError(
                    f"Duplicate validator for {category.value}: "
                    f"{type(previous).__name__} and {type(validator).__name__}"
                )
            by_category[category] = validator

        self._by_category = MappingProxyType(by_category)
        logger.debug(
            "Validator registry built for %s",
            ", ".join(c.value for c in self._by_category),
        )

    def lookup(self, category: KeyCategory | None) -> KeyValidator:
        """Return the validator registered for ``category``.

        Raises
        ------
        ConfigurationError
            If ``category`` is None or has no registered validator. This
            signals a wiring defect, not a user error.
        """
        if category is None:
            raise ConfigurationError("category must not be None")
        validator = self._by_category.get(category)
        if validator is None:
            raise ConfigurationError(f"No validator registered for category: {category}")
        return validator

    @property
    def supported_categories(self) -> frozenset[KeyCategory]:
        return frozenset(self._by_category)

    def __contains__(self, category: object) -> bool:
        return category in self._by_category

    def __len__(self) -> int:
        return len(self._by_category)


def default_validators() -> list[KeyValidator]:
    """Return one instance of each built-in validator."""
    return [
        CpfKeyValidator(),
        CnpjKeyValidator(),
        EmailKeyValidator(),
        PhoneKeyValidator(),
        RandomKeyValidator(),
    ]


def default_registry() -> KeyValidatorRegistry:
    """Build the registry covering every ``KeyCategory``."""
    return KeyValidatorRegistry(default_validators())
