"""Base class for key validators."""

from abc import ABC, abstractmethod

from pix_keys.models.enums import KeyCategory


class KeyValidator(ABC):
    """Format validator for one key category.

    Subclasses set ``category`` and implement ``validate``, raising
    ``FormatError`` when the raw value is rejected. Validators are stateless
    and never mutate their input.
    """

    category: KeyCategory | None = None

    @abstractmethod
    def validate(self, raw: str | None) -> None:
        """Raise FormatError if ``raw`` is not a valid key of this category."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(category={self.category!r})"
