"""Custom exception hierarchy for pix-keys."""


class PixKeysError(Exception):
    """Base exception for all pix-keys errors."""


class BusinessRuleViolation(PixKeysError):
    """Raised when a request violates a domain rule.

    Covers duplicate key values, the per-account quota and invalid
    lifecycle transitions.
    """


class FormatError(BusinessRuleViolation):
    """Raised when a value fails a syntactic or checksum rule."""


class NotFoundError(PixKeysError):
    """Raised when a referenced key does not exist."""


class ConfigurationError(PixKeysError):
    """Raised when configuration or wiring is invalid."""


class StoreError(PixKeysError):
    """Raised when a store operation fails."""


class DuplicateKeyValueError(StoreError):
    """Raised by a store when its unique index on key value is violated."""


class InactiveKeyOverwriteError(StoreError):
    """Raised by a store when a save would change an already inactive key."""
