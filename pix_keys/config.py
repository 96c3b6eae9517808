"""Configuration management for pix-keys."""

from dataclasses import dataclass, field
from pathlib import Path

from pix_keys.exceptions import ConfigurationError

DEFAULT_KEY_LIMIT_PER_ACCOUNT = 5

STORE_BACKENDS = ("memory", "json")


@dataclass
class StoreConfig:
    """Key store configuration."""

    backend: str = "memory"
    path: Path = field(default_factory=lambda: Path("data/pix_keys.json"))


@dataclass
class PixKeysConfig:
    """Main configuration for pix-keys."""

    key_limit_per_account: int = DEFAULT_KEY_LIMIT_PER_ACCOUNT
    store: StoreConfig = field(default_factory=StoreConfig)
    log_level: str = "INFO"
    log_format: str = "standard"

    def validate(self) -> "PixKeysConfig":
        """Check values that would otherwise fail later at wiring time.

        Raises
        ------
        ConfigurationError
            If the key limit is below 1 or the store backend is unknown.
        """
        if self.key_limit_per_account < 1:
            raise ConfigurationError(
                f"key_limit_per_account must be >= 1, got {self.key_limit_per_account}"
            )
        if self.store.backend not in STORE_BACKENDS:
            raise ConfigurationError(
                f"Unknown store backend {self.store.backend!r} (expected one of {STORE_BACKENDS})"
            )
        return self

    @classmethod
    def from_env(cls) -> "PixKeysConfig":
        """Create config from environment variables."""
        import os

        raw_limit = os.getenv("PIX_KEY_LIMIT", str(DEFAULT_KEY_LIMIT_PER_ACCOUNT))
        try:
            key_limit = int(raw_limit)
        except ValueError as e:
            raise ConfigurationError(f"PIX_KEY_LIMIT must be an integer, got {raw_limit!r}") from e

        store = StoreConfig(
            backend=os.getenv("PIX_STORE_BACKEND", "memory").lower(),
            path=Path(os.getenv("PIX_STORE_PATH", "data/pix_keys.json")),
        )

        return cls(
            key_limit_per_account=key_limit,
            store=store,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        ).validate()
