"""Sample data generators."""

from pix_keys.generators.key_values import KeyRequest, KeyValueGenerator

__all__ = ["KeyRequest", "KeyValueGenerator"]
