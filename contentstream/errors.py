"""Exception types raised by contentstream."""

from __future__ import annotations


class ContentStreamError(Exception):
    """Base class for contentstream errors."""


class ConversionNotFoundError(ContentStreamError, LookupError):
    """Raised when no converter is registered for a (source, target) pair."""

    def __init__(self, source_type: str, target_type: str) -> None:
        self.source_type = source_type
        self.target_type = target_type
        super().__init__(f"No conversion found from {source_type} to {target_type}")


class ConverterPluginError(ContentStreamError):
    """Raised when a converter entry point cannot be loaded or is malformed."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Converter plugin '{name}' is invalid: {reason}")
