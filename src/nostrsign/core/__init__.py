"""Core infrastructure shared by every nostrsign layer.

Attributes:
    Logger: Structured logger supporting key=value and JSON output modes.
        See [Logger][nostrsign.core.logger.Logger].
    exceptions: The [NostrSignError][nostrsign.core.exceptions.NostrSignError]
        hierarchy raised by serialization, signing and configuration.
    YAML: Safe YAML loading with ``yaml.safe_load()``.
        See [load_yaml()][nostrsign.core.yaml.load_yaml].
"""

from .exceptions import (
    ConfigurationError,
    InvalidKeyError,
    NostrSignError,
    SigningError,
    ValidationError,
)
from .logger import JsonFormatter, Logger, StructuredFormatter, format_kv_pairs, setup_logging
from .yaml import load_yaml


__all__ = [
    "ConfigurationError",
    "InvalidKeyError",
    "JsonFormatter",
    "Logger",
    "NostrSignError",
    "SigningError",
    "StructuredFormatter",
    "ValidationError",
    "format_kv_pairs",
    "load_yaml",
    "setup_logging",
]
