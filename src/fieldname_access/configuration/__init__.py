"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, build_declared_schema, load_configuration
from .runtime_settings import Configuration, RecordDeclaration

__all__ = [
    "Configuration",
    "RecordDeclaration",
    "ConfigurationError",
    "build_declared_schema",
    "load_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
