"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import DEFAULT_REF_PREFIX, ConfigurationError, load_configuration
from .runtime_settings import OUTPUT_FORMATS, Configuration, GenerationSettings, OutputSettings

__all__ = [
    "Configuration",
    "GenerationSettings",
    "OutputSettings",
    "OUTPUT_FORMATS",
    "ConfigurationError",
    "load_configuration",
    "DEFAULT_REF_PREFIX",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
