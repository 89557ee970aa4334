"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the
translation converter using Pydantic BaseSettings with domain-based
organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    ConverterSettings: Converter feature settings class (for testing)

Example:
    ```python
    from infrastructure.configuration import settings

    source_dir = settings.converter.source_dir
    log_level = settings.LOG_LEVEL
    ```
"""

from infrastructure.configuration.settings import Settings, settings
from infrastructure.configuration.features.converter import ConverterSettings

__all__ = ["Settings", "ConverterSettings", "settings"]
