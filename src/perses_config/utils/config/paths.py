"""
Configuration file paths and constants for perses-config.

This module provides the ConfigPaths dataclass containing default paths
and constants used throughout the configuration system.
"""

from dataclasses import dataclass
from pathlib import Path


# Bundled JSON schemas shipped inside the package
_PACKAGE_SCHEMA_DIR = str(Path(__file__).resolve().parents[2] / "config" / "schema")


@dataclass
class ConfigPaths:
    """Configuration file paths and constants."""

    DEFAULT_CONFIG_FILE: str = "perses.config.json"
    SCHEMA_DIR: str = _PACKAGE_SCHEMA_DIR
    ENV_FILE: str = ".env"
    DEFAULT_CONFIG_SCHEMA: str = "config_schema.json"
    SECTION: str = "schemas"
