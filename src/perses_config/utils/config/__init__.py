"""Configuration management package.

This package provides a modular configuration system with support for:
- JSON schema validation
- Environment variable overrides
- Path management and file operations

Usage:
    from perses_config.utils.config import ConfigManager

    config = ConfigManager()
    schemas = config.get_schemas_config()
"""

from .manager import ConfigManager
from .paths import ConfigPaths
from .file_operations import FileOperations
from .schema_validation import SchemaValidator
from .environment import EnvironmentHandler

__all__ = [
    'ConfigManager',
    'ConfigPaths',
    'FileOperations',
    'SchemaValidator',
    'EnvironmentHandler'
]


def load_schemas_config(*args, **kwargs):
    """Load configuration and return the normalized schemas section."""
    return ConfigManager(*args, **kwargs).get_schemas_config()
