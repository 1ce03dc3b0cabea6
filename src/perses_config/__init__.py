"""
perses-config: schema location configuration.

Describes where panel, query and datasource schema definitions are located
and how often they are refreshed, and normalizes partially populated
configuration into a complete one.
"""

from .models.schemas import SchemaConfig
from .utils.config import ConfigManager, load_schemas_config

__all__ = [
    "SchemaConfig",
    "ConfigManager",
    "load_schemas_config",
]
