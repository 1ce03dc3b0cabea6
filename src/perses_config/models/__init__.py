"""
Configuration models for perses-config.

Public API:
- Data Classes: SchemaConfig
- Constants: DEFAULT_PANELS_PATH, DEFAULT_QUERIES_PATH,
  DEFAULT_DATASOURCES_PATH, DEFAULT_INTERVAL
"""

from .schemas import (
    SchemaConfig,
    DEFAULT_PANELS_PATH,
    DEFAULT_QUERIES_PATH,
    DEFAULT_DATASOURCES_PATH,
    DEFAULT_INTERVAL,
)

__all__ = [
    "SchemaConfig",
    "DEFAULT_PANELS_PATH",
    "DEFAULT_QUERIES_PATH",
    "DEFAULT_DATASOURCES_PATH",
    "DEFAULT_INTERVAL",
]
