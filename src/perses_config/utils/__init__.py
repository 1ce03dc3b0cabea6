"""
Utilities package for perses-config.

This package contains duration handling, logging setup and the
configuration loading subsystem. Import ConfigManager from
``perses_config.utils.config``.
"""
