"""
PERSES_* environment variable overrides.

Values are copied into the document as strings before validation, so an
interval of "90m" is read the same way whether it comes from the file or
from ``PERSES_SCHEMAS_INTERVAL``.
"""

import logging
import os
from copy import deepcopy
from typing import Any, Dict

from ...exceptions.config_exceptions import ConfigurationValidationError


logger = logging.getLogger(__name__)

ENV_OVERRIDES = {
    "PERSES_SCHEMAS_PANELS_PATH": ("schemas", "panels_path"),
    "PERSES_SCHEMAS_QUERIES_PATH": ("schemas", "queries_path"),
    "PERSES_SCHEMAS_DATASOURCES_PATH": ("schemas", "datasources_path"),
    "PERSES_SCHEMAS_INTERVAL": ("schemas", "interval"),
    "PERSES_LOG_LEVEL": ("logging", "level"),
    "PERSES_LOG_FORMAT": ("logging", "format"),
}


class EnvironmentHandler:
    """Applies ENV_OVERRIDES to a configuration document."""

    def apply_environment_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Return a copy of ``config`` with every set PERSES_* variable applied.

        Raises:
            ConfigurationValidationError: If the target section in the
                document is present but is not an object
        """
        result = deepcopy(config)

        for env_var, (section, key) in ENV_OVERRIDES.items():
            value = os.environ.get(env_var)
            if value is None:
                continue

            target = result.get(section)
            if target is None:
                target = result[section] = {}
            elif not isinstance(target, dict):
                raise ConfigurationValidationError(
                    f"Cannot apply {env_var}: \"{section}\" is not an object",
                    invalid_fields=[section]
                )

            target[key] = value
            logger.debug(f"{env_var} overrides {section}.{key}")

        return result
