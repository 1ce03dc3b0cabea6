"""
Structural checks of the configuration document against the bundled
JSON schema (``config/schema/config_schema.json``).
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

import jsonschema

from ...exceptions.config_exceptions import ConfigurationValidationError
from .paths import ConfigPaths


logger = logging.getLogger(__name__)


def _field_path(error: jsonschema.ValidationError) -> str:
    return ".".join(str(part) for part in error.absolute_path) or "<document>"


class SchemaValidator:
    """Validates a whole document and reports every failing setting at once."""

    def __init__(self, paths: ConfigPaths) -> None:
        self.schema_path = Path(paths.SCHEMA_DIR) / paths.DEFAULT_CONFIG_SCHEMA
        self._validator = None

    @property
    def validator(self) -> Any:
        """Validator for the bundled schema, built on first use."""
        if self._validator is None:
            schema = json.loads(self.schema_path.read_text(encoding="utf-8"))
            cls = jsonschema.validators.validator_for(schema)
            cls.check_schema(schema)
            self._validator = cls(schema)
        return self._validator

    def validate(self, config: Dict[str, Any], config_file: str = "unknown") -> None:
        """
        Raises:
            ConfigurationValidationError: With one entry per failing setting,
                e.g. ``schemas.interval``
        """
        errors = sorted(self.validator.iter_errors(config), key=_field_path)
        if not errors:
            return

        fields = [_field_path(error) for error in errors]
        messages = [f"{field}: {error.message}" for field, error in zip(fields, errors)]
        logger.error(f"Configuration {config_file} has {len(errors)} invalid setting(s)")
        raise ConfigurationValidationError(
            f"Invalid settings: {', '.join(fields)}",
            config_file,
            messages,
            fields
        )
