"""
Loads ``perses.config.json``, layers PERSES_* overrides on top, checks the
result against the bundled schema and hands out the normalized ``schemas``
section.
"""

import logging
import os
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ...exceptions.config_exceptions import ConfigurationError
from ...models.schemas import SchemaConfig
from ..logging_config import LoggingManager, configure_logging
from .environment import EnvironmentHandler
from .file_operations import FileOperations
from .paths import ConfigPaths
from .schema_validation import SchemaValidator


logger = logging.getLogger(__name__)


class ConfigManager:
    """
    Every key of the document is optional. Without an explicit
    ``config_file``, a missing ``perses.config.json`` reads as ``{}`` and
    the schemas section falls back entirely to its defaults.
    """

    def __init__(
        self,
        config_file: Optional[str] = None,
        project_root: Optional[Union[str, Path]] = None,
        load_env: bool = True,
    ) -> None:
        """
        Args:
            config_file: Document to read; it must exist when given
            project_root: Base for relative paths (default: current directory)
            load_env: Read PERSES_* overrides from ``<project_root>/.env``
        """
        self.project_root = Path(project_root or os.getcwd()).resolve()
        self.paths = ConfigPaths()
        self.config_file = config_file or self.paths.DEFAULT_CONFIG_FILE
        self._config_file_required = config_file is not None

        self._config: Dict[str, Any] = {}
        self._loaded = False

        self.file_ops = FileOperations(self.project_root, self.paths.ENV_FILE)
        self.schema_validator = SchemaValidator(self.paths)
        self.env_handler = EnvironmentHandler()

        if load_env:
            self.file_ops.load_environment_variables()

    @property
    def config(self) -> Dict[str, Any]:
        """Copy of the loaded document, loading it on first access."""
        if not self._loaded:
            self.load_config()
        return deepcopy(self._config)

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def _read_config_file(self) -> Dict[str, Any]:
        config_path = self.file_ops.resolve_path(self.config_file)
        if not self._config_file_required and not config_path.exists():
            logger.debug(f"No configuration file at {config_path}, using defaults")
            return {}
        return self.file_ops.read_document(config_path)

    def load_config(self, force_reload: bool = False, validate: bool = True) -> Dict[str, Any]:
        """
        Read, override and validate the configuration document.

        Raises:
            ConfigurationFileNotFoundError: If an explicit config file is missing
            ConfigurationValidationError: If a setting fails the schema
            ConfigurationError: If the file cannot be read or parsed
        """
        if self._loaded and not force_reload:
            return deepcopy(self._config)

        logger.info(f"Loading configuration from {self.config_file}")
        try:
            config = self.env_handler.apply_environment_overrides(self._read_config_file())
            if validate:
                self.schema_validator.validate(config, self.config_file)
        except ConfigurationError as e:
            logger.error(f"Configuration loading failed: {e.args[0]}")
            self._loaded = False
            raise

        self._config = config
        self._loaded = True
        return deepcopy(self._config)

    def reload_config(self) -> Dict[str, Any]:
        return self.load_config(force_reload=True)

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a dotted key such as ``schemas.interval``."""
        config = self.config
        try:
            for k in key.split('.'):
                config = config[k]
            return config
        except (KeyError, TypeError):
            return default

    def get_schemas_config(self) -> SchemaConfig:
        """
        Build the ``schemas`` section with every default applied.

        Raises:
            ConfigurationValidationError: If a schemas value has the wrong
                type or the interval cannot be parsed
        """
        schemas = SchemaConfig.from_dict(self.get(self.paths.SECTION), config_file=self.config_file)
        schemas.normalize()
        logger.debug(f"Schemas configuration: {schemas.to_dict()}")
        return schemas

    def setup_logging(self) -> LoggingManager:
        """Configure the root logger from the ``logging`` section."""
        return configure_logging(self.get("logging", {}))

    def reset(self) -> None:
        """Forget the loaded document; the next access reads it again."""
        self._config = {}
        self._loaded = False
