"""
Reading the perses-config document and its ``.env`` file from disk.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from dotenv import load_dotenv

from ...exceptions.config_exceptions import (
    ConfigurationError,
    ConfigurationFileNotFoundError,
)


logger = logging.getLogger(__name__)


class FileOperations:
    """Resolves config paths against a project root and reads them."""

    def __init__(self, project_root: Path, env_file: str) -> None:
        self.project_root = project_root
        self.env_file = env_file

    def resolve_path(self, path: Union[str, Path]) -> Path:
        """Return ``path`` as-is when absolute, else relative to the project root."""
        candidate = Path(path)
        return candidate if candidate.is_absolute() else (self.project_root / candidate).resolve()

    def load_environment_variables(self) -> None:
        """
        Export PERSES_* overrides found in the project's ``.env`` file.

        Variables already present in the process environment win over the
        file. A missing file is not an error.
        """
        env_path = self.resolve_path(self.env_file)
        if not env_path.is_file():
            logger.debug(f"No {self.env_file} at {env_path}, environment left unchanged")
            return
        load_dotenv(env_path)
        logger.info(f"Loaded environment overrides from {env_path}")

    def read_document(self, path: Union[str, Path]) -> Dict[str, Any]:
        """
        Read a JSON configuration document.

        Raises:
            ConfigurationFileNotFoundError: If the file does not exist
            ConfigurationError: If it cannot be read or is not a JSON object
        """
        doc_path = self.resolve_path(path)
        if not doc_path.exists():
            raise ConfigurationFileNotFoundError(
                f"Configuration file not found: {doc_path}", str(doc_path)
            )

        try:
            document = json.loads(doc_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON at line {e.lineno}, column {e.colno}: {e.msg}",
                str(doc_path),
                ["Check for trailing commas or unquoted duration values such as 1h"]
            ) from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration: {e}", str(doc_path)) from e

        if not isinstance(document, dict):
            raise ConfigurationError(
                f"Configuration must be a JSON object with a \"schemas\" key, "
                f"got {type(document).__name__}",
                str(doc_path)
            )

        logger.info(f"Read configuration from {doc_path}")
        return document
