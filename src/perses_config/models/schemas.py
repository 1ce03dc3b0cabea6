"""
Schema location configuration for perses-config.

This module defines the SchemaConfig data class describing where panel,
query and datasource schema definitions live and how often they are
refreshed, together with the normalization step that fills unset fields
with fixed defaults.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from datetime import timedelta
from typing import Any, Dict, Optional

from ..exceptions.config_exceptions import ConfigurationValidationError
from ..utils.duration import coerce_duration, format_duration


logger = logging.getLogger(__name__)

DEFAULT_PANELS_PATH = "schemas/panels"
DEFAULT_QUERIES_PATH = "schemas/queries"
DEFAULT_DATASOURCES_PATH = "schemas/datasources"
DEFAULT_INTERVAL = timedelta(hours=1)

PATH_DEFAULTS = {
    "panels_path": DEFAULT_PANELS_PATH,
    "queries_path": DEFAULT_QUERIES_PATH,
    "datasources_path": DEFAULT_DATASOURCES_PATH,
}


@dataclass
class SchemaConfig:
    """
    Locations of schema definitions and their refresh interval.

    Instances built from user configuration may leave any field at its zero
    value (empty string or zero duration). Call normalize() once, before
    handing the configuration to a consumer, to obtain a fully populated
    instance.
    """
    panels_path: str = ""
    queries_path: str = ""
    datasources_path: str = ""
    interval: timedelta = field(default_factory=timedelta)

    def normalize(self) -> None:
        """
        Replace unset or invalid fields with their defaults, in place.

        Each empty path is set to its default and a zero or negative interval
        is set to one hour. Fields are handled independently and values that
        are already valid are never overwritten, so calling this repeatedly
        has no further effect.

        Raises:
            ConfigurationValidationError: Reserved for validation rules; no
                field value currently triggers it.
        """
        for name, default in PATH_DEFAULTS.items():
            if not getattr(self, name):
                logger.debug(f"Schema setting '{name}' unset, using default {default!r}")
                setattr(self, name, default)

        if self.interval <= timedelta(0):
            logger.debug(
                f"Schema refresh interval {format_duration(self.interval)} is not positive, "
                f"using default {format_duration(DEFAULT_INTERVAL)}"
            )
            self.interval = DEFAULT_INTERVAL

    @property
    def is_normalized(self) -> bool:
        """Check whether every path is set and the interval is positive."""
        return (
            all(getattr(self, name) for name in PATH_DEFAULTS)
            and self.interval > timedelta(0)
        )

    @classmethod
    def from_dict(
        cls,
        data: Optional[Mapping[str, Any]],
        config_file: Optional[str] = None
    ) -> "SchemaConfig":
        """
        Create a raw, not yet normalized, instance from a deserialized mapping.

        All keys are optional; absent or null values, and an empty interval
        string, keep the zero value.

        Args:
            data: Mapping with panels_path, queries_path, datasources_path
                and interval keys
            config_file: Configuration file name for error reporting

        Returns:
            SchemaConfig with the supplied values

        Raises:
            ConfigurationValidationError: If a key is unknown or a value has
                the wrong type
        """
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ConfigurationValidationError(
                f"Schemas section must be a mapping, got {type(data).__name__}",
                config_file,
                invalid_fields=["schemas"]
            )

        known = {f.name for f in fields(cls)}
        unknown = sorted(str(key) for key in data if key not in known)
        if unknown:
            raise ConfigurationValidationError(
                f"Unknown schemas settings: {', '.join(unknown)}",
                config_file,
                invalid_fields=[f"schemas.{key}" for key in unknown]
            )

        values: Dict[str, Any] = {}
        for name in PATH_DEFAULTS:
            value = data.get(name)
            if value is None:
                continue
            if not isinstance(value, str):
                raise ConfigurationValidationError(
                    f"Schemas setting '{name}' must be a string, got {type(value).__name__}",
                    config_file,
                    invalid_fields=[f"schemas.{name}"]
                )
            values[name] = value

        interval = data.get("interval")
        # An empty string is unset, as it is for the paths
        if isinstance(interval, str) and not interval.strip():
            interval = None
        if interval is not None:
            values["interval"] = coerce_duration(interval, "schemas.interval")

        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the configuration file representation."""
        return {
            "panels_path": self.panels_path,
            "queries_path": self.queries_path,
            "datasources_path": self.datasources_path,
            "interval": format_duration(self.interval),
        }
