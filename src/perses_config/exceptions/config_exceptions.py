"""
Exceptions raised while loading the perses-config document.

Each error carries the config file it relates to and hints that point at
the ``schemas.*`` and ``logging.*`` settings involved. Normalization of a
SchemaConfig never raises; these come from reading and checking raw input.
"""

from typing import Any, List, Optional


class ConfigurationError(Exception):
    """Base class for configuration loading errors."""

    def __init__(
        self,
        message: str,
        config_file: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ) -> None:
        super().__init__(message)
        self.config_file = config_file
        self.suggestions = list(suggestions or [])

    def __str__(self) -> str:
        lines = [super().__str__()]
        if self.config_file:
            lines.append(f"Config file: {self.config_file}")
        if self.suggestions:
            lines.append("")
            lines.append("Suggestions:")
            lines.extend(f"  {n}. {hint}" for n, hint in enumerate(self.suggestions, 1))
        return "\n".join(lines)


class ConfigurationFileNotFoundError(ConfigurationError):
    """The explicitly requested config file does not exist."""

    def __init__(self, message: str, config_file: Optional[str] = None) -> None:
        super().__init__(message, config_file, [
            "Pass the path of an existing perses.config.json",
            "Omit the config file to run with the built-in schemas defaults",
        ])


class ConfigurationValidationError(ConfigurationError):
    """A setting in the document has the wrong shape or value."""

    def __init__(
        self,
        message: str,
        config_file: Optional[str] = None,
        validation_errors: Optional[List[str]] = None,
        invalid_fields: Optional[List[str]] = None
    ) -> None:
        self.validation_errors = list(validation_errors or [])
        self.invalid_fields = list(invalid_fields or [])

        suggestions = []
        if self.invalid_fields:
            suggestions.append(f"Fix these fields: {', '.join(self.invalid_fields)}")
        if any(f.startswith("schemas.") and f.endswith("_path") for f in self.invalid_fields):
            suggestions.append("Schema paths must be strings, or null to use the default")
        if any(f.startswith("schemas.") and f not in _SCHEMAS_FIELDS for f in self.invalid_fields):
            suggestions.append(f"Known schemas settings: {', '.join(sorted(_SCHEMAS_FIELDS))}")

        super().__init__(message, config_file, suggestions)

    def __str__(self) -> str:
        text = super().__str__()
        if self.validation_errors:
            text += "\n\nValidation errors:"
            text += "".join(f"\n  {n}. {err}" for n, err in enumerate(self.validation_errors, 1))
        return text


class InvalidDurationError(ConfigurationValidationError):
    """A refresh interval could not be read as a duration."""

    def __init__(
        self,
        message: str,
        value: Any = None,
        field_name: Optional[str] = None
    ) -> None:
        super().__init__(
            message,
            validation_errors=[message],
            invalid_fields=[field_name] if field_name else None
        )
        self.value = value
        self.field_name = field_name
        self.suggestions.append(
            'Write the interval as "30s", "90m" or "1h30m", or as a number of seconds'
        )


_SCHEMAS_FIELDS = frozenset({
    "schemas.panels_path",
    "schemas.queries_path",
    "schemas.datasources_path",
    "schemas.interval",
})
