"""
Unit tests for SchemaConfig.

Tests cover default substitution, preservation of explicit values,
idempotence, and construction from deserialized configuration.
"""

from datetime import timedelta

import pytest

from perses_config.models.schemas import (
    SchemaConfig,
    DEFAULT_PANELS_PATH,
    DEFAULT_QUERIES_PATH,
    DEFAULT_DATASOURCES_PATH,
    DEFAULT_INTERVAL,
)
from perses_config.exceptions.config_exceptions import (
    ConfigurationValidationError,
    InvalidDurationError,
)


class TestDefaults:
    """Test default constants."""

    def test_default_values(self):
        """Test the fixed default values."""
        assert DEFAULT_PANELS_PATH == "schemas/panels"
        assert DEFAULT_QUERIES_PATH == "schemas/queries"
        assert DEFAULT_DATASOURCES_PATH == "schemas/datasources"
        assert DEFAULT_INTERVAL == timedelta(hours=1)

    def test_zero_values_on_construction(self):
        """Test a fresh instance holds zero values until normalized."""
        schemas = SchemaConfig()
        assert schemas.panels_path == ""
        assert schemas.queries_path == ""
        assert schemas.datasources_path == ""
        assert schemas.interval == timedelta(0)
        assert not schemas.is_normalized


class TestNormalize:
    """Test SchemaConfig.normalize()."""

    def test_empty_config_gets_all_defaults(self):
        """Test an all-zero config is fully populated."""
        schemas = SchemaConfig()
        result = schemas.normalize()

        assert result is None
        assert schemas == SchemaConfig(
            panels_path="schemas/panels",
            queries_path="schemas/queries",
            datasources_path="schemas/datasources",
            interval=timedelta(hours=1),
        )
        assert schemas.is_normalized

    def test_custom_panels_path_is_kept(self):
        """Test a supplied path does not influence the other defaults."""
        schemas = SchemaConfig(panels_path="/custom/panels")
        schemas.normalize()

        assert schemas.panels_path == "/custom/panels"
        assert schemas.queries_path == "schemas/queries"
        assert schemas.datasources_path == "schemas/datasources"
        assert schemas.interval == timedelta(hours=1)

    def test_negative_interval_treated_as_unset(self):
        """Test a negative interval is replaced like a zero one."""
        schemas = SchemaConfig(interval=-timedelta(minutes=5))
        schemas.normalize()

        assert schemas.interval == timedelta(hours=1)

    def test_fully_specified_config_unchanged(self):
        """Test no default overrides explicit valid values."""
        schemas = SchemaConfig(
            panels_path="a",
            queries_path="b",
            datasources_path="c",
            interval=timedelta(seconds=30),
        )
        schemas.normalize()

        assert schemas == SchemaConfig("a", "b", "c", timedelta(seconds=30))

    @pytest.mark.parametrize("interval", [
        timedelta(0),
        timedelta(microseconds=-1),
        timedelta(days=-3),
    ])
    def test_non_positive_intervals(self, interval):
        """Test zero and negative intervals all become one hour."""
        schemas = SchemaConfig(interval=interval)
        schemas.normalize()
        assert schemas.interval == DEFAULT_INTERVAL

    @pytest.mark.parametrize("interval", [
        timedelta(microseconds=1),
        timedelta(minutes=90),
        timedelta(days=7),
    ])
    def test_positive_intervals_preserved(self, interval):
        """Test any positive interval survives normalization."""
        schemas = SchemaConfig(interval=interval)
        schemas.normalize()
        assert schemas.interval == interval

    @pytest.mark.parametrize("field_name", ["panels_path", "queries_path", "datasources_path"])
    def test_each_path_defaults_independently(self, field_name):
        """Test only the empty path receives a default."""
        values = {"panels_path": "p", "queries_path": "q", "datasources_path": "d"}
        values[field_name] = ""
        schemas = SchemaConfig(**values)
        schemas.normalize()

        expected = {
            "panels_path": DEFAULT_PANELS_PATH,
            "queries_path": DEFAULT_QUERIES_PATH,
            "datasources_path": DEFAULT_DATASOURCES_PATH,
        }
        for name in values:
            if name == field_name:
                assert getattr(schemas, name) == expected[name]
            else:
                assert getattr(schemas, name) == values[name]

    @pytest.mark.parametrize("schemas", [
        SchemaConfig(),
        SchemaConfig(panels_path="/x", interval=timedelta(minutes=-5)),
        SchemaConfig("a", "b", "c", timedelta(seconds=30)),
        SchemaConfig(queries_path=" ", interval=timedelta(hours=2)),
    ])
    def test_normalize_is_idempotent(self, schemas):
        """Test a second normalize() changes nothing."""
        schemas.normalize()
        once = SchemaConfig(**vars(schemas))
        schemas.normalize()
        assert schemas == once

    def test_whitespace_path_is_not_replaced(self):
        """Test only empty strings count as unset."""
        schemas = SchemaConfig(datasources_path=" ")
        schemas.normalize()
        assert schemas.datasources_path == " "


class TestFromDict:
    """Test building SchemaConfig from deserialized data."""

    def test_none_gives_zero_values(self):
        """Test a missing section yields a zero-valued config."""
        assert SchemaConfig.from_dict(None) == SchemaConfig()

    def test_empty_mapping(self):
        """Test an empty section yields a zero-valued config."""
        assert SchemaConfig.from_dict({}) == SchemaConfig()

    def test_all_keys(self):
        """Test every supported key is mapped."""
        schemas = SchemaConfig.from_dict({
            "panels_path": "/srv/panels",
            "queries_path": "/srv/queries",
            "datasources_path": "/srv/datasources",
            "interval": "90m",
        })
        assert schemas == SchemaConfig(
            "/srv/panels", "/srv/queries", "/srv/datasources", timedelta(minutes=90)
        )

    def test_null_values_are_unset(self):
        """Test null values keep the zero value."""
        schemas = SchemaConfig.from_dict({"panels_path": None, "interval": None})
        assert schemas == SchemaConfig()

    def test_numeric_interval_is_seconds(self):
        """Test numeric intervals are read as seconds."""
        assert SchemaConfig.from_dict({"interval": 30}).interval == timedelta(seconds=30)
        assert SchemaConfig.from_dict({"interval": 1.5}).interval == timedelta(seconds=1.5)

    def test_negative_interval_then_normalize(self):
        """Test a negative duration string is normalized to one hour."""
        schemas = SchemaConfig.from_dict({"interval": "-5m"})
        assert schemas.interval == -timedelta(minutes=5)
        schemas.normalize()
        assert schemas.interval == timedelta(hours=1)

    @pytest.mark.parametrize("interval", ["", "   "])
    def test_empty_interval_is_unset(self, interval):
        """Test a blank interval string is treated like a missing one."""
        schemas = SchemaConfig.from_dict({"interval": interval})
        assert schemas.interval == timedelta(0)
        schemas.normalize()
        assert schemas.interval == timedelta(hours=1)

    def test_sub_microsecond_interval_survives_normalize(self):
        """Test a tiny positive interval is not replaced by the default."""
        schemas = SchemaConfig.from_dict({"interval": "500ns"})
        schemas.normalize()
        assert schemas.interval == timedelta(microseconds=1)

    def test_unknown_key_rejected(self):
        """Test unknown settings are reported."""
        with pytest.raises(ConfigurationValidationError) as exc_info:
            SchemaConfig.from_dict({"panel_path": "x"})
        assert exc_info.value.invalid_fields == ["schemas.panel_path"]

    def test_wrong_path_type_rejected(self):
        """Test non-string paths are reported with the field name."""
        with pytest.raises(ConfigurationValidationError) as exc_info:
            SchemaConfig.from_dict({"queries_path": 42}, config_file="perses.config.json")
        assert exc_info.value.invalid_fields == ["schemas.queries_path"]
        assert "perses.config.json" in str(exc_info.value)

    def test_non_mapping_rejected(self):
        """Test a non-mapping section is rejected."""
        with pytest.raises(ConfigurationValidationError):
            SchemaConfig.from_dict(["schemas/panels"])

    def test_invalid_interval_rejected(self):
        """Test unparseable intervals raise InvalidDurationError."""
        with pytest.raises(InvalidDurationError) as exc_info:
            SchemaConfig.from_dict({"interval": "soon"})
        assert exc_info.value.invalid_fields == ["schemas.interval"]


class TestToDict:
    """Test SchemaConfig serialization."""

    def test_normalized_defaults(self):
        """Test the serialized form of the defaults."""
        schemas = SchemaConfig()
        schemas.normalize()
        assert schemas.to_dict() == {
            "panels_path": "schemas/panels",
            "queries_path": "schemas/queries",
            "datasources_path": "schemas/datasources",
            "interval": "1h0m0s",
        }

    def test_from_dict_accepts_serialized_form(self):
        """Test to_dict() output can be read back."""
        schemas = SchemaConfig("a", "b", "c", timedelta(minutes=90))
        assert SchemaConfig.from_dict(schemas.to_dict()) == schemas
