"""Shared test fixtures for perses-config tests."""

import shutil
import tempfile
from pathlib import Path

import pytest


PERSES_ENV_VARS = (
    "PERSES_SCHEMAS_PANELS_PATH",
    "PERSES_SCHEMAS_QUERIES_PATH",
    "PERSES_SCHEMAS_DATASOURCES_PATH",
    "PERSES_SCHEMAS_INTERVAL",
    "PERSES_LOG_LEVEL",
    "PERSES_LOG_FORMAT",
)


@pytest.fixture(autouse=True)
def clean_perses_environment(monkeypatch):
    """Keep PERSES_* variables from the outer environment out of tests."""
    for var in PERSES_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    yield


@pytest.fixture
def temp_directory():
    """Provide a temporary directory for testing."""
    temp_dir = tempfile.mkdtemp()
    temp_path = Path(temp_dir)

    yield temp_path

    shutil.rmtree(temp_dir, ignore_errors=True)
