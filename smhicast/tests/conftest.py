"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from smhicast.config.schema import AppConfig


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def karlskrona_body(fixtures_dir: Path) -> str:
    """Raw SMHI response body with 10 timeSeries entries."""
    return (fixtures_dir / "smhi_forecast_karlskrona.json").read_text()


@pytest.fixture
def short_body(fixtures_dir: Path) -> str:
    """Raw SMHI response body with 3 timeSeries entries."""
    return (fixtures_dir / "smhi_forecast_short.json").read_text()


@pytest.fixture
def karlskrona_doc(karlskrona_body: str) -> dict:
    return json.loads(karlskrona_body)


@pytest.fixture
def default_config() -> AppConfig:
    return AppConfig()


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "client": {"timeout_seconds": 5.0},
        "display": {"max_entries": 4},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
