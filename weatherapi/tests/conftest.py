"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from weatherapi.config.schema import ServiceConfig

BASE_URL = "https://test-openmeteo.example.com/v1"


class FakeClock:
    """Manually advanced clock for TTL tests."""

    def __init__(self, now: float = 1_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def berlin_forecast(fixtures_dir: Path) -> dict:
    with open(fixtures_dir / "openmeteo_forecast_berlin.json") as f:
        return json.load(f)


@pytest.fixture
def default_config() -> ServiceConfig:
    return ServiceConfig()


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "openmeteo": {"base_url": BASE_URL},
        "cache": {"backend": "sqlite", "path": str(tmp_path / "cache.db")},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
