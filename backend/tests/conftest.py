"""Shared test fixtures."""

import sqlite3
from datetime import date
from pathlib import Path

import pytest
import yaml

from backend.models.forecast import WeatherForecast
from backend.storage import forecast_repo
from backend.storage.database import connect, run_migrations


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "test.db"


@pytest.fixture
def db(db_path: Path) -> sqlite3.Connection:
    """A migrated, empty forecast database."""
    conn = connect(db_path)
    run_migrations(conn)
    yield conn
    conn.close()


@pytest.fixture
def sample_forecasts() -> list[WeatherForecast]:
    """Forecasts deliberately out of date order, one without a summary."""
    return [
        WeatherForecast(id=101, date=date(2030, 1, 3), temperature_c=15, summary="Cool"),
        WeatherForecast(id=102, date=date(2030, 1, 1), temperature_c=20, summary="Mild"),
        WeatherForecast(id=103, date=date(2030, 1, 2), temperature_c=25, summary="Warm"),
        WeatherForecast(id=104, date=date(2030, 1, 4), temperature_c=-40, summary=None),
    ]


@pytest.fixture
def seeded_db(
    db: sqlite3.Connection, sample_forecasts: list[WeatherForecast]
) -> sqlite3.Connection:
    for f in sample_forecasts:
        forecast_repo.insert_forecast(
            db, f.date, f.temperature_c, f.summary, forecast_id=f.id
        )
    return db


@pytest.fixture
def config_yaml_path(tmp_path: Path, db_path: Path) -> Path:
    """Write a minimal valid config YAML pointing at the test database."""
    data = {
        "database": {"path": str(db_path)},
        "logging": {"level": "DEBUG"},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
