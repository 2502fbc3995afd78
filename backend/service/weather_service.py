"""Forecast query service over a pluggable forecast store."""

import logging
import sqlite3
from collections.abc import Iterable
from datetime import date, datetime
from typing import Protocol

from backend.models.forecast import WeatherForecast
from backend.storage import forecast_repo

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Raised when the forecast store cannot be read."""


class ForecastStore(Protocol):
    def list_forecasts(self, start_date: date | None) -> list[WeatherForecast]:
        """Forecasts dated on or after start_date (all if None), ascending by date."""
        ...


class SqliteForecastStore:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def list_forecasts(self, start_date: date | None) -> list[WeatherForecast]:
        return forecast_repo.list_forecasts(self.conn, start_date)


class InMemoryForecastStore:
    def __init__(self, forecasts: Iterable[WeatherForecast] = ()):
        self.forecasts = list(forecasts)

    def list_forecasts(self, start_date: date | None) -> list[WeatherForecast]:
        selected = [
            f for f in self.forecasts if start_date is None or f.date >= start_date
        ]
        return sorted(selected, key=lambda f: f.date)


class WeatherService:
    def __init__(self, store: ForecastStore):
        self.store = store

    def get_forecasts(
        self, start_date: date | datetime | None = None
    ) -> list[WeatherForecast]:
        """Return forecasts ordered by date, optionally from start_date onward.

        A datetime start_date is reduced to its calendar date first. The store
        is read once; failures surface as StoreError without retry.
        """
        start = _calendar_date(start_date)
        try:
            forecasts = self.store.list_forecasts(start)
        except sqlite3.Error as e:
            logger.error("Forecast store read failed: %s", e)
            raise StoreError(str(e)) from e
        logger.debug("Fetched %d forecasts (start_date=%s)", len(forecasts), start)
        return forecasts


def _calendar_date(value: date | datetime | None) -> date | None:
    if value is None:
        return None
    # datetime subclasses date, so check it first
    if isinstance(value, datetime):
        return value.date()
    return value
