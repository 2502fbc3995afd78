"""Sample forecast data for a fresh database."""

import logging
import sqlite3
from datetime import date, timedelta

from backend.storage import forecast_repo

logger = logging.getLogger(__name__)

# (id, days from today, temperature_c, summary)
SEED_FORECASTS: list[tuple[int, int, int, str]] = [
    (1, 1, 20, "Mild"),
    (2, 2, 25, "Warm"),
    (3, 3, 15, "Cool"),
    (4, 4, 10, "Chilly"),
    (5, 5, 30, "Hot"),
]


def seed_forecasts(
    conn: sqlite3.Connection, today: date | None = None, replace: bool = False
) -> int:
    """Insert the sample forecasts, dated relative to today.

    Does nothing if the table already has rows, unless replace is set, in
    which case existing rows are deleted first. Returns the number inserted.
    """
    today = today or date.today()
    if forecast_repo.count_forecasts(conn) > 0:
        if not replace:
            logger.info("Forecast table not empty, skipping seed")
            return 0
        deleted = forecast_repo.delete_all_forecasts(conn)
        logger.info("Deleted %d existing forecasts before seeding", deleted)

    for forecast_id, offset, temperature_c, summary in SEED_FORECASTS:
        forecast_repo.insert_forecast(
            conn,
            today + timedelta(days=offset),
            temperature_c,
            summary,
            forecast_id=forecast_id,
        )
    logger.info("Seeded %d forecasts starting %s", len(SEED_FORECASTS), today)
    return len(SEED_FORECASTS)
