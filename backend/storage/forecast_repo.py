"""Repository for weather forecast rows."""

import sqlite3
from datetime import date

from backend.models.forecast import WeatherForecast


def insert_forecast(
    conn: sqlite3.Connection,
    forecast_date: date,
    temperature_c: int,
    summary: str | None = None,
    forecast_id: int | None = None,
) -> int:
    """Persist a forecast row. Returns the row id."""
    cursor = conn.execute(
        "INSERT INTO weather_forecasts (id, date, temperature_c, summary) "
        "VALUES (?, ?, ?, ?)",
        (forecast_id, forecast_date.isoformat(), temperature_c, summary),
    )
    conn.commit()
    assert cursor.lastrowid is not None
    return cursor.lastrowid


def list_forecasts(
    conn: sqlite3.Connection, start_date: date | None = None
) -> list[WeatherForecast]:
    """Get forecasts ordered by date, optionally only those on or after start_date."""
    sql = "SELECT id, date, temperature_c, summary FROM weather_forecasts"
    params: tuple = ()
    if start_date is not None:
        sql += " WHERE date >= ?"
        params = (start_date.isoformat(),)
    sql += " ORDER BY date, id"
    rows = conn.execute(sql, params).fetchall()
    return [_to_forecast(r) for r in rows]


def count_forecasts(conn: sqlite3.Connection) -> int:
    return conn.execute("SELECT COUNT(*) FROM weather_forecasts").fetchone()[0]


def delete_all_forecasts(conn: sqlite3.Connection) -> int:
    """Remove every forecast row. Returns the number deleted."""
    cursor = conn.execute("DELETE FROM weather_forecasts")
    conn.commit()
    return cursor.rowcount


def _to_forecast(row: sqlite3.Row) -> WeatherForecast:
    return WeatherForecast(
        id=row["id"],
        date=date.fromisoformat(row["date"]),
        temperature_c=row["temperature_c"],
        summary=row["summary"],
    )
