"""Initial schema: the weather_forecasts table."""

import sqlite3

DDL = [
    # Fahrenheit is derived from temperature_c on read and has no column.
    """
    CREATE TABLE IF NOT EXISTS weather_forecasts (
        id INTEGER PRIMARY KEY,
        date TEXT NOT NULL,
        temperature_c INTEGER NOT NULL,
        summary TEXT CHECK (summary IS NULL OR length(summary) <= 50)
    )
    """,
    "CREATE INDEX IF NOT EXISTS idx_weather_forecasts_date ON weather_forecasts(date)",
]


def up(conn: sqlite3.Connection) -> None:
    for stmt in DDL:
        conn.execute(stmt)
    conn.commit()
