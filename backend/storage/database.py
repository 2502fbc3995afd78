"""SQLite connection handling and schema migrations for the forecast store."""

import importlib
import logging
import sqlite3
from pathlib import Path

logger = logging.getLogger(__name__)

MIGRATIONS_PACKAGE = "backend.storage.migrations"


def connect(db_path: str | Path) -> sqlite3.Connection:
    """Open a SQLite connection with WAL mode and foreign keys enabled.

    The parent directory is created if missing. A connection may be handed
    between threads but must only serve one request at a time.
    """
    if str(db_path) != ":memory:":
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_path), check_same_thread=False)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")
    conn.execute("PRAGMA foreign_keys=ON")
    return conn


def run_migrations(conn: sqlite3.Connection) -> list[str]:
    """Apply migrations not yet recorded in schema_versions, oldest first.

    Returns the names applied by this call; an up-to-date database yields [].
    """
    conn.execute(
        "CREATE TABLE IF NOT EXISTS schema_versions ("
        "  version TEXT PRIMARY KEY,"
        "  applied_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP"
        ")"
    )
    recorded = {r[0] for r in conn.execute("SELECT version FROM schema_versions")}
    pending = [name for name in available_migrations() if name not in recorded]

    for name in pending:
        importlib.import_module(f"{MIGRATIONS_PACKAGE}.{name}").up(conn)
        conn.execute("INSERT INTO schema_versions (version) VALUES (?)", (name,))
        conn.commit()
        logger.info("Applied migration %s", name)
    conn.commit()
    return pending


def available_migrations() -> list[str]:
    """Every v###_*.py module shipped in the migrations directory, sorted."""
    return sorted(p.stem for p in (Path(__file__).parent / "migrations").glob("v[0-9]*_*.py"))
