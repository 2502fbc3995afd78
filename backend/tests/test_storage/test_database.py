"""Tests for database connection, WAL mode, and migrations."""

from pathlib import Path

from backend.storage.database import available_migrations, connect, run_migrations


class TestConnect:
    def test_wal_mode(self, tmp_path: Path):
        db = connect(tmp_path / "test.db")
        mode = db.execute("PRAGMA journal_mode").fetchone()[0]
        assert mode == "wal"
        db.close()

    def test_row_factory(self, tmp_path: Path):
        db = connect(tmp_path / "test.db")
        db.execute("CREATE TABLE t (x TEXT)")
        db.execute("INSERT INTO t VALUES ('hello')")
        row = db.execute("SELECT x FROM t").fetchone()
        assert row["x"] == "hello"
        db.close()

    def test_creates_parent_dir(self, tmp_path: Path):
        db = connect(tmp_path / "nested" / "dir" / "test.db")
        assert (tmp_path / "nested" / "dir").is_dir()
        db.close()


class TestMigrations:
    def test_creates_forecast_table(self, tmp_path: Path):
        db = connect(tmp_path / "test.db")
        applied = run_migrations(db)
        assert "v001_initial" in applied

        tables = {
            row[0]
            for row in db.execute(
                "SELECT name FROM sqlite_master WHERE type='table'"
            ).fetchall()
        }
        assert {"schema_versions", "weather_forecasts"}.issubset(tables)
        db.close()

    def test_no_fahrenheit_column(self, tmp_path: Path):
        db = connect(tmp_path / "test.db")
        run_migrations(db)
        columns = {
            row["name"]
            for row in db.execute("PRAGMA table_info(weather_forecasts)").fetchall()
        }
        assert columns == {"id", "date", "temperature_c", "summary"}
        db.close()

    def test_idempotent(self, tmp_path: Path):
        db = connect(tmp_path / "test.db")
        applied1 = run_migrations(db)
        applied2 = run_migrations(db)
        assert len(applied1) > 0
        assert len(applied2) == 0
        db.close()

    def test_records_versions(self, tmp_path: Path):
        db = connect(tmp_path / "test.db")
        applied = run_migrations(db)
        recorded = [
            row["version"]
            for row in db.execute("SELECT version FROM schema_versions ORDER BY version")
        ]
        assert recorded == applied == available_migrations()
        db.close()
