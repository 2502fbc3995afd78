"""CLI entry point for the weather forecast backend."""

import argparse
import json
from datetime import datetime
from pathlib import Path

from backend.config.loader import configure_logging, load_config
from backend.service.weather_service import (
    SqliteForecastStore,
    StoreError,
    WeatherService,
)
from backend.storage.database import connect, run_migrations
from backend.storage.seed import seed_forecasts

DEFAULT_CONFIG = "config.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="backend",
        description="Weather forecast sample backend",
    )
    parser.add_argument(
        "--config",
        default=None,
        help=f"Config YAML path (default: {DEFAULT_CONFIG} if present)",
    )
    parser.add_argument("--db", default=None, help="SQLite DB path (overrides config)")

    sub = parser.add_subparsers(dest="command")

    sub.add_parser("migrate", help="Apply pending schema migrations")

    seed_p = sub.add_parser("seed", help="Insert sample forecasts")
    seed_p.add_argument(
        "--replace", action="store_true", help="Delete existing forecasts first"
    )

    fc_p = sub.add_parser("forecasts", help="List forecasts in date order")
    fc_p.add_argument(
        "--start-date",
        type=datetime.fromisoformat,
        default=None,
        help="Only forecasts on or after this date (ISO date or datetime)",
    )
    fc_p.add_argument("--json", action="store_true", help="Print JSON")

    serve_p = sub.add_parser("serve", help="Run the HTTP API")
    serve_p.add_argument("--host", default=None)
    serve_p.add_argument("--port", type=int, default=None)

    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    config_path = args.config
    if config_path is None and Path(DEFAULT_CONFIG).exists():
        config_path = DEFAULT_CONFIG
    try:
        config = load_config(config_path, db_path=args.db)
    except FileNotFoundError:
        print(f"Error: config file not found: {config_path}")
        return 1
    configure_logging(config.logging.level.value)

    if args.command == "migrate":
        return _cmd_migrate(config)
    elif args.command == "seed":
        return _cmd_seed(config, args)
    elif args.command == "forecasts":
        return _cmd_forecasts(config, args)
    elif args.command == "serve":
        return _cmd_serve(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_migrate(config) -> int:
    conn = connect(config.database.path)
    try:
        applied = run_migrations(conn)
    finally:
        conn.close()
    if applied:
        print(f"Applied: {', '.join(applied)}")
    else:
        print("Database up to date")
    return 0


def _cmd_seed(config, args) -> int:
    conn = connect(config.database.path)
    try:
        run_migrations(conn)
        inserted = seed_forecasts(conn, replace=args.replace)
    finally:
        conn.close()
    print(f"Seeded {inserted} forecasts")
    return 0


def _cmd_forecasts(config, args) -> int:
    conn = connect(config.database.path)
    try:
        run_migrations(conn)
        service = WeatherService(SqliteForecastStore(conn))
        forecasts = service.get_forecasts(args.start_date)
    except StoreError as e:
        print(f"Error: {e}")
        return 1
    finally:
        conn.close()

    if args.json:
        print(json.dumps([f.to_dict() for f in forecasts], indent=2))
        return 0
    if not forecasts:
        print("No forecasts")
        return 0
    for f in forecasts:
        print(
            f"{f.date.isoformat()}  {f.temperature_c:>4}C  {f.temperature_f:>4}F  "
            f"{f.summary or '-'}"
        )
    return 0


def _cmd_serve(config, args) -> int:
    import uvicorn

    from backend.api import create_app

    uvicorn.run(
        create_app(config),
        host=args.host or config.server.host,
        port=args.port or config.server.port,
        log_level=config.logging.level.value.lower(),
    )
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    print("Use: config show")
    return 1
