"""YAML config loader with environment and command-line overrides."""

import hashlib
import logging
import os
from pathlib import Path

import yaml

from backend.config.schema import AppConfig

DB_PATH_ENV = "BACKEND_DB_PATH"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def load_config(path: str | Path | None = None, db_path: str | None = None) -> AppConfig:
    """Load and validate config from a YAML file.

    With no path, or an empty file, the defaults apply. An explicit path that
    does not exist raises FileNotFoundError. The database path is taken,
    in order of precedence, from db_path, the BACKEND_DB_PATH environment
    variable, then the file.
    """
    raw: dict = {}
    if path is not None:
        with open(path) as f:
            raw = yaml.safe_load(f) or {}

    config = AppConfig(**raw)

    override = db_path or os.environ.get(DB_PATH_ENV)
    if override:
        config = config.model_copy(
            update={"database": config.database.model_copy(update={"path": override})}
        )
    return config


def config_hash(config: AppConfig) -> str:
    """Compute a deterministic SHA256 hash of the config."""
    data = config.model_dump_json(indent=None)
    return hashlib.sha256(data.encode()).hexdigest()[:16]


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
