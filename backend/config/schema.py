"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field


class LogLevel(StrEnum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class DatabaseConfig(BaseModel):
    model_config = {"extra": "forbid"}

    path: str = "data/forecasts.db"
    seed_on_startup: bool = False


class ServerConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)
    cors_origins: list[str] = ["*"]


class LoggingConfig(BaseModel):
    model_config = {"extra": "forbid"}

    level: LogLevel = LogLevel.INFO


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    database: DatabaseConfig = DatabaseConfig()
    server: ServerConfig = ServerConfig()
    logging: LoggingConfig = LoggingConfig()
