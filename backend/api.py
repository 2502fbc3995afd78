"""Weather forecast HTTP API: FastAPI app serving forecasts from the store."""

import logging
import sqlite3
from collections.abc import Iterator
from contextlib import asynccontextmanager
from datetime import date, datetime

from fastapi import APIRouter, Depends, FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from backend.config.loader import config_hash, load_config
from backend.config.schema import AppConfig
from backend.service.weather_service import (
    SqliteForecastStore,
    StoreError,
    WeatherService,
)
from backend.storage import forecast_repo
from backend.storage.database import connect, run_migrations
from backend.storage.seed import seed_forecasts

logger = logging.getLogger(__name__)

router = APIRouter()


class WeatherForecastOut(BaseModel):
    id: int
    date: date
    temperatureC: int
    temperatureF: int
    summary: str | None = None


# ── Dependencies ────────────────────────────────────────────────


def get_connection(request: Request) -> Iterator[sqlite3.Connection]:
    """One connection per request, closed once the response is sent."""
    try:
        conn = connect(request.app.state.config.database.path)
    except sqlite3.Error as e:
        logger.error("Cannot open forecast database: %s", e)
        raise StoreError(str(e)) from e
    try:
        yield conn
    finally:
        conn.close()


def get_weather_service(
    conn: sqlite3.Connection = Depends(get_connection),
) -> WeatherService:
    return WeatherService(SqliteForecastStore(conn))


# ── Endpoints ───────────────────────────────────────────────────


@router.get(
    "/weatherforecast",
    name="GetWeatherForecast",
    operation_id="GetWeatherForecast",
    response_model=list[WeatherForecastOut],
)
def get_weather_forecast(
    start_date: datetime | None = Query(None, alias="startDate"),
    service: WeatherService = Depends(get_weather_service),
):
    """Forecasts ordered by date, from startDate's calendar date onward if given."""
    return [f.to_dict() for f in service.get_forecasts(start_date)]


@router.get("/health")
def get_health(conn: sqlite3.Connection = Depends(get_connection)):
    """Quick health check."""
    try:
        count = forecast_repo.count_forecasts(conn)
    except sqlite3.Error as e:
        logger.warning("Health check query failed: %s", e)
        return {"db_ok": False, "forecast_count": None}
    return {"db_ok": True, "forecast_count": count}


# ── App factory ─────────────────────────────────────────────────


async def _store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=503, content={"detail": "Forecast store unavailable"}
    )


def create_app(config: AppConfig | None = None) -> FastAPI:
    config = config or load_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        conn = connect(config.database.path)
        try:
            applied = run_migrations(conn)
            if applied:
                logger.info("Database migrated: %s", ", ".join(applied))
            if config.database.seed_on_startup:
                seed_forecasts(conn)
        finally:
            conn.close()
        logger.info(
            "Serving forecasts from %s (config %s)",
            config.database.path, config_hash(config),
        )
        yield

    app = FastAPI(title="Weather Forecast API", version="0.1.0", lifespan=lifespan)
    app.state.config = config
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StoreError, _store_error_handler)
    app.include_router(router)
    return app
