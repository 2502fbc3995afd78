"""Weather forecast record model."""

from dataclasses import dataclass
from datetime import date
from typing import Any

SUMMARY_MAX_LENGTH = 50
CELSIUS_PER_FAHRENHEIT = 0.5556


def fahrenheit_from_celsius(temperature_c: int) -> int:
    """Convert Celsius to Fahrenheit, truncating toward zero."""
    return 32 + int(temperature_c / CELSIUS_PER_FAHRENHEIT)


@dataclass(frozen=True)
class WeatherForecast:
    id: int
    date: date
    temperature_c: int
    summary: str | None = None

    def __post_init__(self) -> None:
        if self.summary is not None and len(self.summary) > SUMMARY_MAX_LENGTH:
            raise ValueError(
                f"summary must be at most {SUMMARY_MAX_LENGTH} characters, "
                f"got {len(self.summary)}"
            )

    @property
    def temperature_f(self) -> int:
        return fahrenheit_from_celsius(self.temperature_c)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "temperatureC": self.temperature_c,
            "temperatureF": self.temperature_f,
            "summary": self.summary,
        }
