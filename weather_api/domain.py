"""Value objects for synthetic forecasts and their temperature statistics.

These models are the contract between the generator/aggregator core and the
HTTP layer. They are immutable and serialize with camelCase keys.
"""

from __future__ import annotations

import math
import datetime as dt
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel


SUMMARIES: Tuple[str, ...] = (
    "Freezing",
    "Bracing",
    "Chilly",
    "Cool",
    "Mild",
    "Warm",
    "Balmy",
    "Hot",
    "Sweltering",
    "Scorching",
)

MIN_TEMPERATURE_C = -20
MAX_TEMPERATURE_C = 54

# Celsius degrees per Fahrenheit degree, as used by the conversion below.
_C_PER_F = 0.5556


class _FrozenModel(BaseModel):
    """Base model for immutable camelCase payloads."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ForecastRecord(_FrozenModel):
    """One day's synthetic forecast."""
    date: dt.date
    temperature_c: int = Field(ge=MIN_TEMPERATURE_C, le=MAX_TEMPERATURE_C)
    summary: str

    @computed_field(alias="temperatureF")
    @property
    def temperature_f(self) -> int:
        """Fahrenheit temperature derived from the stored Celsius value."""
        return 32 + math.floor(self.temperature_c / _C_PER_F)


class TemperatureStatistics(_FrozenModel):
    """Highest, lowest and mean Celsius temperature over a set of forecasts."""
    highest: int = Field(alias="highestTemperature")
    lowest: int = Field(alias="lowestTemperature")
    average: float = Field(alias="averageTemperature")
