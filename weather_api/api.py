"""HTTP API exposing synthetic forecasts and temperature statistics."""

import random
from typing import List

from fastapi import APIRouter, Depends

from .config import settings
from .domain import ForecastRecord, TemperatureStatistics
from .forecast_generator import ForecastGenerator
from .temperature_stats import aggregate
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="weather_api/api")

FORECAST_DAYS = 5
STATS_SAMPLE_DAYS = 10

router = APIRouter()
_generator = ForecastGenerator(rng=random.Random(settings.random_seed))


def get_forecast_generator() -> ForecastGenerator:
    """Return the process-wide forecast generator."""
    return _generator


@router.get(
    "/weatherforecast",
    name="GetWeatherForecast",
    response_model=List[ForecastRecord],
)
def get_weather_forecast(generator: ForecastGenerator = Depends(get_forecast_generator)):
    """Return synthetic forecasts for the next five days."""
    forecast = generator.generate(FORECAST_DAYS)
    logger.debug(f"Serving {len(forecast)} forecast records")
    return forecast


@router.get(
    "/temperaturestats",
    name="GetTemperatureStats",
    response_model=TemperatureStatistics,
)
def get_temperature_stats(generator: ForecastGenerator = Depends(get_forecast_generator)):
    """Return highest, lowest and average temperature over a ten-day synthetic forecast."""
    stats = aggregate(generator.generate(STATS_SAMPLE_DAYS))

    logger.info(f"Highest Temperature: {stats.highest}C")
    logger.info(f"Lowest Temperature: {stats.lowest}C")
    logger.info(f"Average Temperature: {stats.average}C")

    return stats
