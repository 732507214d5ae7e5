"""Summary statistics over a set of forecast records."""
from __future__ import annotations

from typing import Iterable

from weather_api.domain import ForecastRecord, TemperatureStatistics
from weather_api.errors import InvalidArgumentError


def aggregate(records: Iterable[ForecastRecord]) -> TemperatureStatistics:
    """Return the highest, lowest and mean Celsius temperature of ``records``.

    Raises :class:`InvalidArgumentError` when ``records`` is empty.
    """
    temperatures = [record.temperature_c for record in records]
    if not temperatures:
        raise InvalidArgumentError("cannot aggregate an empty sequence of forecasts")
    return TemperatureStatistics(
        highest=max(temperatures),
        lowest=min(temperatures),
        average=sum(temperatures) / len(temperatures),
    )
