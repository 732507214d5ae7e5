"""Generate synthetic daily forecasts from an injectable random source."""
from __future__ import annotations

import datetime as dt
import random
import threading
from typing import Callable, List, Optional, Protocol

from weather_api.domain import MAX_TEMPERATURE_C, MIN_TEMPERATURE_C, SUMMARIES, ForecastRecord
from weather_api.errors import InvalidArgumentError
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="weather_api/forecast_generator")


class RandomSource(Protocol):
    """Anything that can draw integers the way ``random.Random.randrange`` does."""

    def randrange(self, start: int, stop: Optional[int] = None) -> int:
        """Return a random integer in ``[start, stop)``, or ``[0, start)`` when stop is omitted."""
        ...


class ForecastGenerator:
    """Produce one forecast per day, starting tomorrow.

    Draws from the random source are serialized with a lock so a single
    generator (and its source) can be shared across request threads.
    """

    def __init__(
        self,
        rng: RandomSource | None = None,
        today: Callable[[], dt.date] = dt.date.today,
    ) -> None:
        """Initialize with a random source (defaults to a fresh ``random.Random``) and a clock."""
        self._rng = rng if rng is not None else random.Random()
        self._today = today
        self._lock = threading.Lock()

    def _draw(self) -> tuple[int, str]:
        """Draw a temperature and a summary for one record."""
        with self._lock:
            temperature_c = self._rng.randrange(MIN_TEMPERATURE_C, MAX_TEMPERATURE_C + 1)
            summary = SUMMARIES[self._rng.randrange(len(SUMMARIES))]
        return temperature_c, summary

    def generate(self, count: int) -> List[ForecastRecord]:
        """Return ``count`` forecasts for the days after today, in date order.

        A count of zero yields an empty list; a negative count raises
        :class:`InvalidArgumentError`.
        """
        if isinstance(count, bool) or not isinstance(count, int):
            raise InvalidArgumentError(f"count must be an integer, got {type(count).__name__}")
        if count < 0:
            raise InvalidArgumentError(f"count must be non-negative, got {count}")

        start = self._today()
        records: List[ForecastRecord] = []
        for offset in range(1, count + 1):
            temperature_c, summary = self._draw()
            records.append(
                ForecastRecord(
                    date=start + dt.timedelta(days=offset),
                    temperature_c=temperature_c,
                    summary=summary,
                )
            )
        logger.debug(f"Generated {len(records)} forecast records starting {start}")
        return records
