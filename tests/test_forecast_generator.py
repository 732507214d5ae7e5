import datetime as dt
import math
import random
import threading
import unittest

from weather_api.domain import SUMMARIES
from weather_api.errors import InvalidArgumentError
from weather_api.forecast_generator import ForecastGenerator


class FakeRandom:
    """Replays fixed temperatures and summary indexes."""

    def __init__(self, temperatures, indexes):
        self.temperatures = iter(temperatures)
        self.indexes = iter(indexes)
        self.calls = []

    def randrange(self, start, stop=None):
        self.calls.append((start, stop))
        if stop is None:
            return next(self.indexes)
        return next(self.temperatures)


TODAY = dt.date(2026, 10, 17)


class TestForecastGenerator(unittest.TestCase):
    def test_single_record_from_fixed_source(self):
        gen = ForecastGenerator(rng=FakeRandom([10], [0]), today=lambda: TODAY)
        records = gen.generate(1)

        self.assertEqual(len(records), 1)
        rec = records[0]
        self.assertEqual(rec.date, dt.date(2026, 10, 18))
        self.assertEqual(rec.temperature_c, 10)
        self.assertEqual(rec.temperature_f, 32 + math.floor(10 / 0.5556))
        self.assertEqual(rec.temperature_f, 49)
        self.assertEqual(rec.summary, "Freezing")

    def test_draw_ranges_match_vocabulary_and_bounds(self):
        rng = FakeRandom([0, 0], [0, 0])
        ForecastGenerator(rng=rng, today=lambda: TODAY).generate(2)
        self.assertEqual(rng.calls, [(-20, 55), (len(SUMMARIES), None)] * 2)

    def test_dates_are_consecutive_starting_tomorrow(self):
        gen = ForecastGenerator(rng=random.Random(1), today=lambda: dt.date(2024, 12, 30))
        records = gen.generate(5)
        self.assertEqual(
            [r.date for r in records],
            [dt.date(2024, 12, 31), dt.date(2025, 1, 1), dt.date(2025, 1, 2),
             dt.date(2025, 1, 3), dt.date(2025, 1, 4)],
        )

    def test_values_stay_in_range(self):
        gen = ForecastGenerator(rng=random.Random(42), today=lambda: TODAY)
        records = gen.generate(500)
        self.assertEqual(len(records), 500)
        for rec in records:
            self.assertGreaterEqual(rec.temperature_c, -20)
            self.assertLessEqual(rec.temperature_c, 54)
            self.assertIn(rec.summary, SUMMARIES)

    def test_zero_count_returns_empty(self):
        gen = ForecastGenerator(rng=FakeRandom([], []), today=lambda: TODAY)
        self.assertEqual(gen.generate(0), [])

    def test_negative_count_raises(self):
        gen = ForecastGenerator(today=lambda: TODAY)
        with self.assertRaises(InvalidArgumentError):
            gen.generate(-1)

    def test_non_integer_count_raises(self):
        gen = ForecastGenerator(today=lambda: TODAY)
        for bad in (2.5, "3", True):
            with self.assertRaises(InvalidArgumentError):
                gen.generate(bad)

    def test_invalid_argument_is_a_value_error(self):
        with self.assertRaises(ValueError):
            ForecastGenerator().generate(-3)

    def test_default_clock_uses_local_date(self):
        records = ForecastGenerator(rng=random.Random(0)).generate(1)
        self.assertEqual(records[0].date, dt.date.today() + dt.timedelta(days=1))

    def test_shared_generator_across_threads(self):
        gen = ForecastGenerator(rng=random.Random(3), today=lambda: TODAY)
        results = []
        lock = threading.Lock()

        def worker():
            out = gen.generate(50)
            with lock:
                results.append(out)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        self.assertEqual(len(results), 8)
        for out in results:
            self.assertEqual(len(out), 50)
            self.assertEqual(out[0].date, dt.date(2026, 10, 18))


if __name__ == "__main__":
    unittest.main()
