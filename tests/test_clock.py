from __future__ import annotations

from datetime import datetime, timezone
import unittest

from worktime.services.clock import format_clock_time, today_date_str


class ClockTests(unittest.TestCase):
    def test_today_uses_indian_standard_time(self) -> None:
        # 19:00 UTC is already 00:30 the next day in IST.
        self.assertEqual(today_date_str(datetime(2026, 2, 9, 19, 0, tzinfo=timezone.utc)), "2026-02-10")
        self.assertEqual(today_date_str(datetime(2026, 2, 9, 18, 29, tzinfo=timezone.utc)), "2026-02-09")

    def test_format_clock_time_is_twelve_hour_ist(self) -> None:
        self.assertEqual(format_clock_time(datetime(2026, 2, 10, 3, 35, 3, tzinfo=timezone.utc)), "09:05:03 AM")
        self.assertEqual(format_clock_time(datetime(2026, 2, 10, 7, 35, 5, tzinfo=timezone.utc)), "01:05:05 PM")
        self.assertEqual(format_clock_time(datetime(2026, 2, 10, 6, 30, 0, tzinfo=timezone.utc)), "12:00:00 PM")

    def test_naive_values_are_treated_as_utc(self) -> None:
        self.assertEqual(format_clock_time(datetime(2026, 2, 10, 18, 30, 0)), "12:00:00 AM")

    def test_format_clock_time_none(self) -> None:
        self.assertIsNone(format_clock_time(None))


if __name__ == "__main__":
    unittest.main()
