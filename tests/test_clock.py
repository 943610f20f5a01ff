"""Tests for the local clock helpers."""

from datetime import date, datetime

from logsink.clock import local_midnight, local_now, next_midnight


class TestLocalMidnight:
    def test_start_of_day(self):
        assert local_midnight(date(2025, 3, 9)) == datetime(2025, 3, 9, 0, 0, 0)


class TestNextMidnight:
    def test_mid_day(self):
        assert next_midnight(datetime(2025, 1, 15, 12, 30)) == datetime(2025, 1, 16)

    def test_exactly_midnight_is_next_day(self):
        assert next_midnight(datetime(2025, 1, 16, 0, 0, 0)) == datetime(2025, 1, 17)

    def test_just_before_midnight(self):
        assert next_midnight(datetime(2025, 1, 15, 23, 59, 59, 999999)) == datetime(2025, 1, 16)

    def test_month_and_year_boundary(self):
        assert next_midnight(datetime(2024, 12, 31, 8, 0)) == datetime(2025, 1, 1)
        assert next_midnight(datetime(2024, 2, 28, 8, 0)) == datetime(2024, 2, 29)

    def test_strictly_after_now(self):
        now = local_now()
        assert next_midnight(now) > now
