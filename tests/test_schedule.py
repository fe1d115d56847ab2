"""Tests for rotation deadlines and the rotate-before-write decision."""

from datetime import datetime, timedelta, timezone

import pytest

from dately_log.schedule import local_naive, next_rotation_deadline, should_rotate


class TestNextRotationDeadline:
    @pytest.mark.parametrize("now", [
        datetime(2025, 1, 15, 0, 0, 0),
        datetime(2025, 1, 15, 0, 0, 1),
        datetime(2025, 1, 15, 12, 30, 0),
        datetime(2025, 1, 15, 23, 59, 59, 999999),
    ])
    def test_next_midnight(self, now):
        assert next_rotation_deadline(now) == datetime(2025, 1, 16)

    def test_exactly_midnight_moves_a_full_day(self):
        now = datetime(2025, 1, 15)
        deadline = next_rotation_deadline(now)
        assert deadline == now + timedelta(hours=24)

    def test_month_and_year_rollover(self):
        assert next_rotation_deadline(datetime(2025, 1, 31, 8)) == datetime(2025, 2, 1)
        assert next_rotation_deadline(datetime(2024, 12, 31, 8)) == datetime(2025, 1, 1)

    def test_always_within_one_day(self):
        now = datetime(2025, 6, 1, 3, 4, 5)
        for minutes in range(0, 24 * 60, 37):
            t = now + timedelta(minutes=minutes)
            deadline = next_rotation_deadline(t)
            assert t < deadline <= t + timedelta(hours=24)


class TestShouldRotate:
    DEADLINE = datetime(2025, 1, 16)
    BEFORE = datetime(2025, 1, 15, 23, 0)

    def test_fits(self):
        assert not should_rotate(self.BEFORE, 30, 60, 100, self.DEADLINE)

    def test_exactly_full_fits(self):
        assert not should_rotate(self.BEFORE, 40, 60, 100, self.DEADLINE)
        assert not should_rotate(self.BEFORE, 0, 100, 100, self.DEADLINE)

    def test_would_overflow(self):
        assert should_rotate(self.BEFORE, 41, 60, 100, self.DEADLINE)

    def test_deadline_reached(self):
        assert should_rotate(self.DEADLINE, 1, 0, 100, self.DEADLINE)

    def test_deadline_passed(self):
        assert should_rotate(self.DEADLINE + timedelta(seconds=5), 1, 0, 100, self.DEADLINE)


class TestLocalNaive:
    def test_naive_passes_through(self):
        now = datetime(2025, 1, 15, 12, 0, 0)
        assert local_naive(now) is now

    def test_aware_becomes_local_wall_clock(self):
        aware = datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc)
        result = local_naive(aware)
        assert result.tzinfo is None
        assert result == aware.astimezone().replace(tzinfo=None)
