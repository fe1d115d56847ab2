"""Rotation deadlines and the per-record rotate-or-not decision."""

from datetime import datetime, timedelta

ONE_DAY = timedelta(hours=24)


def local_naive(moment: datetime) -> datetime:
    """Convert an aware datetime to naive local time; naive values pass through."""
    if moment.tzinfo is None:
        return moment
    return moment.astimezone().replace(tzinfo=None)


def next_rotation_deadline(now: datetime) -> datetime:
    """Next local midnight strictly after *now*; always within (now, now + 24h]."""
    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
    if midnight > now:
        return midnight
    return midnight + ONE_DAY


def is_day_boundary(now: datetime, deadline: datetime) -> bool:
    return now >= deadline


def should_rotate(now: datetime, formatted_size: int, current_size: int,
                  max_size: int, deadline: datetime) -> bool:
    """Rotate before writing if the day ended or the write would overflow."""
    return is_day_boundary(now, deadline) or current_size + formatted_size > max_size
