"""
Date Helpers

Meal logs are stored as naive UTC datetimes and grouped by UTC calendar day.
"""

from datetime import datetime, timedelta, timezone


def utcnow():
    """Current time as a naive UTC datetime, the format stored in meal_log."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def today_utc():
    return utcnow().date()


def day_bounds(day):
    """Return (start, end) datetimes covering the calendar day `day`, end exclusive."""
    start = datetime(day.year, day.month, day.day)
    return start, start + timedelta(days=1)


def window_start(today, days):
    """Midnight `days` calendar days before `today`."""
    start, _ = day_bounds(today)
    return start - timedelta(days=days)
