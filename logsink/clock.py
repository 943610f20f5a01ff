"""Local wall-clock helpers used for midnight rollover."""

from datetime import date, datetime, time, timedelta

ONE_DAY = timedelta(days=1)


def local_now() -> datetime:
    return datetime.now()


def local_midnight(day: date) -> datetime:
    """Return the local midnight that starts *day*."""
    return datetime.combine(day, time.min)


def next_midnight(moment: datetime) -> datetime:
    """Return the first local midnight strictly after *moment*."""
    return local_midnight(moment.date()).replace(tzinfo=moment.tzinfo) + ONE_DAY
