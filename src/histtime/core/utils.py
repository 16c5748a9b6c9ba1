import datetime


def as_minutes(duration):
    """Convert a datetime.timedelta to an integer number of minutes."""
    return duration.days * 24 * 60 + duration.seconds // 60


def format_duration_hm(duration):
    """Format a datetime.timedelta with minute precision, e.g. '7h42m'."""
    h, m = divmod(as_minutes(duration), 60)
    return '%dh%dm' % (h, m)


def format_time_of_day(dt, tz=None):
    """Format the time of day of an aware datetime as HH:MM:SS.

    The time is converted to `tz` first, or to the local timezone if `tz`
    is None.
    """
    return dt.astimezone(tz).strftime('%H:%M:%S')


def end_of_day(hour):
    """Return the day boundary for a workday ending at `hour` o'clock."""
    if not 0 <= hour <= 23:
        raise ValueError('bad workday end hour: %r' % hour)
    return datetime.time(hour, 0)


def checked_add(total, duration):
    """Add two timedeltas, leaving `total` unchanged on overflow."""
    try:
        return total + duration
    except OverflowError:
        return total


def clamped_sub(quota, duration):
    """Subtract two timedeltas, never going below zero.

    An overflowing subtraction also yields zero.
    """
    try:
        remaining = quota - duration
    except OverflowError:
        return datetime.timedelta(0)
    return max(remaining, datetime.timedelta(0))
