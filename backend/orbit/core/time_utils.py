from datetime import datetime, timedelta, timezone

from orbit.core.constants import WEEKDAYS


def utcnow() -> datetime:
    """Default clock: the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def to_local_datetime(dt, tz_name: str | None = None):
    """Convert a datetime from source tz (assume UTC if naive) to local or given tz.

    - If `tz_name` is 'local' or None: use system local timezone.
    - If `tz_name` is IANA tz name (e.g., 'America/New_York'): use that.
    - If `dt` has no tzinfo, assume UTC.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    if tz_name and tz_name != "local":
        from zoneinfo import ZoneInfo

        return dt.astimezone(ZoneInfo(tz_name))
    return dt.astimezone()


def to_utc(dt) -> datetime:
    """Normalize a datetime to aware UTC (naive values are taken as UTC)."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def localize(naive, tz_name: str | None = None) -> datetime:
    """Attach a tz to a naive local wall-clock time, applying that day's DST rules.

    For 'local' (or None) the system rules are used; a naive datetime passed to
    astimezone() is interpreted as system local time.
    """
    if tz_name and tz_name != "local":
        from zoneinfo import ZoneInfo

        return naive.replace(tzinfo=ZoneInfo(tz_name))
    return naive.astimezone()


def week_bounds(now, week_start: str = "sunday", tz_name: str | None = None):
    """Return the (start, end) of the week containing `now`, both in UTC.

    The week starts at local midnight on `week_start` and ends one
    microsecond before the next week starts, so both ends are inclusive.
    Midnights are resolved with the offset in effect on their own day, so a
    DST change inside the week does not shift the window.
    Example: now=Wed 2026-10-14 12:00Z, week_start='sunday', tz 'UTC'
      -> (2026-10-11 00:00:00Z, 2026-10-17 23:59:59.999999Z)
    """
    today = to_local_datetime(now, tz_name).date()
    offset = (today.weekday() - WEEKDAYS[week_start.lower()]) % 7
    first_day = today - timedelta(days=offset)
    start = datetime(first_day.year, first_day.month, first_day.day)
    start_utc = to_utc(localize(start, tz_name))
    next_start_utc = to_utc(localize(start + timedelta(days=7), tz_name))
    return start_utc, next_start_utc - timedelta(microseconds=1)


def local_date_key(dt, tz_name: str | None = None) -> str:
    """Calendar date of `dt` in the given tz as 'YYYY-MM-DD'."""
    return to_local_datetime(dt, tz_name).date().isoformat()
