"""Current time, city time, time difference and relative date operations.

Every operation takes an optional ``now_ms`` (epoch milliseconds). When omitted
the clock is read exactly once per call, so all fields of a result describe the
same instant.
"""

from __future__ import annotations

import datetime as dt

from mcp_time_tools.datetime_common import (
    InvalidTimezoneError,
    format_calendar_date,
    format_snapshot,
    local_datetime,
    resolve_now_ms,
    resolve_timezone,
    weekday_cn_for,
)
from mcp_time_tools.results import (
    CityTimeSnapshot,
    DateOutOfRange,
    InvalidTimezone,
    NotFound,
    RelativeDate,
    TimeDifference,
    TimeSnapshot,
)
from mcp_time_tools.zones import timezone_for_city


_RELATIVE_WORDS = {0: "今天", 1: "明天", 2: "后天", -1: "昨天", -2: "前天"}


def current_time(timezone: str | None = None, *, now_ms: int | None = None) -> TimeSnapshot | InvalidTimezone:
    try:
        tz = resolve_timezone(timezone)
    except InvalidTimezoneError as e:
        return InvalidTimezone(e.name)
    return format_snapshot(now_ms=resolve_now_ms(now_ms), tz=tz)


def city_time(city: str, *, now_ms: int | None = None) -> CityTimeSnapshot | NotFound:
    tz_name = timezone_for_city(city)
    if not tz_name:
        return NotFound(city)
    snapshot = format_snapshot(now_ms=resolve_now_ms(now_ms), tz=resolve_timezone(tz_name))
    return CityTimeSnapshot(snapshot=snapshot, city=city, timezone=tz_name)


def _wall_clock(now_ms: int, tz_name: str) -> dt.datetime:
    local = local_datetime(now_ms, resolve_timezone(tz_name))
    return local.replace(second=0, microsecond=0, tzinfo=None)


def format_hours(hours: float) -> str:
    if float(hours).is_integer():
        return str(int(hours))
    return f"{hours:g}"


def time_difference(city_a: str, city_b: str, *, now_ms: int | None = None) -> TimeDifference | NotFound:
    """Difference between the two cities' wall clocks at one instant (B - A).

    Each wall clock is truncated to the minute and read back as a naive local
    time, so 30/45 minute offsets come out as fractional hours.
    """
    tz_a = timezone_for_city(city_a)
    if not tz_a:
        return NotFound(city_a)
    tz_b = timezone_for_city(city_b)
    if not tz_b:
        return NotFound(city_b)

    at = resolve_now_ms(now_ms)
    delta = _wall_clock(at, tz_b) - _wall_clock(at, tz_a)
    diff_minutes = delta.total_seconds() / 60
    diff_hours = diff_minutes / 60
    verb = "快" if diff_hours > 0 else "慢"
    return TimeDifference(
        city_a=city_a,
        city_b=city_b,
        timezone_a=tz_a,
        timezone_b=tz_b,
        diff_hours=diff_hours,
        diff_minutes=diff_hours * 60,
        message=f"{city_b}比{city_a}{verb}{format_hours(abs(diff_hours))}小时",
    )


def relative_label(days: int) -> str:
    n = int(days)
    if n in _RELATIVE_WORDS:
        return _RELATIVE_WORDS[n]
    if n > 0:
        return f"{n}天后"
    return f"{abs(n)}天前"


def relative_date(
    days: int, timezone: str | None = None, *, now_ms: int | None = None
) -> RelativeDate | InvalidTimezone | DateOutOfRange:
    try:
        tz = resolve_timezone(timezone)
    except InvalidTimezoneError as e:
        return InvalidTimezone(e.name)
    today = local_datetime(resolve_now_ms(now_ms), tz).date()
    # Calendar-day arithmetic on the local date, unaffected by DST shifts.
    try:
        target = today + dt.timedelta(days=int(days))
    except (OverflowError, ValueError):
        return DateOutOfRange(int(days))
    return RelativeDate(
        date=format_calendar_date(target),
        weekday=weekday_cn_for(target),
        relative_text=relative_label(days),
        iso=target.isoformat(),
    )
