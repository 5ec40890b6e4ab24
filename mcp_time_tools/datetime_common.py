from __future__ import annotations

import datetime as dt
import time
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from mcp_time_core.env import env
from mcp_time_tools.results import TimeSnapshot


WEEKDAY_CN = ("星期日", "星期一", "星期二", "星期三", "星期四", "星期五", "星期六")

CLOCK_FORMAT = "%H:%M:%S"
CALENDAR_FORMAT = "%Y/%m/%d"


class InvalidTimezoneError(ValueError):
    def __init__(self, name: str) -> None:
        super().__init__(f"invalid timezone: {name!r}")
        self.name = name


def _zone(name: str) -> dt.tzinfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise InvalidTimezoneError(name) from e


def resolve_timezone(tz: str | None) -> dt.tzinfo | None:
    """Return the zone for tz, or the process local zone (None) when tz is blank.

    TIMEZONE, when configured, stands in for the host's local zone.
    """
    name = str(tz or "").strip()
    if name:
        return _zone(name)
    configured = str(env("TIMEZONE") or "").strip()
    if configured:
        return _zone(configured)
    return None


def resolve_now_ms(at_ms: int | None) -> int:
    if isinstance(at_ms, int) and not isinstance(at_ms, bool):
        return int(at_ms)
    return int(time.time() * 1000)


def local_datetime(now_ms: int, tz: dt.tzinfo | None) -> dt.datetime:
    # tz=None yields naive host-local wall time.
    return dt.datetime.fromtimestamp(now_ms / 1000, tz=tz)


def weekday_cn_for(d: dt.date) -> str:
    return WEEKDAY_CN[int(d.strftime("%w"))]


def format_calendar_date(d: dt.date) -> str:
    return d.strftime(CALENDAR_FORMAT)


def iso_instant(now_ms: int) -> str:
    utc = dt.datetime.fromtimestamp(now_ms / 1000, tz=dt.timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_snapshot(*, now_ms: int, tz: dt.tzinfo | None) -> TimeSnapshot:
    local = local_datetime(now_ms, tz)
    return TimeSnapshot(
        time=local.strftime(CLOCK_FORMAT),
        date=format_calendar_date(local),
        weekday=weekday_cn_for(local),
        timestamp=int(now_ms),
        iso=iso_instant(now_ms),
    )
