from __future__ import annotations

import datetime as dt
import re

from mcp_time_tools.datetime_common import format_calendar_date, weekday_cn_for
from mcp_time_tools.results import InvalidDate, WeekdayInfo


_YMD_RE = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})$")


def normalize_date_text(text: str) -> str:
    """Rewrite 2023年1月1日 and 2023/01/01 style input as 2023-1-1 / 2023-01-01."""
    s = str(text or "").strip()
    s = s.replace("年", "-").replace("月", "-").replace("日", "")
    s = s.replace("/", "-")
    return s.strip()


def parse_calendar_date(text: str) -> dt.date | None:
    m = _YMD_RE.match(normalize_date_text(text))
    if not m:
        return None
    try:
        return dt.date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
    except ValueError:
        return None


def resolve_weekday(text: str) -> WeekdayInfo | InvalidDate:
    d = parse_calendar_date(text)
    if d is None:
        return InvalidDate(str(text or ""))
    return WeekdayInfo(date=format_calendar_date(d), weekday=weekday_cn_for(d), iso=d.isoformat())
