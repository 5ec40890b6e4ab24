"""Value types returned by the time operations.

Successful results and failures are separate classes; callers tell them apart
with isinstance() (or is_failure()). Every type renders to the JSON keys of the
MCP-Time tool replies via to_dict().
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TimeSnapshot:
    time: str
    date: str
    weekday: str
    timestamp: int
    iso: str

    def to_dict(self) -> dict:
        return {"time": self.time, "date": self.date, "weekday": self.weekday, "timestamp": self.timestamp, "iso": self.iso}


@dataclass(frozen=True)
class CityTimeSnapshot:
    snapshot: TimeSnapshot
    city: str
    timezone: str

    @property
    def time(self) -> str:
        return self.snapshot.time

    @property
    def date(self) -> str:
        return self.snapshot.date

    @property
    def weekday(self) -> str:
        return self.snapshot.weekday

    def to_dict(self) -> dict:
        return {**self.snapshot.to_dict(), "city": self.city, "timezone": self.timezone}


@dataclass(frozen=True)
class TimeDifference:
    city_a: str
    city_b: str
    timezone_a: str
    timezone_b: str
    diff_hours: float
    diff_minutes: float
    message: str

    def to_dict(self) -> dict:
        return {
            "cityA": self.city_a,
            "cityB": self.city_b,
            "timezoneA": self.timezone_a,
            "timezoneB": self.timezone_b,
            "diffHours": self.diff_hours,
            "diffMinutes": self.diff_minutes,
            "message": self.message,
        }


@dataclass(frozen=True)
class RelativeDate:
    date: str
    weekday: str
    relative_text: str
    iso: str

    def to_dict(self) -> dict:
        return {"date": self.date, "weekday": self.weekday, "relativeText": self.relative_text, "iso": self.iso}


@dataclass(frozen=True)
class WeekdayInfo:
    date: str
    weekday: str
    iso: str

    def to_dict(self) -> dict:
        return {"date": self.date, "weekday": self.weekday, "iso": self.iso}


@dataclass(frozen=True)
class NotFound:
    name: str

    @property
    def message(self) -> str:
        return f"未知的城市：{self.name}"

    def to_dict(self) -> dict:
        return {"error": self.message}


@dataclass(frozen=True)
class InvalidDate:
    text: str

    @property
    def message(self) -> str:
        return "无效的日期格式"

    def to_dict(self) -> dict:
        return {"error": self.message}


@dataclass(frozen=True)
class InvalidTimezone:
    name: str

    @property
    def message(self) -> str:
        return f"无效的时区：{self.name}"

    def to_dict(self) -> dict:
        return {"error": self.message}


@dataclass(frozen=True)
class DateOutOfRange:
    days: int

    @property
    def message(self) -> str:
        return f"日期超出可表示范围：{self.days}天"

    def to_dict(self) -> dict:
        return {"error": self.message}


def is_failure(value: object) -> bool:
    return isinstance(value, (NotFound, InvalidDate, InvalidTimezone, DateOutOfRange))
