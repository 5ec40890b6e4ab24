"""Rule-based classifier for natural-language time queries.

Rules are tried in order and the first match decides the intent:

1. current time      现在几点 / 当前时间 / 现在时间 / 几点了
2. city time         北京时间 / 纽约的时间 / 东京几点了
3. time difference   纽约和东京的时差 / 北京和伦敦之间的时差
4. relative date     今天 / 明天 / 大后天 / 3天后 / 十天前
5. date weekday      2023年1月1日是星期几 / 2023-01-01周几
6. unknown
"""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass
from typing import Any, Callable, ClassVar, Union

from mcp_time_tools.results import (
    CityTimeSnapshot,
    DateOutOfRange,
    InvalidDate,
    InvalidTimezone,
    NotFound,
    RelativeDate,
    TimeDifference,
    TimeSnapshot,
    WeekdayInfo,
)
from mcp_time_tools.timecalc import city_time, current_time, relative_date, time_difference
from mcp_time_tools.weekday import resolve_weekday
from mcp_time_tools.zones import city_alternation


_CN_DIGITS = {"零": 0, "〇": 0, "一": 1, "二": 2, "两": 2, "三": 3, "四": 4, "五": 5, "六": 6, "七": 7, "八": 8, "九": 9}

RELATIVE_DAY_WORDS = {"今天": 0, "明天": 1, "后天": 2, "大后天": 3, "昨天": -1, "前天": -2, "大前天": -3}


def parse_cn_number(text: str) -> int | None:
    s = str(text or "").strip()
    if not s:
        return None
    if re.fullmatch(r"\d+", s):
        return int(s)
    total = 0
    cur = 0
    prev = ""
    for ch in s:
        if ch == "十":
            if prev == "十":
                return None
            cur = 1 if cur == 0 else cur
            total += cur * 10
            cur = 0
            prev = ch
            continue
        # Digits only combine through 十; "二三" is not a number.
        if ch not in _CN_DIGITS or (prev and prev != "十"):
            return None
        cur += int(_CN_DIGITS[ch])
        prev = ch
    total += cur
    return int(total) if total >= 0 else None


@dataclass(frozen=True)
class CurrentTimeIntent:
    type: ClassVar[str] = "current_time"

    def run(self, now_ms: int | None) -> TimeSnapshot | InvalidTimezone:
        return current_time(now_ms=now_ms)


@dataclass(frozen=True)
class CityTimeIntent:
    city: str
    type: ClassVar[str] = "city_time"

    def run(self, now_ms: int | None) -> CityTimeSnapshot | NotFound:
        return city_time(self.city, now_ms=now_ms)


@dataclass(frozen=True)
class TimeDifferenceIntent:
    cityA: str
    cityB: str
    type: ClassVar[str] = "time_difference"

    def run(self, now_ms: int | None) -> TimeDifference | NotFound:
        return time_difference(self.cityA, self.cityB, now_ms=now_ms)


@dataclass(frozen=True)
class RelativeDateIntent:
    days: int
    type: ClassVar[str] = "relative_date"

    def run(self, now_ms: int | None) -> RelativeDate | InvalidTimezone | DateOutOfRange:
        return relative_date(self.days, now_ms=now_ms)


@dataclass(frozen=True)
class DateWeekdayIntent:
    date: str
    type: ClassVar[str] = "date_weekday"

    def run(self, now_ms: int | None) -> WeekdayInfo | InvalidDate:
        return resolve_weekday(self.date)


@dataclass(frozen=True)
class UnknownIntent:
    query: str
    type: ClassVar[str] = "unknown"

    def run(self, now_ms: int | None) -> None:
        return None


QueryIntent = Union[
    CurrentTimeIntent,
    CityTimeIntent,
    TimeDifferenceIntent,
    RelativeDateIntent,
    DateWeekdayIntent,
    UnknownIntent,
]


@dataclass(frozen=True)
class QueryResult:
    intent: QueryIntent
    data: Any

    @property
    def type(self) -> str:
        return self.intent.type

    def to_dict(self) -> dict:
        out: dict = {"type": self.type, **asdict(self.intent)}
        if not isinstance(self.intent, UnknownIntent):
            out["data"] = self.data.to_dict() if self.data is not None else None
        return out


def _relative_intent(m: re.Match) -> RelativeDateIntent | None:
    word = m.group("word")
    if word:
        return RelativeDateIntent(days=RELATIVE_DAY_WORDS[word])
    n = parse_cn_number(m.group("n"))
    if n is None:
        return None
    return RelativeDateIntent(days=n if m.group("dir") == "后" else -n)


_CITIES = city_alternation()


@dataclass(frozen=True)
class _Rule:
    name: str
    pattern: re.Pattern
    build: Callable[[re.Match], QueryIntent | None]


RULES: tuple[_Rule, ...] = (
    _Rule(
        "current_time",
        re.compile(r"现在几点|当前时间|现在时间|几点了"),
        lambda m: CurrentTimeIntent(),
    ),
    _Rule(
        "city_time",
        re.compile(rf"({_CITIES})(?:的)?(?:时间|几点了)"),
        lambda m: CityTimeIntent(city=m.group(1)),
    ),
    _Rule(
        "time_difference",
        re.compile(rf"({_CITIES})和({_CITIES})(?:之间)?(?:的)?时差"),
        lambda m: TimeDifferenceIntent(cityA=m.group(1), cityB=m.group(2)),
    ),
    _Rule(
        "relative_date",
        re.compile(
            r"(?P<word>今天|明天|大后天|后天|昨天|大前天|前天)"
            r"|(?P<n>\d+|[零〇一二两三四五六七八九十]+)\s*天\s*(?:以|之)?(?P<dir>[后前])"
        ),
        _relative_intent,
    ),
    _Rule(
        "date_weekday",
        re.compile(r"(\d{4}[-/年]\d{1,2}[-/月]\d{1,2}日?)(?:是)?(?:星期几|周几|礼拜几)"),
        lambda m: DateWeekdayIntent(date=m.group(1)),
    ),
)


def classify(query: str) -> QueryIntent:
    text = str(query or "")
    for rule in RULES:
        # A rule may decline a match, e.g. an unreadable numeral, and try its next one.
        for m in rule.pattern.finditer(text):
            intent = rule.build(m)
            if intent is not None:
                return intent
    return UnknownIntent(query=text)


def parse_time_query(query: str, *, now_ms: int | None = None) -> QueryResult:
    intent = classify(query)
    return QueryResult(intent=intent, data=intent.run(now_ms))
