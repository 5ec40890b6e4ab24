"""City name to IANA timezone registry."""

from __future__ import annotations

import re
from types import MappingProxyType


TIMEZONE_MAP = MappingProxyType(
    {
        "北京": "Asia/Shanghai",
        "上海": "Asia/Shanghai",
        "广州": "Asia/Shanghai",
        "香港": "Asia/Hong_Kong",
        "台北": "Asia/Taipei",
        "东京": "Asia/Tokyo",
        "首尔": "Asia/Seoul",
        "新加坡": "Asia/Singapore",
        "悉尼": "Australia/Sydney",
        "莫斯科": "Europe/Moscow",
        "伦敦": "Europe/London",
        "巴黎": "Europe/Paris",
        "柏林": "Europe/Berlin",
        "罗马": "Europe/Rome",
        "纽约": "America/New_York",
        "洛杉矶": "America/Los_Angeles",
        "芝加哥": "America/Chicago",
        "多伦多": "America/Toronto",
        "墨西哥城": "America/Mexico_City",
        "里约热内卢": "America/Sao_Paulo",
        "开罗": "Africa/Cairo",
        "约翰内斯堡": "Africa/Johannesburg",
        "迪拜": "Asia/Dubai",
        "孟买": "Asia/Kolkata",
        "曼谷": "Asia/Bangkok",
    }
)


def timezone_for_city(city: str) -> str | None:
    """Exact-match lookup; no trimming or normalization."""
    if not isinstance(city, str):
        return None
    return TIMEZONE_MAP.get(city)


def list_cities() -> list[str]:
    return list(TIMEZONE_MAP.keys())


def city_alternation() -> str:
    # Longest names first so a city is never shadowed by a shorter prefix.
    names = sorted(TIMEZONE_MAP.keys(), key=len, reverse=True)
    return "|".join(re.escape(n) for n in names)
