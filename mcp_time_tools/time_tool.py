"""MCP-Time tools."""

from __future__ import annotations

import json
import logging
from typing import Annotated

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from mcp_time_core.tooling import register_decorated, tool
from mcp_time_tools.query_parser import parse_time_query
from mcp_time_tools.results import DateOutOfRange, InvalidTimezone, is_failure
from mcp_time_tools.timecalc import city_time, current_time, relative_date, time_difference
from mcp_time_tools.weekday import resolve_weekday
from mcp_time_tools.zones import list_cities


logger = logging.getLogger(__name__)

AtMs = Annotated[int | None, Field(description="可选：以该 Unix 毫秒时间戳代替当前时刻")]


def _reply(text: str, data: dict | None = None) -> str:
    return json.dumps({"text": text, "data": data}, ensure_ascii=False, indent=2)


def _timezone_suffix(timezone: str | None) -> str:
    name = str(timezone or "").strip()
    return f"（{name}时区）" if name else ""


def _time_sentence(info, prefix: str = "") -> str:
    return f"{prefix}当前时间是 {info.time}，{info.date} {info.weekday}"


def _city_unknown(city: str) -> str:
    return f"抱歉，我不知道{city}的时区信息。"


@tool(name="getCurrentTime", title="获取当前时间", description="获取当前时间，可指定时区")
def get_current_time(
    timezone: Annotated[str | None, Field(description="时区标识符，如 'Asia/Shanghai'")] = None,
    at_ms: AtMs = None,
) -> str:
    info = current_time(timezone, now_ms=at_ms)
    if isinstance(info, InvalidTimezone):
        logger.warning("getCurrentTime: %s", info.message)
        return _reply(f"错误：{info.message}")
    return _reply(_time_sentence(info) + _timezone_suffix(timezone), info.to_dict())


@tool(name="getCityTime", title="获取城市时间", description="获取指定城市的当前时间")
def get_city_time(
    city: Annotated[str, Field(description="城市名称，如'北京'、'纽约'等")],
    at_ms: AtMs = None,
) -> str:
    info = city_time(city, now_ms=at_ms)
    if is_failure(info):
        logger.info("getCityTime: unknown city %r", city)
        return _reply(_city_unknown(city))
    return _reply(_time_sentence(info, prefix=city), info.to_dict())


@tool(name="getTimeDifference", title="计算城市时差", description="计算两个城市之间的时差")
def get_time_difference(
    cityA: Annotated[str, Field(description="第一个城市名称")],
    cityB: Annotated[str, Field(description="第二个城市名称")],
    at_ms: AtMs = None,
) -> str:
    info = time_difference(cityA, cityB, now_ms=at_ms)
    if is_failure(info):
        logger.info("getTimeDifference: %s", info.message)
        return _reply(f"抱歉，我无法计算{cityA}和{cityB}之间的时差。请确保城市名称正确。")
    return _reply(info.message, info.to_dict())


@tool(name="getRelativeDate", title="计算相对日期", description="计算相对于今天若干天的日期")
def get_relative_date(
    days: Annotated[int, Field(description="天数偏移量，正数为未来，负数为过去")],
    timezone: Annotated[str | None, Field(description="时区标识符")] = None,
    at_ms: AtMs = None,
) -> str:
    info = relative_date(days, timezone, now_ms=at_ms)
    if is_failure(info):
        logger.warning("getRelativeDate: %s", info.message)
        return _reply(f"错误：{info.message}")
    return _reply(f"{info.relative_text}是 {info.date} {info.weekday}" + _timezone_suffix(timezone), info.to_dict())


@tool(name="getWeekday", title="查询星期几", description="获取指定日期是星期几")
def get_weekday(
    date: Annotated[str, Field(description="日期字符串，如 '2023-01-01' 或 '2023年1月1日'")],
) -> str:
    info = resolve_weekday(date)
    if is_failure(info):
        logger.info("getWeekday: invalid date %r", date)
        return _reply(info.message)
    return _reply(f"{date} 是 {info.weekday}", info.to_dict())


def _describe_query(result) -> str:
    intent = result.intent
    data = result.data
    if isinstance(data, (InvalidTimezone, DateOutOfRange)):
        return f"错误：{data.message}"
    if result.type == "current_time":
        return _time_sentence(data)
    if result.type == "city_time":
        return _city_unknown(intent.city) if is_failure(data) else _time_sentence(data, prefix=intent.city)
    if result.type == "time_difference":
        if is_failure(data):
            return f"抱歉，我无法计算{intent.cityA}和{intent.cityB}之间的时差。"
        return data.message
    if result.type == "relative_date":
        return f"{data.relative_text}是 {data.date} {data.weekday}"
    if result.type == "date_weekday":
        return data.message if is_failure(data) else f"{intent.date} 是 {data.weekday}"
    return f'抱歉，我无法理解您的时间查询："{intent.query}"'


@tool(name="parseTimeQuery", title="解析时间查询", description="解析自然语言时间查询并给出答案")
def parse_query(
    query: Annotated[str, Field(description="自然语言时间查询，如'现在几点了'、'北京时间'等")],
    at_ms: AtMs = None,
) -> str:
    result = parse_time_query(query, now_ms=at_ms)
    logger.debug("parseTimeQuery: %r -> %s", query, result.type)
    if result.type == "unknown":
        logger.info("parseTimeQuery: unrecognized query %r", query)
    return _reply(_describe_query(result), result.to_dict())


@tool(name="getSupportedCities", title="支持的城市", description="获取所有支持的城市列表")
def get_supported_cities() -> str:
    cities = list_cities()
    return _reply(f"支持的城市列表：{'、'.join(cities)}", {"cities": cities})


def register(mcp: FastMCP) -> list[str]:
    """Register tools in this module."""
    return register_decorated(mcp, globals())
