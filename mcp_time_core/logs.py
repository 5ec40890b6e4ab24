import logging
import sys

from mcp_time_core.env import env


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_log_level(raw: str | None) -> int:
    name = str(raw or "").strip().upper() or "INFO"
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def setup_logging() -> None:
    # stdout carries the stdio transport, so logs go to stderr.
    logging.basicConfig(level=resolve_log_level(env("LOG_LEVEL")), format=LOG_FORMAT, stream=sys.stderr, force=True)
