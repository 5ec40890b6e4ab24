import logging

from mcp.server.fastmcp import FastMCP

from mcp_time_core.env import bootstrap_env, env, env_int
from mcp_time_core.logs import setup_logging
from mcp_time_tools.time_tool import register as register_time


logger = logging.getLogger("mcp_time")

TRANSPORTS = ("stdio", "streamable-http", "sse")


def resolve_transport(raw: str | None) -> str:
    name = str(raw or "").strip().lower() or "stdio"
    if name == "http":
        name = "streamable-http"
    if name not in TRANSPORTS:
        raise ValueError(f"unsupported MCP_TRANSPORT {raw!r}, expected one of {', '.join(TRANSPORTS)}")
    return name


def build_server() -> FastMCP:
    mcp = FastMCP(
        name="MCP-Time",
        instructions="时间查询服务，提供当前时间、日期、时区转换等功能",
        host=env("HOST") or "0.0.0.0",
        port=env_int("PORT", 3000),
        json_response=False,
    )
    names = register_time(mcp)
    logger.debug("registered tools: %s", ", ".join(names))
    return mcp


def main() -> None:
    bootstrap_env()
    setup_logging()
    transport = resolve_transport(env("MCP_TRANSPORT"))
    mcp = build_server()
    if transport == "stdio":
        logger.info("MCP-Time server starting on stdio")
    else:
        logger.info("MCP-Time server starting (%s) on %s:%s", transport, mcp.settings.host, mcp.settings.port)
    mcp.run(transport=transport)


if __name__ == "__main__":
    main()
