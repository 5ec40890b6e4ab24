import asyncio
import logging
import unittest

from mcp.server.fastmcp import FastMCP

from mcp_time_core.logs import resolve_log_level
from mcp_time_core.tooling import ToolDef, collect_tool_defs, register_decorated, tool


@tool(name="echo", title="回显", description="原样返回文本")
def _echo(text: str) -> str:
    return text


def _plain(text: str) -> str:
    return text


class ToolingTest(unittest.TestCase):
    def test_decorator_keeps_function_callable(self):
        self.assertEqual(_echo("hi"), "hi")
        tool_def = getattr(_echo, "__mcp_tool_def__")
        self.assertIsInstance(tool_def, ToolDef)
        self.assertEqual((tool_def.name, tool_def.title), ("echo", "回显"))

    def test_collect_skips_undecorated(self):
        defs = collect_tool_defs({"_echo": _echo, "_plain": _plain, "value": 3})
        self.assertEqual([d.name for d in defs], ["echo"])

    def test_register_decorated_adds_to_fastmcp(self):
        mcp = FastMCP(name="test")
        self.assertEqual(register_decorated(mcp, {"_echo": _echo}), ["echo"])
        tools = asyncio.run(mcp.list_tools())
        self.assertEqual([t.name for t in tools], ["echo"])
        self.assertEqual(tools[0].description, "原样返回文本")
        self.assertEqual(tools[0].inputSchema["required"], ["text"])

    def test_rejects_non_callable(self):
        with self.assertRaises(TypeError):
            tool(name="x", title="x", description="x")(42)


class LogLevelTest(unittest.TestCase):
    def test_resolve_log_level(self):
        self.assertEqual(resolve_log_level("debug"), logging.DEBUG)
        self.assertEqual(resolve_log_level(None), logging.INFO)
        self.assertEqual(resolve_log_level("loud"), logging.INFO)


if __name__ == "__main__":
    unittest.main()
