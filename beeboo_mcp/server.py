# =============================================================================
# beeboo_mcp/server.py  —  FastMCP Bridge (tools/list + tools/call)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Advertises every ToolSpec in the registry to FastMCP and routes each
#   incoming call to the Dispatcher.
#
# HOW IT WORKS (the flow):
#   1. The agent lists tools: FastMCP returns name, description and the
#      inputSchema produced by beeboo_mcp.schema
#   2. The agent calls a tool: FastMCP hands the raw arguments to
#      DispatchedTool.run()
#   3. run() passes them to Dispatcher.invoke() on a worker thread, so the
#      event loop only waits on the HTTP call
#   4. Success becomes a ToolResult (text + structuredContent); failure is
#      raised as ToolError, which FastMCP reports with isError set
#
# RUNNING THIS SERVER:
#     a) python main.py
#     b) python -m beeboo_mcp.server
#     c) beeboo-mcp            (console script)
#   All three speak MCP over stdio.  Logs go to STDERR only: anything
#   written to stdout would corrupt the JSON-RPC stream.
# =============================================================================

import asyncio
import logging
import sys
from typing import Any, Mapping, Optional

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult as MCPToolResult
from mcp.types import TextContent
from pydantic import PrivateAttr

from beeboo.config import API_KEY_ENV, API_KEY_HELP_URL, SERVER_NAME, SERVER_VERSION, get_config, get_log_level
from beeboo.errors import ConfigError
from beeboo.models import ToolSpec
from beeboo_mcp.dispatcher import Dispatcher
from beeboo_mcp.registry import build_registry
from beeboo_mcp.schema import input_schema

logging.basicConfig(
    level=get_log_level(),
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)

SERVER_INSTRUCTIONS = (
    "BeeBoo gives agents a human in the loop: search and add to the team "
    "knowledge base, ask a human to approve an action and check the decision, "
    "and queue work requests for the team."
)


class DispatchedTool(Tool):
    """A registry tool exposed through FastMCP.

    FastMCP only sees the JSON Schema; validation and execution stay in the
    Dispatcher.
    """

    _dispatcher: Dispatcher = PrivateAttr()

    @classmethod
    def from_spec(cls, spec: ToolSpec, dispatcher: Dispatcher) -> "DispatchedTool":
        tool = cls(name=spec.name, description=spec.description, parameters=input_schema(spec))
        tool._dispatcher = dispatcher
        return tool

    async def run(self, arguments: dict[str, Any]) -> MCPToolResult:
        response = await asyncio.to_thread(self._dispatcher.invoke, self.name, arguments)
        if response.is_error:
            raise ToolError(response.text)

        return MCPToolResult(
            content=[TextContent(type="text", text=block["text"]) for block in response.content],
            structured_content=response.structured_content,
        )


def create_server(registry: Optional[Mapping[str, ToolSpec]] = None) -> FastMCP:
    """Build a FastMCP server exposing every tool in ``registry``."""
    dispatcher = Dispatcher(registry if registry is not None else build_registry())

    server = FastMCP(SERVER_NAME, instructions=SERVER_INSTRUCTIONS)
    for spec in dispatcher.registry.values():
        server.add_tool(DispatchedTool.from_spec(spec, dispatcher))
    return server


# The name "mcp" is what `fastmcp run beeboo_mcp/server.py` looks for.
mcp = create_server()


def main() -> None:
    """Check configuration, then serve MCP over stdio until stdin closes."""
    try:
        get_config()
    except ConfigError as exc:
        logger.error(f"Error: {exc}")
        logger.error(f"Get your API key at {API_KEY_HELP_URL} and set {API_KEY_ENV}")
        sys.exit(1)

    logger.info(f"BeeBoo MCP server v{SERVER_VERSION} started")
    mcp.run()


if __name__ == "__main__":
    main()
