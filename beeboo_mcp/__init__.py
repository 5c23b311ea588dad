# =============================================================================
# beeboo_mcp/__init__.py
# =============================================================================
# The MCP layer: turns the handlers in beeboo/ into MCP tools.
#
#   registry.py    the static tool catalog (name -> ToolSpec)
#   schema.py      ParameterSpec -> JSON Schema for tools/list
#   dispatcher.py  validate -> invoke -> ProtocolResponse, one call at a time
#   server.py      the FastMCP server that advertises and routes the tools
#
# Run the server with:  python main.py   (or python -m beeboo_mcp.server)
# =============================================================================
