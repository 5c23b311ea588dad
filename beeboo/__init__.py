# =============================================================================
# beeboo/__init__.py
# =============================================================================
# Framework-free core of the BeeBoo MCP server.
#
# Nothing in this package imports FastMCP or any protocol code.  It holds:
#   - config.py        environment configuration (.env aware)
#   - errors.py        the exception taxonomy
#   - models.py        dataclasses shared by every layer
#   - api.py           the HTTP transport and BeeBoo endpoint helpers
#   - envelope.py      {data: ...} / {error: ...} response unwrapping
#   - formatting.py    slugs, truncation and status icons
#   - knowledge.py, approvals.py, work_requests.py
#                      tool handlers, one module per BeeBoo area
#
# beeboo_mcp/ wraps these handlers as MCP tools.
# =============================================================================
