# =============================================================================
# main.py  —  Entry Point for the BeeBoo MCP Server
# =============================================================================
#
# HOW TO RUN:
#   BEEBOO_API_KEY=bb_sk_xxx python main.py
#
# Or put the key in a .env file next to this script.
#
# WHAT HAPPENS:
#   1. Loads .env (BEEBOO_API_KEY, BEEBOO_API_URL, BEEBOO_LOG_LEVEL)
#   2. Exits with status 1 if BEEBOO_API_KEY is missing
#   3. Serves the BeeBoo tools over MCP on stdin/stdout
#
# CONNECTING AN AGENT:
#   Point any MCP client at this script with stdio transport, e.g.
#     {"command": "python", "args": ["/path/to/main.py"],
#      "env": {"BEEBOO_API_KEY": "bb_sk_xxx"}}
# =============================================================================

from dotenv import load_dotenv

# Must run before beeboo_mcp is imported: the log level is read at import.
load_dotenv()

from beeboo_mcp.server import main

if __name__ == "__main__":
    main()
