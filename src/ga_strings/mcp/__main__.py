"""Allow running the MCP server as a module.

Usage:
    python -m ga_strings.mcp        # starts the MCP server in stdio mode
"""

from ga_strings.mcp.server import mcp

if __name__ == "__main__":
    mcp.run()
