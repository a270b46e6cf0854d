"""Slack MCP stdio server — FastMCP entrypoint."""

import builtins
import sys

# === stdout protection ===
# MCP JSON-RPC uses stdout exclusively. Override builtins.print to
# always write to stderr, preventing module prints from corrupting
# the protocol. MCP library uses its own transport, not print().
_original_print = builtins.print


def _safe_print(*args, **kwargs):
    kwargs.setdefault("file", sys.stderr)
    _original_print(*args, **kwargs)


builtins.print = _safe_print

from mcp.server.fastmcp import FastMCP  # noqa: E402

from slack_mcp.config import CONFIG, AppConfig  # noqa: E402
from slack_mcp.errors import ConfigError  # noqa: E402

# Create MCP server instance
mcp = FastMCP(
    CONFIG["server_name"],
    instructions="Slack workspace tools: list channels and users, read history and threads, post messages and replies, find mentions.",
)

# Import tool modules to register them with mcp
from slack_mcp_server.tools import channel_tools  # noqa: F401, E402
from slack_mcp_server.tools import message_tools  # noqa: F401, E402
from slack_mcp_server.tools import user_tools  # noqa: F401, E402
from slack_mcp_server.tools import mention_tools  # noqa: F401, E402


def _log(msg: str):
    print(msg, file=sys.stderr)


def main():
    """Run the MCP server via stdio transport."""
    from slack_mcp_server.state import get_state

    try:
        config = AppConfig.from_env().validate()
    except ConfigError as e:
        _log(str(e))
        sys.exit(1)

    _log("Starting Slack MCP Server...")
    get_state(config)
    try:
        mcp.run(transport="stdio")
    except Exception as e:
        _log(f"Fatal error in main(): {e}")
        sys.exit(1)
    _log("Slack MCP Server stopped.")
