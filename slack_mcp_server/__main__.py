"""Allow ``python -m slack_mcp_server``."""

from slack_mcp_server.mcp_server import main

main()
