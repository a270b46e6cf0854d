"""MCP tool for finding messages that mention the bot."""

from typing import Optional

from slack_mcp_server.mcp_server import mcp
from slack_mcp_server.tools._dispatch import call_tool


@mcp.tool()
async def get_mentions_on_slack(
    limit: int = 10,
    channel_id: Optional[str] = None,
    channel_name: Optional[str] = None,
) -> str:
    """Fetch recent messages where the bot is mentioned (optionally by channel).

    Without a channel, the first 200 public channels are searched in order.

    Args:
        limit: Number of mention messages to return (default 10).
        channel_id: The ID of the channel to search mentions in.
        channel_name: The name of the channel to search mentions in.
    """
    return await call_tool(
        "get_mentions_on_slack",
        limit=limit,
        channel_id=channel_id,
        channel_name=channel_name,
    )
