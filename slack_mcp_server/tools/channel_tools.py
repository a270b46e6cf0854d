"""MCP tools for channel listing and channel history."""

from typing import Optional

from slack_mcp_server.mcp_server import mcp
from slack_mcp_server.tools._dispatch import call_tool


@mcp.tool()
async def channels_list_on_slack(limit: int = 100, cursor: Optional[str] = None) -> str:
    """List public channels in the workspace with pagination.

    Args:
        limit: Maximum number of channels to return (default 100, max 200).
        cursor: Pagination cursor for next page of results.
    """
    return await call_tool("channels_list_on_slack", limit=limit, cursor=cursor)


@mcp.tool()
async def get_channel_history_on_slack(
    limit: int = 10,
    channel_id: Optional[str] = None,
    channel_name: Optional[str] = None,
) -> str:
    """Get recent messages from a channel. Provide either channel_id or channel_name.

    Args:
        limit: Number of messages to retrieve (default 10).
        channel_id: The ID of the channel.
        channel_name: The name of the channel (resolved to channel_id if channel_id is not provided).
    """
    return await call_tool(
        "get_channel_history_on_slack",
        limit=limit,
        channel_id=channel_id,
        channel_name=channel_name,
    )


@mcp.tool()
async def get_channel_messages_on_slack(
    limit: int = 5,
    channel_id: Optional[str] = None,
    channel_name: Optional[str] = None,
) -> str:
    """Fetch the last N messages from a Slack channel (by channel_id or channel_name).

    Args:
        limit: Number of messages to fetch (default 5).
        channel_id: The ID of the channel to fetch messages from.
        channel_name: The name of the channel to fetch messages from.
    """
    return await call_tool(
        "get_channel_messages_on_slack",
        limit=limit,
        channel_id=channel_id,
        channel_name=channel_name,
    )
