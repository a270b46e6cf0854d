"""MCP tools for posting messages, thread replies and reactions."""

from typing import Optional

from slack_mcp_server.mcp_server import mcp
from slack_mcp_server.tools._dispatch import call_tool


@mcp.tool()
async def send_message_on_slack(
    text: Optional[str] = None,
    channel_id: Optional[str] = None,
    channel_name: Optional[str] = None,
) -> str:
    """Post a new message to a Slack channel. Provide either channel_id or channel_name.

    Args:
        text: The message text to post (required).
        channel_id: The ID of the channel to post to.
        channel_name: The name of the channel to post to (resolved to channel_id if channel_id is not provided).
    """
    return await call_tool(
        "send_message_on_slack",
        text=text,
        channel_id=channel_id,
        channel_name=channel_name,
    )


@mcp.tool()
async def reply_to_thread_on_slack(
    thread_ts: Optional[str] = None,
    text: Optional[str] = None,
    channel_id: Optional[str] = None,
    channel_name: Optional[str] = None,
) -> str:
    """Reply to a specific message thread in Slack. Provide either channel_id or channel_name.

    Args:
        thread_ts: The timestamp of the parent message, in the format '1234567890.123456' (required).
        text: The reply text (required).
        channel_id: The ID of the channel containing the thread.
        channel_name: The name of the channel containing the thread.
    """
    return await call_tool(
        "reply_to_thread_on_slack",
        thread_ts=thread_ts,
        text=text,
        channel_id=channel_id,
        channel_name=channel_name,
    )


@mcp.tool()
async def add_reaction_on_slack(
    timestamp: Optional[str] = None,
    reaction: Optional[str] = None,
    channel_id: Optional[str] = None,
    channel_name: Optional[str] = None,
) -> str:
    """Add a reaction emoji to a message. Provide either channel_id or channel_name.

    Args:
        timestamp: The timestamp of the message to react to, in the format '1234567890.123456' (required).
        reaction: The emoji name without colons, e.g. 'thumbsup' (required).
        channel_id: The ID of the channel containing the message.
        channel_name: The name of the channel containing the message.
    """
    return await call_tool(
        "add_reaction_on_slack",
        timestamp=timestamp,
        reaction=reaction,
        channel_id=channel_id,
        channel_name=channel_name,
    )


@mcp.tool()
async def get_thread_replies_on_slack(
    thread_ts: Optional[str] = None,
    channel_id: Optional[str] = None,
    channel_name: Optional[str] = None,
) -> str:
    """Get all replies in a message thread. Provide either channel_id or channel_name.

    Args:
        thread_ts: The timestamp of the parent message, in the format '1234567890.123456' (required).
        channel_id: The ID of the channel containing the thread.
        channel_name: The name of the channel containing the thread.
    """
    return await call_tool(
        "get_thread_replies_on_slack",
        thread_ts=thread_ts,
        channel_id=channel_id,
        channel_name=channel_name,
    )
