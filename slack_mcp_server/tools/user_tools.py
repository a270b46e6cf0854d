"""MCP tools for user lookup."""

from typing import Optional

from slack_mcp_server.mcp_server import mcp
from slack_mcp_server.tools._dispatch import call_tool


@mcp.tool()
async def get_users_on_slack(limit: int = 100, cursor: Optional[str] = None) -> str:
    """Get a list of all users in the workspace with their basic profile information.

    Args:
        limit: Maximum number of users to return (default 100, max 200).
        cursor: Pagination cursor for next page of results.
    """
    return await call_tool("get_users_on_slack", limit=limit, cursor=cursor)


@mcp.tool()
async def get_user_profile_on_slack(user_id: Optional[str] = None) -> str:
    """Get detailed profile information for a specific user.

    Args:
        user_id: The ID of the user (required).
    """
    return await call_tool("get_user_profile_on_slack", user_id=user_id)
