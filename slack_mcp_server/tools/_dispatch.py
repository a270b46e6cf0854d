"""Shared call path from FastMCP tool wrappers into the dispatcher."""

from slack_mcp_server.state import get_state


async def call_tool(name: str, **arguments) -> str:
    """Dispatch ``name`` with the non-None keyword arguments."""
    args = {k: v for k, v in arguments.items() if v is not None}
    return await get_state().dispatcher.dispatch(name, args)
