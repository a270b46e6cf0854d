"""Global state for MCP server — wires the Slack client to the dispatcher."""

from __future__ import annotations

import sys
from typing import Optional

from slack_mcp.config import AppConfig
from slack_mcp.dispatcher import ToolDispatcher
from slack_mcp.identity import IdentityCache
from slack_mcp.ports import SlackPort
from slack_mcp.slack_client import SlackClient


def _log(msg: str):
    print(msg, file=sys.stderr)


class AppState:
    """State container owning the client, the cached identity and the dispatcher."""

    def __init__(self, config: Optional[AppConfig] = None, client: Optional[SlackPort] = None):
        _log("Initializing Slack MCP state...")

        self.config = config or AppConfig.from_env()
        self.slack_client = client or SlackClient(self.config.slack)

        # Bot user id for mention search, fetched on first use
        self.identity = IdentityCache(self.slack_client)

        self.dispatcher = ToolDispatcher(self.slack_client, self.identity)

        _log("Slack MCP state initialized.")


# Module-level singleton
_state: Optional[AppState] = None


def get_state(config: Optional[AppConfig] = None) -> AppState:
    global _state
    if _state is None:
        _state = AppState(config)
    return _state


def set_state(state: Optional[AppState]) -> None:
    """Replace (or clear, with None) the process state."""
    global _state
    _state = state
