"""Slack workspace tools over the Model Context Protocol."""

from slack_mcp.config import CONFIG, AppConfig, SlackConfig
from slack_mcp.errors import (
    ChannelNotFoundError,
    ConfigError,
    InvalidArgumentError,
    MissingArgumentError,
    SlackMCPError,
    UnknownToolError,
    UpstreamError,
)
from slack_mcp.slack_client import SlackClient
from slack_mcp.identity import IdentityCache
from slack_mcp.dispatcher import ToolDispatcher

__all__ = [
    "CONFIG",
    "AppConfig",
    "SlackConfig",
    "ChannelNotFoundError",
    "ConfigError",
    "InvalidArgumentError",
    "MissingArgumentError",
    "SlackMCPError",
    "UnknownToolError",
    "UpstreamError",
    "SlackClient",
    "IdentityCache",
    "ToolDispatcher",
]
