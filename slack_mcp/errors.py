"""Error taxonomy for tool handlers."""

from typing import Optional


class SlackMCPError(Exception):
    """Base class for errors raised by slack_mcp."""
    pass


class ConfigError(SlackMCPError):
    """Raised at startup when required credentials are absent"""
    pass


class MissingArgumentError(SlackMCPError):
    def __init__(self, name: str):
        self.argument = name
        super().__init__(f"Missing required argument: {name}")


class ChannelNotFoundError(SlackMCPError):
    def __init__(self, channel_name: str):
        self.channel_name = channel_name
        super().__init__(f"Channel with name '{channel_name}' not found")


class UpstreamError(SlackMCPError):
    """Raised when Slack replies ok=false to a call whose data we need."""

    def __init__(self, message: str, error_code: Optional[str] = None):
        self.error_code = error_code
        if error_code:
            message = f"{message}: {error_code}"
        super().__init__(message)


class UnknownToolError(SlackMCPError):
    def __init__(self, name: str):
        self.tool_name = name
        super().__init__(f"Unknown tool: {name}")


class InvalidArgumentError(SlackMCPError):
    def __init__(self, name: str, reason: str):
        self.argument = name
        super().__init__(f"Invalid argument {name}: {reason}")
