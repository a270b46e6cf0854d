"""Configuration and shared state."""

__version__ = "1.0.0"

import os
import sys
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

from slack_mcp.errors import ConfigError

load_dotenv()

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)

DEFAULT_SLACK_API_BASE = "https://slack.com/api"

CONFIG = {
    "server_name": "slack-mcp",
    # Slack workspace credentials
    "slack_bot_token": os.getenv("SLACK_BOT_TOKEN", ""),
    "slack_team_id": os.getenv("SLACK_TEAM_ID", ""),
    # Override to point the client at a local stub
    "slack_api_base": os.getenv("SLACK_API_BASE", DEFAULT_SLACK_API_BASE).rstrip("/"),
}

if CONFIG["slack_api_base"] != DEFAULT_SLACK_API_BASE:
    _stderr_print(f"Using non-default SLACK_API_BASE={CONFIG['slack_api_base']!r}")


# ── Typed config ────────────────────────────────────────────


@dataclass
class SlackConfig:
    bot_token: str = ""
    team_id: str = ""
    api_base: str = DEFAULT_SLACK_API_BASE

    def missing(self) -> List[str]:
        """Return the env var names of required values that are empty."""
        absent = []
        if not self.bot_token:
            absent.append("SLACK_BOT_TOKEN")
        if not self.team_id:
            absent.append("SLACK_TEAM_ID")
        return absent


@dataclass
class AppConfig:
    """Typed configuration for the server process."""

    server_name: str = "slack-mcp"
    slack: SlackConfig = field(default_factory=SlackConfig)

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create AppConfig from environment variables."""
        return cls(
            server_name=CONFIG["server_name"],
            slack=SlackConfig(
                bot_token=CONFIG["slack_bot_token"],
                team_id=CONFIG["slack_team_id"],
                api_base=CONFIG["slack_api_base"],
            ),
        )

    def validate(self) -> "AppConfig":
        missing = self.slack.missing()
        if missing:
            raise ConfigError(
                f"Please set {' and '.join(missing)} environment variable"
                f"{'s' if len(missing) > 1 else ''}"
            )
        return self
