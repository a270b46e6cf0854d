"""Channel resolution and mention scanning."""

from slack_mcp.domain.models import Channel, Message, mention_marker
from slack_mcp.domain.resolver import CHANNEL_PAGE_SIZE, list_visible_channels, resolve_channel_id
from slack_mcp.domain.mentions import filter_mentions, scan_mentions
from slack_mcp.domain.timestamps import normalize_ts

__all__ = [
    "Channel",
    "Message",
    "mention_marker",
    "CHANNEL_PAGE_SIZE",
    "list_visible_channels",
    "resolve_channel_id",
    "filter_mentions",
    "scan_mentions",
    "normalize_ts",
]
