"""Mention scanning over recent channel history."""

import sys
from typing import List, Optional

from slack_mcp.domain.models import Message
from slack_mcp.domain.resolver import list_visible_channels, resolve_channel_id
from slack_mcp.errors import InvalidArgumentError
from slack_mcp.ports import SlackPort

DEFAULT_MENTION_LIMIT = 10


def _log(msg: str):
    print(msg, file=sys.stderr)


async def _fetch_messages(client: SlackPort, channel_id: str, limit: int) -> List[Message]:
    """Recent messages for one channel, newest first.

    A non-ok reply (e.g. ``not_in_channel``) yields no messages; transport
    errors propagate.
    """
    resp = await client.get_channel_history(channel_id, limit)
    if not resp.get("ok"):
        _log(f"Skipping channel {channel_id}: {resp.get('error', 'unknown error')}")
        return []
    return [Message.from_api(m, channel_id) for m in resp.get("messages", [])]


def filter_mentions(messages: List[Message], user_id: str, limit: int) -> List[Message]:
    """Keep messages containing ``<@user_id>``, first ``limit`` in order."""
    if limit < 1:
        raise InvalidArgumentError("limit", f"expected a positive integer, got {limit}")
    return [m for m in messages if m.mentions(user_id)][:limit]


async def scan_mentions(
    client: SlackPort,
    user_id: str,
    channel_id: Optional[str] = None,
    channel_name: Optional[str] = None,
    limit: int = DEFAULT_MENTION_LIMIT,
) -> List[Message]:
    """Find recent messages mentioning ``user_id``.

    With a channel scope only that channel is read. Without one, every
    channel on the first page of the listing is read in listing order, one
    request at a time, and all messages are accumulated before filtering.
    """
    if limit < 1:
        raise InvalidArgumentError("limit", f"expected a positive integer, got {limit}")
    if channel_id or channel_name:
        scoped = await resolve_channel_id(client, channel_id, channel_name)
        messages = await _fetch_messages(client, scoped, limit)
    else:
        messages = []
        for channel in await list_visible_channels(client):
            messages.extend(await _fetch_messages(client, channel.id, limit))

    return filter_mentions(messages, user_id, limit)
