"""Channel name to channel id resolution."""

from typing import List, Optional

from slack_mcp.domain.models import Channel
from slack_mcp.errors import ChannelNotFoundError, MissingArgumentError, UpstreamError
from slack_mcp.ports import SlackPort

# Only one page of conversations.list is ever read. Channels beyond the
# first CHANNEL_PAGE_SIZE are invisible to name lookups and mention scans.
CHANNEL_PAGE_SIZE = 200


async def list_visible_channels(client: SlackPort) -> List[Channel]:
    """Fetch the first page of public channels.

    Raises:
        UpstreamError: Slack replied ok=false.
    """
    resp = await client.get_channels(CHANNEL_PAGE_SIZE)
    if not resp.get("ok"):
        raise UpstreamError("Failed to fetch channels list", resp.get("error"))
    return [Channel.from_api(ch) for ch in resp.get("channels", [])]


async def resolve_channel_id(
    client: SlackPort,
    channel_id: Optional[str] = None,
    channel_name: Optional[str] = None,
) -> str:
    """Return a concrete channel id.

    An explicit ``channel_id`` is returned unchanged without touching Slack.
    Otherwise ``channel_name`` is looked up against the first page of
    channels, matching ``name`` or ``name_normalized`` exactly.

    Raises:
        MissingArgumentError: neither argument given.
        ChannelNotFoundError: no channel on the first page has that name.
        UpstreamError: the channel listing failed.
    """
    if channel_id:
        return channel_id
    if not channel_name:
        raise MissingArgumentError("channel_id or channel_name")

    for channel in await list_visible_channels(client):
        if channel.matches(channel_name):
            return channel.id
    raise ChannelNotFoundError(channel_name)
