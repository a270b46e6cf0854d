"""Routes an operation name and flat arguments to Slack."""

import json
import sys
from typing import Any, Awaitable, Callable, Dict, Optional

from slack_mcp.domain.mentions import DEFAULT_MENTION_LIMIT, scan_mentions
from slack_mcp.domain.resolver import resolve_channel_id
from slack_mcp.domain.timestamps import normalize_ts
from slack_mcp.errors import InvalidArgumentError, MissingArgumentError, UnknownToolError
from slack_mcp.identity import IdentityCache
from slack_mcp.ports import SlackPort

Arguments = Dict[str, Any]
Handler = Callable[[Arguments], Awaitable[Dict[str, Any]]]

DEFAULT_LIST_LIMIT = 100
DEFAULT_HISTORY_LIMIT = 10
DEFAULT_MESSAGES_LIMIT = 5


def _log(msg: str):
    print(msg, file=sys.stderr)


def _require(args: Arguments, name: str) -> str:
    value = args.get(name)
    if value is None or (isinstance(value, str) and not value.strip()):
        raise MissingArgumentError(name)
    return value


def _require_channel(args: Arguments) -> None:
    if not args.get("channel_id") and not args.get("channel_name"):
        raise MissingArgumentError("channel_id or channel_name")


def _limit(args: Arguments, default: int) -> int:
    value = args.get("limit")
    if value is None:
        return default
    try:
        limit = int(value)
    except (TypeError, ValueError):
        raise InvalidArgumentError("limit", f"expected a positive integer, got {value!r}")
    if limit < 1:
        raise InvalidArgumentError("limit", f"expected a positive integer, got {limit}")
    return limit


class ToolDispatcher:
    """Maps tool names to handlers and serializes their results.

    Handler failures come back as ``{"error": ...}`` JSON text. Only an
    unknown tool name raises.
    """

    def __init__(self, client: SlackPort, identity: Optional[IdentityCache] = None):
        self.client = client
        self.identity = identity or IdentityCache(client)
        self._handlers: Dict[str, Handler] = {
            "channels_list_on_slack": self._list_channels,
            "send_message_on_slack": self._send_message,
            "reply_to_thread_on_slack": self._reply_to_thread,
            "add_reaction_on_slack": self._add_reaction,
            "get_channel_history_on_slack": self._get_channel_history,
            "get_channel_messages_on_slack": self._get_channel_messages,
            "get_thread_replies_on_slack": self._get_thread_replies,
            "get_users_on_slack": self._get_users,
            "get_user_profile_on_slack": self._get_user_profile,
            "get_mentions_on_slack": self._get_mentions,
        }

    @property
    def tool_names(self):
        return list(self._handlers)

    async def dispatch(self, name: str, arguments: Optional[Arguments] = None) -> str:
        handler = self._handlers.get(name)
        if handler is None:
            raise UnknownToolError(name)

        _log(f"Received tool call: {name}")
        try:
            result = await handler(dict(arguments or {}))
        except Exception as e:
            _log(f"Error executing tool {name}: {e}")
            return json.dumps({"error": str(e)}, ensure_ascii=False)
        return json.dumps(result, ensure_ascii=False)

    async def _channel(self, args: Arguments) -> str:
        return await resolve_channel_id(
            self.client, args.get("channel_id"), args.get("channel_name")
        )

    # ── handlers ────────────────────────────────────────────

    async def _list_channels(self, args: Arguments) -> Dict[str, Any]:
        return await self.client.get_channels(
            _limit(args, DEFAULT_LIST_LIMIT), args.get("cursor")
        )

    async def _send_message(self, args: Arguments) -> Dict[str, Any]:
        text = _require(args, "text")
        _require_channel(args)
        return await self.client.post_message(await self._channel(args), text)

    async def _reply_to_thread(self, args: Arguments) -> Dict[str, Any]:
        thread_ts = normalize_ts(_require(args, "thread_ts"))
        text = _require(args, "text")
        _require_channel(args)
        return await self.client.post_reply(await self._channel(args), thread_ts, text)

    async def _add_reaction(self, args: Arguments) -> Dict[str, Any]:
        timestamp = normalize_ts(_require(args, "timestamp"))
        reaction = _require(args, "reaction").strip(":")
        _require_channel(args)
        return await self.client.add_reaction(await self._channel(args), timestamp, reaction)

    async def _get_channel_history(self, args: Arguments) -> Dict[str, Any]:
        _require_channel(args)
        limit = _limit(args, DEFAULT_HISTORY_LIMIT)
        return await self.client.get_channel_history(await self._channel(args), limit)

    async def _get_channel_messages(self, args: Arguments) -> Dict[str, Any]:
        _require_channel(args)
        limit = _limit(args, DEFAULT_MESSAGES_LIMIT)
        return await self.client.get_channel_history(await self._channel(args), limit)

    async def _get_thread_replies(self, args: Arguments) -> Dict[str, Any]:
        thread_ts = normalize_ts(_require(args, "thread_ts"))
        _require_channel(args)
        return await self.client.get_thread_replies(await self._channel(args), thread_ts)

    async def _get_users(self, args: Arguments) -> Dict[str, Any]:
        return await self.client.get_users(
            _limit(args, DEFAULT_LIST_LIMIT), args.get("cursor")
        )

    async def _get_user_profile(self, args: Arguments) -> Dict[str, Any]:
        return await self.client.get_user_profile(_require(args, "user_id"))

    async def _get_mentions(self, args: Arguments) -> Dict[str, Any]:
        limit = _limit(args, DEFAULT_MENTION_LIMIT)
        user_id = await self.identity.get()
        messages = await scan_mentions(
            self.client,
            user_id,
            channel_id=args.get("channel_id"),
            channel_name=args.get("channel_name"),
            limit=limit,
        )
        return {"ok": True, "messages": [m.raw for m in messages]}
