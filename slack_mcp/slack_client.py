"""Slack Web API client using aiohttp."""

from typing import Any, Dict, Optional

import aiohttp

from slack_mcp.config import AppConfig, SlackConfig

MAX_PAGE_SIZE = 200


class SlackClient:
    """Async Slack Web API client.

    Every method issues exactly one HTTP call and returns the decoded JSON
    body as-is, including replies with ``ok: false``. Callers decide
    whether a non-ok reply is an error.
    """

    def __init__(self, config: Optional[SlackConfig] = None):
        self.config = config or AppConfig.from_env().slack

    @property
    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.config.bot_token}",
            "Content-Type": "application/json",
        }

    def _url(self, method: str) -> str:
        return f"{self.config.api_base.rstrip('/')}/{method}"

    async def _get(self, method: str, params: Dict[str, str]) -> Dict[str, Any]:
        async with aiohttp.ClientSession() as session:
            async with session.get(
                self._url(method), headers=self._headers, params=params
            ) as resp:
                return await resp.json()

    async def _post(self, method: str, body: Dict[str, Any]) -> Dict[str, Any]:
        async with aiohttp.ClientSession() as session:
            async with session.post(
                self._url(method), headers=self._headers, json=body
            ) as resp:
                return await resp.json()

    async def get_channels(self, limit: int = 100, cursor: Optional[str] = None) -> Dict[str, Any]:
        """List public, non-archived channels (one page)."""
        params = {
            "types": "public_channel",
            "exclude_archived": "true",
            "limit": str(min(limit, MAX_PAGE_SIZE)),
            "team_id": self.config.team_id,
        }
        if cursor:
            params["cursor"] = cursor
        return await self._get("conversations.list", params)

    async def post_message(self, channel_id: str, text: str) -> Dict[str, Any]:
        return await self._post("chat.postMessage", {
            "channel": channel_id,
            "text": text,
        })

    async def post_reply(self, channel_id: str, thread_ts: str, text: str) -> Dict[str, Any]:
        return await self._post("chat.postMessage", {
            "channel": channel_id,
            "thread_ts": thread_ts,
            "text": text,
        })

    async def add_reaction(self, channel_id: str, timestamp: str, reaction: str) -> Dict[str, Any]:
        return await self._post("reactions.add", {
            "channel": channel_id,
            "timestamp": timestamp,
            "name": reaction,
        })

    async def get_channel_history(self, channel_id: str, limit: int = 10) -> Dict[str, Any]:
        return await self._get("conversations.history", {
            "channel": channel_id,
            "limit": str(limit),
        })

    async def get_thread_replies(self, channel_id: str, thread_ts: str) -> Dict[str, Any]:
        return await self._get("conversations.replies", {
            "channel": channel_id,
            "ts": thread_ts,
        })

    async def get_users(self, limit: int = 100, cursor: Optional[str] = None) -> Dict[str, Any]:
        params = {
            "limit": str(min(limit, MAX_PAGE_SIZE)),
            "team_id": self.config.team_id,
        }
        if cursor:
            params["cursor"] = cursor
        return await self._get("users.list", params)

    async def get_user_profile(self, user_id: str) -> Dict[str, Any]:
        return await self._get("users.profile.get", {
            "user": user_id,
            "include_labels": "true",
        })

    async def auth_test(self) -> Dict[str, Any]:
        """Identify the token's own user (``user_id``) and workspace."""
        return await self._post("auth.test", {})
