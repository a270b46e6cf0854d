"""Outbound port: the Slack operations that domain code depends on."""

from typing import Any, Dict, Optional, Protocol, runtime_checkable


@runtime_checkable
class SlackPort(Protocol):
    """Interface for Slack Web API clients."""

    async def get_channels(self, limit: int = 100, cursor: Optional[str] = None) -> Dict[str, Any]: ...
    async def post_message(self, channel_id: str, text: str) -> Dict[str, Any]: ...
    async def post_reply(self, channel_id: str, thread_ts: str, text: str) -> Dict[str, Any]: ...
    async def add_reaction(self, channel_id: str, timestamp: str, reaction: str) -> Dict[str, Any]: ...
    async def get_channel_history(self, channel_id: str, limit: int = 10) -> Dict[str, Any]: ...
    async def get_thread_replies(self, channel_id: str, thread_ts: str) -> Dict[str, Any]: ...
    async def get_users(self, limit: int = 100, cursor: Optional[str] = None) -> Dict[str, Any]: ...
    async def get_user_profile(self, user_id: str) -> Dict[str, Any]: ...
    async def auth_test(self) -> Dict[str, Any]: ...
