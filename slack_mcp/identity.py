"""The bot's own Slack user id, resolved once per process."""

import asyncio
import sys
from typing import Optional

from slack_mcp.errors import UpstreamError
from slack_mcp.ports import SlackPort


def _log(msg: str):
    print(msg, file=sys.stderr)


class IdentityCache:
    """Lazily resolves and holds the token owner's user id via auth.test.

    The value never expires. Concurrent callers share a single lookup. A
    failed lookup is not cached, so the next call retries it.
    """

    def __init__(self, client: SlackPort):
        self._client = client
        self._user_id: Optional[str] = None
        self._lock = asyncio.Lock()

    @property
    def user_id(self) -> Optional[str]:
        return self._user_id

    async def get(self) -> str:
        if self._user_id is not None:
            return self._user_id
        async with self._lock:
            # another task may have resolved it while we waited
            if self._user_id is None:
                resp = await self._client.auth_test()
                if not resp.get("ok") or not resp.get("user_id"):
                    raise UpstreamError("Failed to resolve bot identity", resp.get("error"))
                self._user_id = resp["user_id"]
                _log(f"Bot identity resolved: {self._user_id}")
        return self._user_id
