"""Domain data models — pure Python dataclasses."""

from dataclasses import dataclass, field
from typing import Any, Dict


def mention_marker(user_id: str) -> str:
    """Slack's inline mention token for a user, e.g. ``<@U123>``."""
    return f"<@{user_id}>"


@dataclass(frozen=True)
class Channel:
    id: str
    name: str = ""
    name_normalized: str = ""

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Channel":
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            name_normalized=data.get("name_normalized", ""),
        )

    def matches(self, name: str) -> bool:
        """Exact, case-sensitive match on either display name."""
        return self.name == name or self.name_normalized == name


@dataclass(frozen=True)
class Message:
    """A message as returned by conversations.history."""

    text: str
    ts: str
    channel_id: str
    raw: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_api(cls, data: Dict[str, Any], channel_id: str) -> "Message":
        return cls(
            text=data.get("text") or "",
            ts=data.get("ts", ""),
            channel_id=channel_id,
            raw=data,
        )

    def mentions(self, user_id: str) -> bool:
        return mention_marker(user_id) in self.text
