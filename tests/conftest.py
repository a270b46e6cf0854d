"""Shared fixtures: an in-memory SlackPort that records every call."""

import pytest


class FakeSlack:
    """SlackPort stand-in.

    history maps channel id to a list of message dicts (newest first) or
    to a full reply dict, which is returned as-is. Setting an entry to an
    Exception instance makes that channel's fetch raise it.
    """

    def __init__(self, channels=None, history=None, channels_ok=True, user_id="UBOT"):
        self.channels = channels if channels is not None else []
        self.history = history if history is not None else {}
        self.channels_ok = channels_ok
        self.user_id = user_id
        self.calls = []

    def call_names(self):
        return [c[0] for c in self.calls]

    async def get_channels(self, limit=100, cursor=None):
        self.calls.append(("get_channels", limit, cursor))
        if not self.channels_ok:
            return {"ok": False, "error": "invalid_auth"}
        return {"ok": True, "channels": list(self.channels)}

    async def post_message(self, channel_id, text):
        self.calls.append(("post_message", channel_id, text))
        return {"ok": True, "channel": channel_id, "message": {"text": text}}

    async def post_reply(self, channel_id, thread_ts, text):
        self.calls.append(("post_reply", channel_id, thread_ts, text))
        return {"ok": True, "channel": channel_id, "message": {"text": text, "thread_ts": thread_ts}}

    async def add_reaction(self, channel_id, timestamp, reaction):
        self.calls.append(("add_reaction", channel_id, timestamp, reaction))
        return {"ok": True}

    async def get_channel_history(self, channel_id, limit=10):
        self.calls.append(("get_channel_history", channel_id, limit))
        entry = self.history.get(channel_id, [])
        if isinstance(entry, Exception):
            raise entry
        if isinstance(entry, dict):
            return entry
        return {"ok": True, "messages": entry[:limit]}

    async def get_thread_replies(self, channel_id, thread_ts):
        self.calls.append(("get_thread_replies", channel_id, thread_ts))
        return {"ok": True, "messages": [{"ts": thread_ts, "text": "parent"}]}

    async def get_users(self, limit=100, cursor=None):
        self.calls.append(("get_users", limit, cursor))
        return {"ok": True, "members": [{"id": "U1", "name": "alice"}]}

    async def get_user_profile(self, user_id):
        self.calls.append(("get_user_profile", user_id))
        return {"ok": True, "profile": {"real_name": "Alice"}}

    async def auth_test(self):
        self.calls.append(("auth_test",))
        if not self.user_id:
            return {"ok": False, "error": "invalid_auth"}
        return {"ok": True, "user_id": self.user_id}


CHANNELS = [
    {"id": "C001", "name": "general", "name_normalized": "general"},
    {"id": "C002", "name": "random", "name_normalized": "random"},
    {"id": "C003", "name": "Dev-Ops", "name_normalized": "dev-ops"},
]


@pytest.fixture
def make_slack():
    def _make(**kwargs):
        kwargs.setdefault("channels", list(CHANNELS))
        return FakeSlack(**kwargs)
    return _make


@pytest.fixture
def slack(make_slack):
    return make_slack()
