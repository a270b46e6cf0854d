"""Tests for channel name resolution against a fixture channel list."""

import pytest

from slack_mcp.domain.resolver import CHANNEL_PAGE_SIZE, list_visible_channels, resolve_channel_id
from slack_mcp.errors import ChannelNotFoundError, MissingArgumentError, UpstreamError


class TestResolveById:
    @pytest.mark.asyncio
    async def test_returns_id_unchanged_without_calls(self, slack):
        assert await resolve_channel_id(slack, channel_id="CXYZ") == "CXYZ"
        assert slack.calls == []

    @pytest.mark.asyncio
    async def test_id_wins_over_name(self, slack):
        result = await resolve_channel_id(slack, channel_id="CXYZ", channel_name="general")
        assert result == "CXYZ"
        assert slack.calls == []

    @pytest.mark.asyncio
    async def test_unknown_id_not_validated(self, slack):
        assert await resolve_channel_id(slack, channel_id="C-DOES-NOT-EXIST") == "C-DOES-NOT-EXIST"


class TestResolveByName:
    @pytest.mark.asyncio
    async def test_match_on_name(self, slack):
        assert await resolve_channel_id(slack, channel_name="random") == "C002"
        assert slack.calls == [("get_channels", CHANNEL_PAGE_SIZE, None)]

    @pytest.mark.asyncio
    async def test_match_on_name_normalized(self, slack):
        assert await resolve_channel_id(slack, channel_name="dev-ops") == "C003"

    @pytest.mark.asyncio
    async def test_case_sensitive(self, slack):
        with pytest.raises(ChannelNotFoundError):
            await resolve_channel_id(slack, channel_name="GENERAL")

    @pytest.mark.asyncio
    async def test_first_match_wins(self, make_slack):
        slack = make_slack(channels=[
            {"id": "C1", "name": "dup", "name_normalized": "dup"},
            {"id": "C2", "name": "dup", "name_normalized": "dup"},
        ])
        assert await resolve_channel_id(slack, channel_name="dup") == "C1"

    @pytest.mark.asyncio
    async def test_not_found(self, slack):
        with pytest.raises(ChannelNotFoundError) as exc:
            await resolve_channel_id(slack, channel_name="missing")
        assert "missing" in str(exc.value)
        assert exc.value.channel_name == "missing"

    @pytest.mark.asyncio
    async def test_listing_failure(self, make_slack):
        slack = make_slack(channels_ok=False)
        with pytest.raises(UpstreamError) as exc:
            await resolve_channel_id(slack, channel_name="general")
        assert exc.value.error_code == "invalid_auth"
        assert "Failed to fetch channels list" in str(exc.value)


class TestMissingArguments:
    @pytest.mark.asyncio
    async def test_neither_given(self, slack):
        with pytest.raises(MissingArgumentError):
            await resolve_channel_id(slack)
        assert slack.calls == []

    @pytest.mark.asyncio
    async def test_empty_strings(self, slack):
        with pytest.raises(MissingArgumentError):
            await resolve_channel_id(slack, channel_id="", channel_name="")


class TestListVisibleChannels:
    @pytest.mark.asyncio
    async def test_builds_channels(self, slack):
        channels = await list_visible_channels(slack)
        assert [c.id for c in channels] == ["C001", "C002", "C003"]
        assert channels[2].name == "Dev-Ops"

    @pytest.mark.asyncio
    async def test_requests_single_page(self, slack):
        await list_visible_channels(slack)
        assert slack.calls == [("get_channels", 200, None)]
