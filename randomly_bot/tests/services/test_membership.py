"""
Unit tests for conversation membership lookup.
"""
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from botbuilder.schema import ConversationAccount
from botbuilder.schema.teams import TeamsChannelAccount

from randomly_bot.app.models.announcement import Participant
from randomly_bot.app.services.membership import TeamsMemberDirectory


class TestTeamsMemberDirectory:
    """Test list_members() against a mocked TeamsInfo."""

    @pytest.fixture
    def teams_info(self):
        with patch("randomly_bot.app.services.membership.TeamsInfo") as mock_teams_info:
            accounts = [
                TeamsChannelAccount(id="29:alice", name="Alice"),
                TeamsChannelAccount(id="29:bob", name=None),
            ]
            mock_teams_info.get_members = AsyncMock(return_value=accounts)
            mock_teams_info.get_team_members = AsyncMock(return_value=accounts)
            yield mock_teams_info

    @pytest.fixture
    def turn_context(self):
        context = MagicMock()
        context.activity.conversation = ConversationAccount(id="19:chat@thread.v2", conversation_type="groupChat")
        return context

    @pytest.mark.asyncio
    async def test_current_conversation_uses_get_members(self, turn_context, teams_info):
        """The turn's own conversation is listed with TeamsInfo.get_members."""
        members = await TeamsMemberDirectory().list_members(turn_context, "19:chat@thread.v2")

        teams_info.get_members.assert_awaited_once_with(turn_context)
        teams_info.get_team_members.assert_not_awaited()
        assert members == [
            Participant(id="29:alice", name="Alice"),
            Participant(id="29:bob", name=""),
        ]

    @pytest.mark.asyncio
    async def test_team_id_uses_get_team_members(self, turn_context, teams_info):
        """A team id is listed with TeamsInfo.get_team_members."""
        members = await TeamsMemberDirectory().list_members(turn_context, "19:team@thread.skype")

        teams_info.get_team_members.assert_awaited_once_with(turn_context, "19:team@thread.skype")
        teams_info.get_members.assert_not_awaited()
        assert [member.id for member in members] == ["29:alice", "29:bob"]

    @pytest.mark.asyncio
    async def test_empty_roster(self, turn_context, teams_info):
        teams_info.get_members.return_value = []

        members = await TeamsMemberDirectory().list_members(turn_context, "19:chat@thread.v2")

        assert members == []

    @pytest.mark.asyncio
    async def test_fetch_errors_propagate(self, turn_context, teams_info):
        """Service errors are not swallowed."""
        teams_info.get_team_members.side_effect = ConnectionError("boom")

        with pytest.raises(ConnectionError):
            await TeamsMemberDirectory().list_members(turn_context, "19:team@thread.skype")
