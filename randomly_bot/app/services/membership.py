"""
Conversation membership lookup through TeamsInfo.

The current conversation (a group chat, or a team channel without team info)
is listed with ``TeamsInfo.get_members``; any other id is treated as a team id
and listed with ``TeamsInfo.get_team_members``.
"""
import logging
from typing import List

from botbuilder.core import TurnContext
from botbuilder.core.teams import TeamsInfo

from randomly_bot.app.models.announcement import Participant

logger = logging.getLogger(__name__)


class TeamsMemberDirectory:
    """List conversation or team members via TeamsInfo."""

    async def list_members(self, turn_context: TurnContext, conversation_id: str) -> List[Participant]:
        """
        Fetch the members of a conversation or team.

        Args:
            turn_context: Current turn
            conversation_id: Group chat conversation id or team id

        Returns:
            Members in the order the service returned them
        """
        conversation = turn_context.activity.conversation
        if conversation is not None and conversation.id == conversation_id:
            accounts = await TeamsInfo.get_members(turn_context)
        else:
            accounts = await TeamsInfo.get_team_members(turn_context, conversation_id)

        members = [Participant.from_channel_account(account) for account in accounts or []]

        logger.info(f"Fetched {len(members)} members for conversation {conversation_id}")
        return members
