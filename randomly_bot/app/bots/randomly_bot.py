"""
Randomly bot - picks a random member of a group chat or team.

Single-turn processing: every message in a group chat or team channel lists
the conversation members, picks one and replies with an announcement card.
Any other conversation type gets a short help text.
"""
import json
import logging
import random
from typing import Optional, Sequence

from botbuilder.core import CardFactory, ConversationState, MessageFactory, TurnContext
from botbuilder.core.teams import TeamsActivityHandler, teams_get_team_info
from botbuilder.schema import Activity

from randomly_bot.app.services.card_reader import CardTemplate, render_announcement
from randomly_bot.app.services.membership import TeamsMemberDirectory
from randomly_bot.app.services.selector import select_random

logger = logging.getLogger(__name__)

GROUP_CHAT_CONVERSATION = "groupChat"
TEAM_CONVERSATION = "team"

TURN_COUNT_PROPERTY = "TurnCount"

HELP_TEXT = (
    "Sorry my little 🤖 🧠 doesn't handle that yet. "
    "I can help you choose a person at random from a group-chat or team to carry some task out. "
    "Just add me to a team or group chat and summon me by @ mentioning!"
)


def resolve_member_scope(activity: Activity) -> Optional[str]:
    """
    Return the id whose members should be listed, or None if unsupported.

    Group chats use the conversation id; team channels use the team id from
    the Teams channel data, falling back to the conversation id.
    """
    conversation = activity.conversation
    if conversation is None:
        return None

    conversation_type = conversation.conversation_type
    if conversation_type == GROUP_CHAT_CONVERSATION:
        return conversation.id
    if conversation_type == TEAM_CONVERSATION:
        team_info = teams_get_team_info(activity)
        if team_info and team_info.id:
            return team_info.id
        logger.warning(f"Team conversation {conversation.id} carried no team info, using conversation id")
        return conversation.id
    return None


class RandomlyBot(TeamsActivityHandler):
    """
    Teams activity handler for picking a random teammate.

    The handler keeps no per-turn state on the instance; the only shared
    objects are read-only configuration and the conversation state store.
    """

    def __init__(
        self,
        conversation_state: ConversationState,
        card_template: CardTemplate,
        image_pool: Sequence[str],
        member_directory=None,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize the bot.

        Args:
            conversation_state: Managed conversation state
            card_template: Announcement card template location
            image_pool: Celebration image URLs to choose from
            member_directory: Object with ``list_members(turn_context, conversation_id)``
            rng: Optional random source (fresh generator per draw if omitted)
        """
        if conversation_state is None:
            raise TypeError("RandomlyBot: missing conversation_state")
        if card_template is None:
            raise TypeError("RandomlyBot: missing card_template")

        self.conversation_state = conversation_state
        self.turn_count_accessor = conversation_state.create_property(TURN_COUNT_PROPERTY)
        self.card_template = card_template
        self.image_pool = list(image_pool)
        self.member_directory = member_directory or TeamsMemberDirectory()
        self.rng = rng

    async def on_turn(self, turn_context: TurnContext):
        await super().on_turn(turn_context)

        # Persist state changes made during the turn
        await self.conversation_state.save_changes(turn_context)

    async def on_message_activity(self, turn_context: TurnContext):
        activity = turn_context.activity

        turn_count = await self.turn_count_accessor.get(turn_context, int)
        await self.turn_count_accessor.set(turn_context, turn_count + 1)

        conversation_type = activity.conversation.conversation_type if activity.conversation else None
        logger.debug(f"Turn {turn_count + 1} in conversation type '{conversation_type}'")

        member_scope = resolve_member_scope(activity)
        if member_scope is None:
            await turn_context.send_activity(MessageFactory.text(HELP_TEXT))
            return

        members = await self.member_directory.list_members(turn_context, member_scope)
        winner = select_random(members, self.rng)

        logger.info(
            f"Selected {winner.id} from {len(members)} members of {conversation_type} {member_scope}"
        )

        card_json = render_announcement([winner], self.card_template, self.image_pool, self.rng)
        attachment = CardFactory.adaptive_card(json.loads(card_json))

        await turn_context.send_activity(MessageFactory.attachment(attachment))
