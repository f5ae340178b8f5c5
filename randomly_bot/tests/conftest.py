"""
Shared pytest configuration and fixtures for Randomly bot tests.
Provides activity builders, a fake member directory and card templates.
"""

import os
import sys
from pathlib import Path
from typing import List
from unittest.mock import AsyncMock

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

# Run the adapter without Bot Framework auth during tests
os.environ.setdefault("MICROSOFT_APP_ID", "")
os.environ.setdefault("MICROSOFT_APP_PASSWORD", "")

from botbuilder.core import ConversationState, MemoryStorage  # noqa: E402
from botbuilder.schema import Activity, ActivityTypes, ChannelAccount, ConversationAccount  # noqa: E402

from randomly_bot.app.config import DEFAULT_WINNER_IMAGE_URLS  # noqa: E402
from randomly_bot.app.models.announcement import Participant  # noqa: E402
from randomly_bot.app.services.card_reader import CardTemplate  # noqa: E402

PACKAGE_CONTENT_ROOT = Path(__file__).resolve().parents[1] / "app"


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as integration test"
    )


class FakeMemberDirectory:
    """Member directory returning a fixed roster and recording lookups."""

    def __init__(self, members: List[Participant]):
        self.members = members
        self.list_members = AsyncMock(side_effect=self._list_members)

    async def _list_members(self, turn_context, conversation_id):
        return list(self.members)


def make_message_activity(
    conversation_type: str,
    conversation_id: str = "19:conversation@thread.v2",
    team_id: str = None,
    text: str = "<at>Randomly</at> pick someone"
) -> Activity:
    """Build a Teams message activity for the given conversation type."""
    channel_data = {"team": {"id": team_id}} if team_id else None
    return Activity(
        type=ActivityTypes.message,
        id="activity-1",
        channel_id="msteams",
        service_url="https://smba.trafficmanager.net/amer/",
        text=text,
        from_property=ChannelAccount(id="user-sender", name="Sender"),
        recipient=ChannelAccount(id="bot-randomly", name="Randomly"),
        conversation=ConversationAccount(
            id=conversation_id,
            conversation_type=conversation_type,
            is_group=conversation_type != "personal"
        ),
        channel_data=channel_data
    )


@pytest.fixture
def roster():
    """Four-member team roster."""
    return [
        Participant(id="29:alice", name="Alice"),
        Participant(id="29:bob", name="Bob"),
        Participant(id="29:carol", name="Carol"),
        Participant(id="29:dave", name="Dave"),
    ]


@pytest.fixture
def member_directory(roster):
    return FakeMemberDirectory(roster)


@pytest.fixture
def conversation_state():
    return ConversationState(MemoryStorage())


@pytest.fixture
def card_template():
    """The announcement card template shipped with the package."""
    return CardTemplate.announcement(PACKAGE_CONTENT_ROOT)


@pytest.fixture
def image_pool():
    return list(DEFAULT_WINNER_IMAGE_URLS)


@pytest.fixture
def write_card_template(tmp_path):
    """Write an announcement template under a temporary content root."""

    def _write(content: str) -> CardTemplate:
        cards_dir = tmp_path / "Cards"
        cards_dir.mkdir(exist_ok=True)
        (cards_dir / "AnnouncementCard.j2").write_text(content, encoding="utf-8")
        return CardTemplate.announcement(tmp_path)

    return _write


@pytest.fixture
def message_activity():
    """Factory for Teams message activities."""
    return make_message_activity
