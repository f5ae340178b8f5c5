"""Participant and announcement card models.

A Participant is a conversation member as returned by the Teams membership
API. The AnnouncementCardModel is what the card template is rendered from.
"""

from typing import Any, Dict, List, Sequence

from pydantic import BaseModel, ConfigDict, Field


class Participant(BaseModel):
    """A conversation member eligible for selection."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Teams user id", min_length=1)
    name: str = Field(default="", description="Display name")

    @classmethod
    def from_channel_account(cls, account) -> "Participant":
        """Build a participant from a Bot Framework ChannelAccount."""
        return cls(id=account.id, name=account.name or "")


class AnnouncementCardWinner(BaseModel):
    """A winner as shown on the announcement card."""

    id: str = Field(..., description="Teams user id", min_length=1)
    name: str = Field(default="", description="Display name")


class AnnouncementCardModel(BaseModel):
    """Data the announcement card template is rendered against.

    Example:
        >>> model = AnnouncementCardModel.for_winners(
        ...     [Participant(id="u1", name="Alice")],
        ...     image_url="https://media.giphy.com/media/44gu1V41ejJni/giphy.gif"
        ... )
        >>> model.winners[0].name
        'Alice'
    """

    winners: List[AnnouncementCardWinner] = Field(default_factory=list, description="Selected participants")
    image_url: str = Field(..., description="Celebration image shown on the card", min_length=1)

    @classmethod
    def for_winners(cls, winners: Sequence[Participant], image_url: str) -> "AnnouncementCardModel":
        """Map participants to card winners, keeping their order."""
        return cls(
            winners=[AnnouncementCardWinner(id=w.id, name=w.name) for w in winners],
            image_url=image_url
        )

    def to_template_context(self) -> Dict[str, Any]:
        """Serialize to the exact field names the card template expects.

        Returns:
            Dict with a single ``model`` key holding ``image_url`` and a list
            of ``winners`` (each with ``id`` and ``name``).
        """
        return {
            "model": {
                "image_url": self.image_url,
                "winners": [
                    {"id": winner.id, "name": winner.name}
                    for winner in self.winners
                ],
            }
        }
