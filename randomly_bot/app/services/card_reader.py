"""
Announcement card rendering.

Fills the Jinja2 card template under ``<content root>/Cards`` with the
winners and a randomly chosen celebration image. The template is read and
parsed on every call; nothing is cached between turns.
"""
import json
import logging
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Union

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    TemplateNotFound,
    TemplateSyntaxError,
    UndefinedError
)

from randomly_bot.app.errors import TemplateLoadError, TemplateParseError
from randomly_bot.app.models.announcement import AnnouncementCardModel, Participant
from randomly_bot.app.services.selector import select_random

logger = logging.getLogger(__name__)

CARDS_DIRECTORY = "Cards"
ANNOUNCEMENT_CARD_FILE = "AnnouncementCard.j2"


@dataclass(frozen=True)
class CardTemplate:
    """Location of a card template relative to a content root."""
    content_root: Path
    file_name: str = ANNOUNCEMENT_CARD_FILE

    @classmethod
    def announcement(cls, content_root: Union[str, Path]) -> "CardTemplate":
        return cls(content_root=Path(content_root))

    @property
    def name(self) -> str:
        """Loader-relative template name (always forward slashes)."""
        return f"{CARDS_DIRECTORY}/{self.file_name}"

    @property
    def path(self) -> Path:
        return self.content_root / CARDS_DIRECTORY / self.file_name


class CardReader:
    """Render card templates into Adaptive Card JSON strings."""

    @staticmethod
    def get_announcement_card(template: CardTemplate, model: AnnouncementCardModel) -> str:
        """
        Render the announcement card for ``model``.

        Args:
            template: Card template location
            model: Winners and image to render

        Returns:
            Rendered card JSON as a string

        Raises:
            TemplateLoadError: Template file is missing or unreadable
            TemplateParseError: Template is malformed or output is not JSON
        """
        if model is None:
            raise ValueError("model is required")

        env = Environment(
            loader=FileSystemLoader(str(template.content_root)),
            autoescape=False,
            undefined=StrictUndefined,
            cache_size=0
        )
        # JSON-encode without ASCII or HTML escaping so names and URLs stay verbatim
        env.filters["json"] = lambda value: json.dumps(value, ensure_ascii=False)

        try:
            jinja_template = env.get_template(template.name)
        except TemplateNotFound as e:
            raise TemplateLoadError(f"Card template not found: {template.path}") from e
        except TemplateSyntaxError as e:
            raise TemplateParseError(
                f"Card template {template.path} failed to parse at line {e.lineno}: {e.message}"
            ) from e
        except (OSError, UnicodeDecodeError) as e:
            raise TemplateLoadError(f"Card template unreadable: {template.path}: {e}") from e

        try:
            card_body = jinja_template.render(**model.to_template_context())
        except UndefinedError as e:
            raise TemplateParseError(f"Card template {template.path} references an unknown field: {e}") from e
        except (TemplateError, TypeError) as e:
            raise TemplateParseError(f"Card template {template.path} failed to render: {e}") from e

        try:
            json.loads(card_body)
        except json.JSONDecodeError as e:
            raise TemplateParseError(
                f"Card template {template.path} did not render to valid JSON: {e}"
            ) from e

        return card_body


def render_announcement(
    winners: Sequence[Participant],
    template: CardTemplate,
    image_pool: Sequence[str],
    rng: Optional[random.Random] = None
) -> str:
    """
    Build and render the winner announcement card.

    The image is drawn from ``image_pool`` independently of how the winners
    were chosen.

    Raises:
        InvalidInputError: ``image_pool`` is empty
        TemplateLoadError: Template file is missing or unreadable
        TemplateParseError: Template is malformed or output is not JSON
    """
    image_url = select_random(image_pool, rng)
    model = AnnouncementCardModel.for_winners(winners, image_url=image_url)

    logger.debug(f"Rendering {template.path} for {len(model.winners)} winner(s) with image {image_url}")

    return CardReader.get_announcement_card(template, model)
