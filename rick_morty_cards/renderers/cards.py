"""Character cards and the page that lays them out."""

from dataclasses import dataclass
from typing import Iterable, Optional

from markupsafe import Markup

from ..constants.config import DEFAULT_CHARACTER_COUNT, DEFAULT_STATUS, KNOWN_STATUSES
from ..constants.paths import CARD_TEMPLATE, INDEX_TEMPLATE
from ..models.character import CharacterModel
from .modal import CharacterModal
from .status import StatusIndicator, status_indicator
from .templating import render


@dataclass(frozen=True)
class CharacterCard:
    """View data for one card."""
    character_id: int
    name: str
    image: str
    summary: str
    indicator: Optional[StatusIndicator]

    @property
    def status_svg(self) -> Markup:
        return Markup(self.indicator.svg) if self.indicator else Markup("")


def build_card(character: CharacterModel) -> CharacterCard:
    return CharacterCard(
        character_id=character.id,
        name=character.name,
        image=character.image,
        summary=character.summary,
        indicator=status_indicator(character.status),
    )


def build_cards(characters: Iterable[CharacterModel]) -> list[CharacterCard]:
    return [build_card(character) for character in characters]


def render_card(card: CharacterCard) -> str:
    return render(CARD_TEMPLATE, card=card)


def render_characters_page(
    characters: Iterable[CharacterModel],
    count: int = DEFAULT_CHARACTER_COUNT,
    status: str = DEFAULT_STATUS,
    modal: Optional[CharacterModal] = None,
) -> str:
    """
    Render the full document: card grid plus the shared, hidden modal.

    An empty ``characters`` yields the page with an empty grid.
    """
    modal = modal or CharacterModal()
    return render(
        INDEX_TEMPLATE,
        cards=[Markup(render_card(card)) for card in build_cards(characters)],
        modal=Markup(modal.render()),
        count=count,
        status=status,
        statuses=KNOWN_STATUSES,
    )
