"""Detail modal shared by every card on a page."""

import logging
from typing import Any, Optional

import aiohttp

from ..constants.paths import MODAL_TEMPLATE
from ..fetchers.characters import fetch_character
from ..fetchers.episodes import resolve_episodes
from ..fetchers.http import create_session
from ..models.character import CharacterModel
from ..models.episode import EpisodeModel
from .templating import render

logger = logging.getLogger(__name__)


class CharacterModal:
    """The single active detail view.

    ``show`` fills the modal with a character and its episodes and makes it
    visible; ``hide`` only hides it. Showing another character replaces the
    previous content, and episodes are resolved again on every ``show``.
    """

    def __init__(self):
        self.character: Optional[CharacterModel] = None
        self.episodes: list[EpisodeModel] = []
        self.visible = False

    async def show(self, character: CharacterModel, session: aiohttp.ClientSession) -> None:
        self.character = character
        self.episodes = []
        self.episodes = await resolve_episodes(session, character.episode)
        logger.debug(
            "Resolved %d/%d episodes for %s",
            len(self.episodes), len(character.episode), character.name,
        )
        self.visible = True

    def hide(self) -> None:
        self.visible = False

    @property
    def css_class(self) -> str:
        return "flex" if self.visible else "hidden"

    def to_dict(self) -> dict[str, Any]:
        """Content of the modal as the static script expects it."""
        if self.character is None:
            return {}
        return {
            "id": self.character.id,
            "name": self.character.name,
            "image": self.character.image,
            "origin": self.character.origin.name,
            "location": self.character.location.name,
            "episodes": [{"code": e.code, "name": e.name} for e in self.episodes],
        }

    def render(self) -> str:
        return render(MODAL_TEMPLATE, modal=self)


async def load_character_modal(character_id: int) -> CharacterModal:
    """Look a character up by ID and show it in a fresh modal."""
    modal = CharacterModal()
    async with create_session() as session:
        character = await fetch_character(session, character_id)
        await modal.show(character, session)
    return modal
