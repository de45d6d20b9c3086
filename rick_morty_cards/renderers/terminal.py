"""Plain-text rendition of cards and modal content for the CLI."""

from typing import Iterable

import click

from ..models.character import CharacterModel
from .modal import CharacterModal
from .status import status_indicator

STATUS_COLORS = {
    "text-green-rick": "green",
    "text-rose-summer": "red",
    "text-yellow-morty": "yellow",
}


def format_card(character: CharacterModel) -> str:
    indicator = status_indicator(character.status)
    if indicator:
        glyph = click.style(indicator.symbol, fg=STATUS_COLORS[indicator.color_class])
    else:
        glyph = " "
    return f"{glyph} #{character.id:<4} {character.name} ({character.summary})"


def render_terminal_cards(characters: Iterable[CharacterModel]) -> str:
    return "\n".join(format_card(character) for character in characters)


def render_terminal_modal(modal: CharacterModal) -> str:
    content = modal.to_dict()
    if not content:
        return ""
    lines = [
        click.style(content["name"], bold=True),
        f"  Origin:   {content['origin']}",
        f"  Location: {content['location']}",
        f"  Image:    {content['image']}",
        f"  Episodes ({len(content['episodes'])}):",
    ]
    lines.extend(
        f"    {click.style(episode['code'], bold=True)} {episode['name']}"
        for episode in content["episodes"]
    )
    return "\n".join(lines)
