"""Flask server rendering sampled characters as cards."""

import asyncio
import logging

from flask import Flask, Response, jsonify, request

from .constants.config import DEFAULT_CHARACTER_COUNT, DEFAULT_STATUS
from .constants.paths import STATIC_DIR
from .errors import CharacterFetchError
from .models.sampling import SamplingExhausted, SamplingFailed, SamplingOutcome, SamplingSuccess
from .processors.sampling import fetch_random_characters
from .renderers.cards import render_characters_page
from .renderers.modal import load_character_modal

logger = logging.getLogger(__name__)

app = Flask(__name__, static_folder=str(STATIC_DIR), static_url_path="/static")


def get_cycle_params() -> tuple[int, str] | None:
    """Read ``count`` and ``status`` from the query string, or None if invalid."""
    status = request.args.get("status", default=DEFAULT_STATUS).strip()
    try:
        count = int(request.args.get("count", DEFAULT_CHARACTER_COUNT))
    except ValueError:
        return None
    if count < 1:
        return None
    return count, status


def outcome_error(outcome: SamplingOutcome) -> str:
    if isinstance(outcome, SamplingExhausted):
        return (
            f"Only found {outcome.collected} of {outcome.target} distinct characters "
            f"in {outcome.attempts} attempts"
        )
    if isinstance(outcome, SamplingFailed):
        return str(outcome.error)
    return ""


@app.route("/")
def characters_page() -> str | tuple[str, int]:
    """Run a sampling cycle and render the cards page."""
    params = get_cycle_params()
    if params is None:
        return "count must be a positive integer", 400
    count, status = params

    outcome = asyncio.run(fetch_random_characters(count, status))

    # Failed or exhausted cycles render nothing
    characters = outcome.characters if isinstance(outcome, SamplingSuccess) else []
    return render_characters_page(characters, count=count, status=status)


@app.route("/api/characters")
def characters_json() -> Response | tuple[Response, int]:
    """Run a sampling cycle and return the characters as JSON."""
    params = get_cycle_params()
    if params is None:
        return jsonify({"error": "count must be a positive integer"}), 400
    count, status = params

    outcome = asyncio.run(fetch_random_characters(count, status))
    if not isinstance(outcome, SamplingSuccess):
        return jsonify({"error": outcome_error(outcome)}), 502

    return jsonify([character.model_dump() for character in outcome.characters])


@app.route("/api/characters/<int:character_id>")
def character_details(character_id: int) -> Response | tuple[Response, int]:
    """Return modal content for one character, episodes in airing order."""
    try:
        modal = asyncio.run(load_character_modal(character_id))
    except CharacterFetchError as e:
        logger.error("Error fetching character %d: %s", character_id, e)
        return jsonify({"error": str(e)}), 502

    return jsonify(modal.to_dict())


def run_server(host: str = "0.0.0.0", port: int = 3000, debug: bool = False) -> None:
    """Run the Flask development server."""
    print(f"\nRick and Morty cards running at http://localhost:{port}/\n")
    app.run(host=host, port=port, debug=debug)


if __name__ == "__main__":
    run_server()
