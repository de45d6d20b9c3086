"""Tests for the Flask routes."""

from unittest.mock import AsyncMock, patch

import pytest

from helpers import API, FakeResponse, FakeSession, character_payload, episode_payload
from rick_morty_cards.errors import CharacterFetchError
from rick_morty_cards.models.character import CharacterModel
from rick_morty_cards.models.episode import EpisodeModel
from rick_morty_cards.models.sampling import SamplingExhausted, SamplingFailed, SamplingSuccess
from rick_morty_cards.renderers.modal import CharacterModal
from rick_morty_cards.server import app


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client


@pytest.fixture
def characters():
    return [
        CharacterModel.from_api_data(character_payload(1, name="Rick Sanchez")),
        CharacterModel.from_api_data(character_payload(2, name="Morty Smith", status="unknown")),
    ]


def test_index_renders_cards(client, characters):
    with patch("rick_morty_cards.server.fetch_random_characters", new=AsyncMock(return_value=SamplingSuccess(characters))) as fetch:
        response = client.get("/")

    assert response.status_code == 200
    html = response.get_data(as_text=True)
    assert "Rick Sanchez" in html
    assert "Morty Smith" in html
    assert html.count('class="character-card') == 2
    fetch.assert_awaited_once_with(12, "")


def test_index_passes_query_params(client, characters):
    with patch("rick_morty_cards.server.fetch_random_characters", new=AsyncMock(return_value=SamplingSuccess(characters))) as fetch:
        client.get("/?count=2&status=Dead")

    fetch.assert_awaited_once_with(2, "Dead")


@pytest.mark.parametrize("outcome", [
    SamplingFailed(CharacterFetchError("boom", url="http://example")),
    SamplingExhausted(attempts=10, collected=1, target=2),
])
def test_index_renders_nothing_when_cycle_does_not_succeed(client, outcome):
    with patch("rick_morty_cards.server.fetch_random_characters", new=AsyncMock(return_value=outcome)):
        response = client.get("/")

    assert response.status_code == 200
    assert "character-card" not in response.get_data(as_text=True)


@pytest.mark.parametrize("count", ["0", "-3", "many"])
def test_index_rejects_bad_count(client, count):
    with patch("rick_morty_cards.server.fetch_random_characters", new=AsyncMock()) as fetch:
        response = client.get(f"/?count={count}")

    assert response.status_code == 400
    fetch.assert_not_awaited()


def test_api_characters_json(client, characters):
    with patch("rick_morty_cards.server.fetch_random_characters", new=AsyncMock(return_value=SamplingSuccess(characters))):
        response = client.get("/api/characters?count=2")

    assert response.status_code == 200
    data = response.get_json()
    assert [c["id"] for c in data] == [1, 2]
    assert data[1]["status"] == "unknown"


def test_api_characters_exhausted(client):
    outcome = SamplingExhausted(attempts=20, collected=1, target=2)
    with patch("rick_morty_cards.server.fetch_random_characters", new=AsyncMock(return_value=outcome)):
        response = client.get("/api/characters?count=2&status=Dead")

    assert response.status_code == 502
    assert "1 of 2" in response.get_json()["error"]


def test_character_details(client, characters):
    modal = CharacterModal()
    modal.character = characters[0]
    modal.episodes = [EpisodeModel(code="S01E01", name="Pilot")]
    modal.visible = True

    with patch("rick_morty_cards.server.load_character_modal", new=AsyncMock(return_value=modal)) as load:
        response = client.get("/api/characters/1")

    assert response.status_code == 200
    data = response.get_json()
    assert data["name"] == "Rick Sanchez"
    assert data["episodes"] == [{"code": "S01E01", "name": "Pilot"}]
    load.assert_awaited_once_with(1)


def test_character_details_lookup_failure(client):
    error = CharacterFetchError("not found", url="http://example", status=404)
    with patch("rick_morty_cards.server.load_character_modal", new=AsyncMock(side_effect=error)):
        response = client.get("/api/characters/9999")

    assert response.status_code == 502
    assert "error" in response.get_json()


def test_static_script_is_served(client):
    response = client.get("/static/cards.js")

    assert response.status_code == 200
    assert b"characterModal" in response.data
    response.close()


def test_character_details_fetches_character_and_episodes(client):
    episodes = {
        f"{API}/episode/1": (episode_payload(1, "S01E01", "Pilot"), 0.05),
        f"{API}/episode/2": (episode_payload(2, "S01E02", "Lawnmower Dog"), 0.0),
    }

    def handler(url, params):
        if url == f"{API}/character/1":
            return FakeResponse(payload=character_payload(1, name="Rick Sanchez", episode=list(episodes)))
        payload, delay = episodes[url]
        return FakeResponse(payload=payload, delay=delay)

    session = FakeSession(handler)
    with patch("rick_morty_cards.renderers.modal.create_session", return_value=session):
        response = client.get("/api/characters/1")

    assert response.status_code == 200
    data = response.get_json()
    assert data["name"] == "Rick Sanchez"
    assert data["origin"] == "Earth (C-137)"
    assert data["episodes"] == [
        {"code": "S01E01", "name": "Pilot"},
        {"code": "S01E02", "name": "Lawnmower Dog"},
    ]
    assert [url for url, _ in session.requests][0] == f"{API}/character/1"
    assert len(session.requests) == 3


def test_character_details_upstream_404(client):
    session = FakeSession(lambda url, params: FakeResponse(status=404, payload={"error": "Character not found"}))

    with patch("rick_morty_cards.renderers.modal.create_session", return_value=session):
        response = client.get("/api/characters/9999")

    assert response.status_code == 502
    assert len(session.requests) == 1
