"""Raw API payloads and an in-memory stand-in for aiohttp.ClientSession."""

import asyncio
from typing import Any, Callable

API = "https://rickandmortyapi.com/api"


def character_payload(character_id: int, status: str = "Alive", **overrides) -> dict[str, Any]:
    payload = {
        "id": character_id,
        "name": f"Character {character_id}",
        "status": status,
        "species": "Human",
        "type": "",
        "gender": "Male",
        "origin": {"name": "Earth (C-137)", "url": f"{API}/location/1"},
        "location": {"name": "Citadel of Ricks", "url": f"{API}/location/3"},
        "image": f"{API}/character/avatar/{character_id}.jpeg",
        "episode": [f"{API}/episode/1"],
        "url": f"{API}/character/{character_id}",
        "created": "2017-11-04T18:48:46.250Z",
    }
    payload.update(overrides)
    return payload


def page_payload(results: list[dict], pages: int = 1) -> dict[str, Any]:
    return {
        "info": {"count": len(results) * pages, "pages": pages, "next": None, "prev": None},
        "results": results,
    }


def episode_payload(episode_id: int, code: str, name: str) -> dict[str, Any]:
    return {
        "id": episode_id,
        "name": name,
        "air_date": "December 2, 2013",
        "episode": code,
        "characters": [],
        "url": f"{API}/episode/{episode_id}",
        "created": "2017-11-10T12:56:33.798Z",
    }


class FakeResponse:
    """Async context manager mimicking aiohttp.ClientResponse."""

    def __init__(self, status: int = 200, payload: Any = None, delay: float = 0.0):
        self.status = status
        self.payload = payload
        self.delay = delay

    async def json(self):
        if isinstance(self.payload, Exception):
            raise self.payload
        return self.payload

    async def __aenter__(self):
        if self.delay:
            await asyncio.sleep(self.delay)
        return self

    async def __aexit__(self, *exc_info):
        return False


class FakeSession:
    """Routes ``get`` calls to a handler and records every request.

    The handler receives ``(url, params)`` and returns a FakeResponse or
    raises (e.g. an aiohttp.ClientError) to simulate a transport failure.
    """

    def __init__(self, handler: Callable[[str, dict], FakeResponse]):
        self.handler = handler
        self.requests: list[tuple[str, dict]] = []

    def get(self, url: str, params: dict | None = None) -> FakeResponse:
        params = dict(params or {})
        self.requests.append((url, params))
        return self.handler(url, params)

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        return False

    @property
    def page_requests(self) -> list[int]:
        return [int(params["page"]) for _, params in self.requests if "page" in params]

