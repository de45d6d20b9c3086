"""Character listing fetcher for the Rick and Morty API."""

import logging
import random
from typing import Optional

import aiohttp
from pydantic import ValidationError

from ..constants.config import CHARACTER_ENDPOINT
from ..errors import CharacterFetchError, EmptyPageError
from ..models.character import CharacterModel
from ..models.page import CharacterPage, PageInfo
from .http import get_json

logger = logging.getLogger(__name__)


def listing_params(status: str, page: Optional[int] = None) -> dict[str, str]:
    """Query parameters for the listing endpoint. An empty status means unfiltered."""
    params = {"status": status}
    if page is not None:
        params["page"] = str(page)
    return params


async def fetch_character_page(
    session: aiohttp.ClientSession,
    page: int,
    status: str,
) -> CharacterPage:
    """
    Fetch one page of the character listing.

    Args:
        session: aiohttp session
        page: 1-based page number
        status: Status filter (empty string for any)

    Returns:
        Parsed CharacterPage
    """
    data = await get_json(
        session,
        CHARACTER_ENDPOINT,
        params=listing_params(status, page),
        error_cls=CharacterFetchError,
    )
    try:
        return CharacterPage.model_validate(data)
    except ValidationError as e:
        raise CharacterFetchError(
            f"Malformed listing page {page}: {e.error_count()} errors", url=CHARACTER_ENDPOINT
        ) from e


async def fetch_page_info(session: aiohttp.ClientSession, status: str) -> PageInfo:
    """Ask the listing endpoint how many characters and pages match the status filter."""
    data = await get_json(
        session,
        CHARACTER_ENDPOINT,
        params=listing_params(status),
        error_cls=CharacterFetchError,
    )
    info = data.get("info")
    if not isinstance(info, dict):
        raise CharacterFetchError(f"No info block in listing response: {info!r}", url=CHARACTER_ENDPOINT)
    try:
        page_info = PageInfo.model_validate(info)
    except ValidationError as e:
        raise CharacterFetchError(
            f"Malformed info block: {e.error_count()} errors", url=CHARACTER_ENDPOINT
        ) from e
    if page_info.pages < 1:
        raise CharacterFetchError(f"No pages in listing response: {page_info.pages}", url=CHARACTER_ENDPOINT)
    logger.debug("Status %r matches %s characters on %d pages", status, page_info.count, page_info.pages)
    return page_info


async def fetch_one_character(
    session: aiohttp.ClientSession,
    page: int,
    status: str,
    rng: Optional[random.Random] = None,
) -> CharacterModel:
    """
    Fetch a page and pick one of its characters uniformly at random.

    Raises:
        EmptyPageError: If the page has no results
        CharacterFetchError: If the request fails
    """
    rng = rng or random
    character_page = await fetch_character_page(session, page, status)
    if not character_page.results:
        raise EmptyPageError(f"Page {page} has no characters", url=CHARACTER_ENDPOINT)
    return rng.choice(character_page.results)


async def fetch_character(session: aiohttp.ClientSession, character_id: int) -> CharacterModel:
    """Fetch a single character by ID."""
    url = f"{CHARACTER_ENDPOINT}{character_id}"
    data = await get_json(session, url, error_cls=CharacterFetchError)
    try:
        return CharacterModel.from_api_data(data)
    except ValidationError as e:
        raise CharacterFetchError(f"Malformed character {character_id}", url=url) from e
