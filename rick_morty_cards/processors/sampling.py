"""Random sampling of distinct characters from the paginated listing."""

import logging
import random
from typing import Optional

import aiohttp

from ..constants.config import (
    DEFAULT_CHARACTER_COUNT,
    DEFAULT_STATUS,
    MAX_ATTEMPTS_PER_CHARACTER,
)
from ..errors import CharacterFetchError, EmptyPageError
from ..fetchers.characters import fetch_one_character, fetch_page_info
from ..fetchers.http import create_session
from ..models.character import CharacterModel
from ..models.sampling import (
    SamplingExhausted,
    SamplingFailed,
    SamplingOutcome,
    SamplingSuccess,
)

logger = logging.getLogger(__name__)


def default_attempt_budget(target_count: int) -> int:
    return target_count * MAX_ATTEMPTS_PER_CHARACTER


async def sample_unique_characters(
    session: aiohttp.ClientSession,
    target_count: int,
    status: str,
    total_pages: int,
    max_attempts: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> SamplingOutcome:
    """
    Collect ``target_count`` distinct characters by rejection sampling.

    Each attempt picks a random page in ``[1, total_pages]``, fetches it and
    keeps one random character from it unless its ID was already drawn.
    Attempts run one at a time; the next request is only issued once the
    previous one has settled.

    Args:
        session: aiohttp session
        target_count: Number of distinct characters wanted (>= 1)
        status: Status filter (empty string for any)
        total_pages: Page count reported for ``status`` (>= 1)
        max_attempts: Attempt budget (default: target_count * 10)
        rng: Random source (default: the ``random`` module)

    Returns:
        SamplingSuccess with exactly ``target_count`` characters,
        SamplingExhausted if the budget ran out first, or
        SamplingFailed on the first fetch error.
    """
    if target_count < 1:
        raise ValueError(f"target_count must be positive, got {target_count}")
    if total_pages < 1:
        raise ValueError(f"total_pages must be positive, got {total_pages}")

    rng = rng or random.Random()
    if max_attempts is None:
        max_attempts = default_attempt_budget(target_count)

    seen_ids: set[int] = set()
    characters: list[CharacterModel] = []
    attempts = 0

    while attempts < max_attempts:
        attempts += 1
        page = rng.randint(1, total_pages)

        try:
            character = await fetch_one_character(session, page, status, rng)
        except EmptyPageError as e:
            logger.warning("Skipping empty page %d (attempt %d/%d): %s", page, attempts, max_attempts, e)
            continue
        except CharacterFetchError as e:
            logger.error("Error fetching character: %s", e)
            return SamplingFailed(error=e)

        if character.id in seen_ids:
            logger.debug("Duplicate draw of character %d on page %d", character.id, page)
            continue

        seen_ids.add(character.id)
        characters.append(character)
        logger.debug("Drew %s (%d/%d)", character.name, len(characters), target_count)

        if len(characters) >= target_count:
            logger.info("Sampled %d characters in %d attempts", len(characters), attempts)
            return SamplingSuccess(characters=characters)

    logger.warning(
        "Gave up after %d attempts with %d/%d distinct characters",
        attempts, len(characters), target_count,
    )
    return SamplingExhausted(attempts=attempts, collected=len(characters), target=target_count)


async def fetch_random_characters(
    count: int = DEFAULT_CHARACTER_COUNT,
    status: str = DEFAULT_STATUS,
    session: Optional[aiohttp.ClientSession] = None,
    rng: Optional[random.Random] = None,
    max_attempts: Optional[int] = None,
) -> SamplingOutcome:
    """
    Run a full sampling cycle: query the page count, then sample.

    A failing page-count query is logged and reported as SamplingFailed
    without starting the sampling loop. When fewer characters match
    ``status`` than ``count``, SamplingExhausted is returned at once.
    """
    if session is None:
        async with create_session() as own_session:
            return await fetch_random_characters(count, status, own_session, rng, max_attempts)

    try:
        page_info = await fetch_page_info(session, status)
    except CharacterFetchError as e:
        logger.error("Error fetching pages: %s", e)
        return SamplingFailed(error=e)

    if page_info.count is not None and count > page_info.count:
        logger.warning("Only %d characters match status %r, %d requested", page_info.count, status, count)
        return SamplingExhausted(attempts=0, collected=0, target=count)

    return await sample_unique_characters(
        session,
        target_count=count,
        status=status,
        total_pages=page_info.pages,
        max_attempts=max_attempts,
        rng=rng,
    )
