"""Episode resolver for episode reference URLs."""

import asyncio
import logging
from typing import Sequence

import aiohttp
from pydantic import ValidationError

from ..errors import EpisodeFetchError
from ..models.episode import EpisodeModel
from .http import get_json

logger = logging.getLogger(__name__)


async def resolve_episode(session: aiohttp.ClientSession, reference: str) -> EpisodeModel:
    """
    Fetch the episode an episode reference URL points at.

    Args:
        session: aiohttp session
        reference: Episode URL as listed in a character's ``episode`` field

    Returns:
        EpisodeModel with code and name

    Raises:
        EpisodeFetchError: If the request fails or the payload is malformed
    """
    data = await get_json(session, reference, error_cls=EpisodeFetchError)
    try:
        return EpisodeModel.model_validate(data)
    except ValidationError as e:
        raise EpisodeFetchError(f"Malformed episode payload: {e.error_count()} errors", url=reference) from e


async def resolve_episodes(
    session: aiohttp.ClientSession,
    references: Sequence[str],
) -> list[EpisodeModel]:
    """
    Resolve many episode references concurrently.

    One request is issued per reference. Failed lookups are logged and
    left out; the remaining episodes keep the order of ``references``.
    """
    tasks = [resolve_episode(session, reference) for reference in references]
    results = await asyncio.gather(*tasks, return_exceptions=True)

    episodes: list[EpisodeModel] = []
    for reference, result in zip(references, results):
        if isinstance(result, EpisodeModel):
            episodes.append(result)
        elif isinstance(result, EpisodeFetchError):
            logger.error("Error fetching episode %s: %s", reference, result)
        elif isinstance(result, BaseException):
            raise result
    return episodes
