"""Shared aiohttp helpers for API requests."""

import asyncio
from typing import Any, Dict, Optional, Type

import aiohttp

from ..constants.config import REQUEST_TIMEOUT_SECONDS
from ..errors import FetchError


def create_session() -> aiohttp.ClientSession:
    """Create a client session with the default request timeout."""
    return aiohttp.ClientSession(
        timeout=aiohttp.ClientTimeout(total=REQUEST_TIMEOUT_SECONDS),
        headers={"Accept": "application/json"},
    )


async def get_json(
    session: aiohttp.ClientSession,
    url: str,
    params: Optional[Dict[str, Any]] = None,
    error_cls: Type[FetchError] = FetchError,
) -> Dict[str, Any]:
    """
    GET a URL and decode its JSON body.

    Args:
        session: aiohttp session
        url: URL to fetch
        params: Optional query parameters
        error_cls: FetchError subclass raised on failure

    Returns:
        Decoded JSON object

    Raises:
        error_cls: On transport errors, non-200 responses or undecodable bodies
    """
    try:
        async with session.get(url, params=params) as response:
            if response.status != 200:
                raise error_cls(f"Failed to fetch {url}", url=url, status=response.status)
            data = await response.json()
    except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
        raise error_cls(f"Failed to fetch {url}: {e}", url=url) from e

    if not isinstance(data, dict):
        raise error_cls(f"Unexpected payload from {url}", url=url)
    return data
