"""Exception types raised while talking to the Rick and Morty API."""

from typing import Optional


class RickMortyCardsError(Exception):
    """Base class for all package errors."""


class FetchError(RickMortyCardsError):
    """A request to the upstream API did not produce usable data."""

    def __init__(self, message: str, url: str, status: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status = status

    def __str__(self) -> str:
        base = super().__str__()
        if self.status is not None:
            return f"{base} (HTTP {self.status}, {self.url})"
        return f"{base} ({self.url})"


class CharacterFetchError(FetchError):
    """Fetching a character listing page or a single character failed."""


class EmptyPageError(CharacterFetchError):
    """A listing page came back with no results to pick from."""


class EpisodeFetchError(FetchError):
    """Resolving an episode reference failed."""
