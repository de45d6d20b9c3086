"""Outcome types of a sampling run."""

from dataclasses import dataclass, field
from typing import List, Union

from .character import CharacterModel


@dataclass(frozen=True)
class SamplingSuccess:
    characters: List[CharacterModel]


@dataclass(frozen=True)
class SamplingExhausted:
    """Too few distinct characters: the budget ran out or the matching pool is smaller than the target."""
    attempts: int
    collected: int
    target: int


@dataclass(frozen=True)
class SamplingFailed:
    error: Exception = field(compare=False)


SamplingOutcome = Union[SamplingSuccess, SamplingExhausted, SamplingFailed]
