"""Models for one page of the paginated character listing."""

from typing import List, Optional

from pydantic import BaseModel, Field

from .character import CharacterModel


class PageInfo(BaseModel):
    """Pagination metadata of a listing response."""

    count: Optional[int] = Field(default=None, description="Total number of matching characters")
    pages: int = Field(..., description="Total number of pages")
    next: Optional[str] = Field(default=None, description="URL of the next page")
    prev: Optional[str] = Field(default=None, description="URL of the previous page")


class CharacterPage(BaseModel):
    """A batch of characters plus pagination metadata."""

    info: PageInfo
    results: List[CharacterModel] = Field(default_factory=list)
