"""Episode model for resolved episode references."""

from pydantic import BaseModel, ConfigDict, Field


class EpisodeModel(BaseModel):
    """Pydantic model for episode data returned by the episode endpoint."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(default=0, description="Episode ID")
    code: str = Field(..., alias="episode", description="Episode code, e.g. S01E01")
    name: str = Field(..., description="Episode title")
    air_date: str = Field(default="", description="Original airdate")
