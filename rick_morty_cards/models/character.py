"""Character model for records returned by the character endpoint."""

from typing import List, Dict, Any

from pydantic import BaseModel, ConfigDict, Field


class LocationRef(BaseModel):
    """Named reference to an origin or location resource."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(default="unknown", description="Display name")
    url: str = Field(default="", description="API URL of the location (empty when unknown)")


class CharacterModel(BaseModel):
    """Pydantic model for a single character record."""
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Character ID assigned by the API")
    name: str = Field(..., description="Character name")
    status: str = Field(default="unknown", description="Alive, Dead or unknown")
    species: str = Field(default="", description="Species")
    type: str = Field(default="", description="Subspecies or type")
    gender: str = Field(default="", description="Female, Male, Genderless or unknown")
    image: str = Field(default="", description="Avatar image URL")
    origin: LocationRef = Field(default_factory=LocationRef, description="Origin location")
    location: LocationRef = Field(default_factory=LocationRef, description="Last known location")
    episode: List[str] = Field(default_factory=list, description="Episode reference URLs in airing order")
    url: str = Field(default="", description="API URL of this character")
    created: str = Field(default="", description="Creation timestamp in the API database")

    @classmethod
    def from_api_data(cls, data: Dict[str, Any]) -> "CharacterModel":
        """Create a CharacterModel from a raw API result dict."""
        return cls.model_validate(data)

    @property
    def summary(self) -> str:
        """Gender and species line shown on a card."""
        return f"{self.gender} {self.species}".strip()
