from pydantic import BaseModel, Field
from enum import Enum


class StoreOutcome(str, Enum):
    """Result of persisting a movie"""
    CREATED = "created"
    UPDATED = "updated"


class Movie(BaseModel):
    """A single movie record, always written and replaced as a whole"""
    id: str = Field(..., description="Unique movie identifier")
    name: str = Field(..., description="Display name")
    year: int = Field(..., ge=0, le=65535, strict=True, description="Release year")
    was_good: bool = Field(..., strict=True, description="Whether the movie was any good")

    def copy_record(self) -> "Movie":
        """Return an independent copy so callers never share stored state."""
        return self.model_copy()


class StoreResponse(BaseModel):
    """Response body for a movie write"""
    id: str
    outcome: StoreOutcome
