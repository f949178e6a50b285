"""
Cache interface - contract for the read-through movie cache.
"""

from abc import ABC, abstractmethod
from typing import Optional
from pydantic import BaseModel
from ..models.movie import Movie


class CacheStats(BaseModel):
    """Statistics about cache performance"""
    hits: int = 0
    misses: int = 0
    size: int = 0

    @property
    def hit_rate(self) -> float:
        """Calculate cache hit rate"""
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0


class ICache(ABC):
    """
    Cache interface for movie lookups.

    A cache is never authoritative: a hit may be older than the store's
    current value, and a miss says nothing about whether the movie exists.
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[Movie]:
        """
        Retrieve a movie from cache.

        Args:
            key: Movie id

        Returns:
            Cached movie copy or None if not cached
        """
        pass

    @abstractmethod
    async def populate(self, key: str, movie: Movie) -> None:
        """
        Insert or overwrite the cached copy for a movie id.

        Args:
            key: Movie id
            movie: Movie confirmed to exist in the store
        """
        pass

    @abstractmethod
    async def get_stats(self) -> CacheStats:
        """Get cache performance statistics."""
        pass
