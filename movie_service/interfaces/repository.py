"""
Store and repository interfaces - abstract movie data access.
"""

from abc import ABC, abstractmethod
from typing import Optional
from ..models.movie import Movie, StoreOutcome


class IMovieStore(ABC):
    """
    Authoritative movie storage.

    Only the store decides whether a movie exists.
    """

    @abstractmethod
    async def get(self, movie_id: str) -> Optional[Movie]:
        """
        Get the current movie for an id.

        Args:
            movie_id: Movie id

        Returns:
            Movie copy if stored, None otherwise
        """
        pass

    @abstractmethod
    async def put(self, movie: Movie) -> StoreOutcome:
        """
        Insert or wholesale replace a movie under ``movie.id``.

        Args:
            movie: Movie to store

        Returns:
            UPDATED if the id was already stored, CREATED otherwise
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Number of stored movies."""
        pass


class IMovieRepository(ABC):
    """
    Repository interface for movie access.

    Follows Repository Pattern - hides the cache + store pair behind the
    two operations the HTTP layer needs.
    """

    @abstractmethod
    async def fetch(self, movie_id: str) -> Optional[Movie]:
        """
        Look up a movie by id.

        Returns:
            Movie if found, None otherwise
        """
        pass

    @abstractmethod
    async def store(self, movie: Movie) -> StoreOutcome:
        """
        Persist a movie.

        Returns:
            CREATED or UPDATED
        """
        pass
