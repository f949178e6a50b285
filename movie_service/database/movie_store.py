"""
Authoritative in-memory movie store.

Lives for the lifetime of the process; restarting the service empties it.
"""

import logging
from typing import Dict, Optional
from ..caching.rwlock import ReadWriteLock
from ..interfaces.repository import IMovieStore
from ..models.movie import Movie, StoreOutcome

logger = logging.getLogger(__name__)


class MovieStore(IMovieStore):
    """
    Mapping from movie id to movie.

    Lookups share the read lock; ``put`` holds the write lock for the
    insert only.
    """

    def __init__(self):
        self._movies: Dict[str, Movie] = {}
        self._lock = ReadWriteLock()

    async def get(self, movie_id: str) -> Optional[Movie]:
        """
        Get the current movie for an id.

        Args:
            movie_id: Movie id

        Returns:
            Copy of the stored movie, or None if the id was never stored
        """
        async with self._lock.reader():
            movie = self._movies.get(movie_id)
            return movie.copy_record() if movie is not None else None

    async def put(self, movie: Movie) -> StoreOutcome:
        """
        Insert or replace a movie under its id.

        Args:
            movie: Movie to store

        Returns:
            StoreOutcome.UPDATED if the id already existed, else CREATED
        """
        async with self._lock.writer():
            existed = movie.id in self._movies
            self._movies[movie.id] = movie.copy_record()

        outcome = StoreOutcome.UPDATED if existed else StoreOutcome.CREATED
        logger.info("Stored movie %s (%s)", movie.id, outcome.value)
        return outcome

    async def count(self) -> int:
        async with self._lock.reader():
            return len(self._movies)
