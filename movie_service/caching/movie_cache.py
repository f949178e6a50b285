"""
Read-through movie cache.

Populated lazily by the repository after a confirmed store hit. Nothing
is ever evicted or invalidated, so an entry may lag behind the store
after the movie is overwritten.
"""

import logging
from typing import Dict, Optional
from ..interfaces.cache import ICache, CacheStats
from ..models.movie import Movie
from .rwlock import ReadWriteLock

logger = logging.getLogger(__name__)


class MovieCache(ICache):
    """
    In-memory movie cache guarded by its own reader-writer lock.

    The lock is independent of the store's lock and is only ever held for
    a single dictionary operation.
    """

    def __init__(self):
        self._cache: Dict[str, Movie] = {}
        self._lock = ReadWriteLock()

        # Statistics tracking
        self._hits = 0
        self._misses = 0

    async def get(self, key: str) -> Optional[Movie]:
        """
        Retrieve a cached movie.

        Args:
            key: Movie id

        Returns:
            Copy of the cached movie or None on a miss
        """
        async with self._lock.reader():
            movie = self._cache.get(key)
            if movie is None:
                self._misses += 1
                return None
            self._hits += 1
            return movie.copy_record()

    async def populate(self, key: str, movie: Movie) -> None:
        """
        Insert or overwrite the cached copy for ``key``.

        Args:
            key: Movie id
            movie: Movie just read from the store
        """
        async with self._lock.writer():
            self._cache[key] = movie.copy_record()
        logger.debug("Cached movie %s", key)

    async def get_stats(self) -> CacheStats:
        """
        Get cache performance statistics.

        Returns:
            CacheStats with hits, misses, size and hit_rate
        """
        async with self._lock.reader():
            return CacheStats(hits=self._hits, misses=self._misses, size=len(self._cache))
