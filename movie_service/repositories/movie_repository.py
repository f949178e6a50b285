"""
MovieRepository implementation using Repository Pattern.

Puts the read-through cache in front of the authoritative store. The
cache lock and the store lock are never held at the same time, and
writes never take the cache lock, so the two locks cannot deadlock.
"""

import logging
from typing import Any, Dict, Optional
from ..interfaces.cache import ICache
from ..interfaces.repository import IMovieRepository, IMovieStore
from ..models.movie import Movie, StoreOutcome

logger = logging.getLogger(__name__)


class MovieRepository(IMovieRepository):
    """
    Repository for movie access.

    Implements two-tier lookup strategy:
    1. Check cache first
    2. Fall back to the store
    3. Copy store hits into the cache

    Writes go to the store only. A movie that is already cached keeps
    returning its cached value after being overwritten.
    """

    def __init__(self, store: IMovieStore, cache: ICache):
        """
        Initialize repository with store and cache.

        Args:
            store: Authoritative movie store
            cache: Cache populated on store hits
        """
        self.store_backend = store
        self.cache = cache

    async def fetch(self, movie_id: str) -> Optional[Movie]:
        """
        Get a movie by id with two-tier lookup.

        Args:
            movie_id: Movie id

        Returns:
            Movie if found, None otherwise
        """
        # Tier 1: Check cache
        cached = await self.cache.get(movie_id)
        if cached is not None:
            logger.debug("Cache hit for movie %s", movie_id)
            return cached

        # Tier 2: Query store
        movie = await self.store_backend.get(movie_id)
        if movie is None:
            logger.debug("Movie %s not found", movie_id)
            return None

        # Promote to cache for future hits
        await self.cache.populate(movie_id, movie)
        logger.info("Found movie: %s", movie)
        return movie

    async def store(self, movie: Movie) -> StoreOutcome:
        """
        Persist a movie. The cache is left untouched.

        Args:
            movie: Movie to store

        Returns:
            CREATED or UPDATED
        """
        return await self.store_backend.put(movie)

    async def get_stats(self) -> Dict[str, Any]:
        """
        Get cache statistics and store size.

        Returns:
            Dict with cache stats (hits, misses, hit_rate, size) and store count
        """
        stats = await self.cache.get_stats()
        return {
            "cache_hits": stats.hits,
            "cache_misses": stats.misses,
            "cache_size": stats.size,
            "cache_hit_rate": stats.hit_rate,
            "store_size": await self.store_backend.count(),
        }
