"""
Caching layer for movie lookups.
"""

from .rwlock import ReadWriteLock
from .movie_cache import MovieCache

__all__ = [
    "ReadWriteLock",
    "MovieCache",
]
