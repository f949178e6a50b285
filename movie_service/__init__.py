"""Movie key-value service with a read-through cache."""

from .models import Movie, StoreOutcome
from .database import MovieStore
from .caching import MovieCache, ReadWriteLock
from .repositories import MovieRepository

__all__ = [
    "Movie",
    "StoreOutcome",
    "MovieStore",
    "MovieCache",
    "ReadWriteLock",
    "MovieRepository",
]
