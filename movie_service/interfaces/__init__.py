"""
Core interface abstractions following Dependency Inversion Principle.

These interfaces define contracts that concrete implementations must follow,
enabling loose coupling and easier testing.
"""

from .cache import ICache, CacheStats
from .repository import IMovieStore, IMovieRepository

__all__ = [
    "ICache",
    "CacheStats",
    "IMovieStore",
    "IMovieRepository",
]
