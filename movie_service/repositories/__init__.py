"""
Repository implementations following Repository Pattern.

Repositories abstract data access behind clean interfaces,
making the codebase more testable and maintainable.
"""

from .movie_repository import MovieRepository

__all__ = ["MovieRepository"]
