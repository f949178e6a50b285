from .movie_store import MovieStore

__all__ = ["MovieStore"]
