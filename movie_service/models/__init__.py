from .movie import Movie, StoreOutcome, StoreResponse

__all__ = [
    "Movie",
    "StoreOutcome",
    "StoreResponse",
]
