from .api import router, get_repository

__all__ = ["router", "get_repository"]
