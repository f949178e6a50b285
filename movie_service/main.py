from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import Optional
import logging
import uvicorn

from .config import Settings, settings as default_settings, configure_logging
from .caching.movie_cache import MovieCache
from .database.movie_store import MovieStore
from .repositories.movie_repository import MovieRepository
from .routers.api import router

configure_logging(default_settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    logger.info("Starting %s...", app.title)

    # One store and one cache for the lifetime of the process
    store = MovieStore()
    cache = MovieCache()
    app.state.store = store
    app.state.cache = cache
    app.state.repository = MovieRepository(store=store, cache=cache)

    logger.info("%s ready", app.title)

    yield

    logger.info("Shutting down %s", app.title)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application."""
    app_settings = app_settings or default_settings

    app = FastAPI(
        title=app_settings.app_name,
        version=app_settings.app_version,
        description="Movie key-value service with a read-through cache",
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        stats = await app.state.repository.get_stats()
        return {"status": "healthy", **stats}

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "message": app_settings.app_name,
            "version": app_settings.app_version,
            "endpoints": {
                "get": "GET /movie/{movie_id}",
                "save": "POST /movie",
                "health": "GET /health",
            }
        }

    return app


app = create_app()


def main() -> None:
    logger.info("Listening on %s:%s", default_settings.host, default_settings.port)
    uvicorn.run(
        "movie_service.main:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.debug
    )


if __name__ == "__main__":
    main()
