import pytest

from movie_service.caching.movie_cache import MovieCache
from movie_service.database.movie_store import MovieStore
from movie_service.models.movie import Movie
from movie_service.repositories.movie_repository import MovieRepository


@pytest.fixture
def store():
    return MovieStore()


@pytest.fixture
def cache():
    return MovieCache()


@pytest.fixture
def repository(store, cache):
    return MovieRepository(store=store, cache=cache)


@pytest.fixture
def dune():
    return Movie(id="1", name="Dune", year=2021, was_good=True)


@pytest.fixture
def dune_part_two():
    return Movie(id="1", name="Dune Part Two", year=2024, was_good=True)
