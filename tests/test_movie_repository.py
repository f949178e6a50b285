"""
Tests for the cache-aside read/write protocol.
"""

import asyncio

import pytest

from movie_service.models.movie import Movie, StoreOutcome


@pytest.mark.asyncio
async def test_store_then_fetch_returns_same_movie(repository, dune):
    assert await repository.store(dune) == StoreOutcome.CREATED
    assert await repository.fetch("1") == dune


@pytest.mark.asyncio
async def test_fetch_unknown_id_is_not_found(repository, cache):
    assert await repository.fetch("never-stored") is None
    # Misses on the store do not populate the cache
    assert (await cache.get_stats()).size == 0


@pytest.mark.asyncio
async def test_restore_reports_updated(repository, dune, dune_part_two):
    assert await repository.store(dune) == StoreOutcome.CREATED
    assert await repository.store(dune_part_two) == StoreOutcome.UPDATED
    assert await repository.store(dune) == StoreOutcome.UPDATED


@pytest.mark.asyncio
async def test_store_does_not_touch_cache(repository, cache, dune):
    await repository.store(dune)
    assert await cache.get("1") is None


@pytest.mark.asyncio
async def test_fetch_populates_cache_from_store(repository, cache, dune):
    await repository.store(dune)
    await repository.fetch("1")

    assert await cache.get("1") == dune


@pytest.mark.asyncio
async def test_cached_movie_stays_stale_after_update(repository, store, dune, dune_part_two):
    assert await repository.store(dune) == StoreOutcome.CREATED
    assert await repository.fetch("1") == dune

    assert await repository.store(dune_part_two) == StoreOutcome.UPDATED

    # Reads keep hitting the cached 2021 record while the store has 2024
    for _ in range(3):
        fetched = await repository.fetch("1")
        assert fetched.name == "Dune"
        assert fetched.year == 2021
    assert await store.get("1") == dune_part_two


@pytest.mark.asyncio
async def test_update_before_first_fetch_is_visible(repository, dune, dune_part_two):
    await repository.store(dune)
    await repository.store(dune_part_two)

    assert await repository.fetch("1") == dune_part_two


@pytest.mark.asyncio
async def test_cache_hit_skips_store(repository, store, dune, monkeypatch):
    await repository.store(dune)
    await repository.fetch("1")

    async def fail(movie_id):
        raise AssertionError("store should not be consulted on a cache hit")

    monkeypatch.setattr(store, "get", fail)
    assert await repository.fetch("1") == dune


@pytest.mark.asyncio
async def test_concurrent_stores_and_fetches(repository, store):
    """
    No lost updates across interleaved stores and fetches.

    On one event loop a dict write cannot be observed half done; exclusion
    inside the critical sections is covered by test_rwlock.py.
    """
    movies = [
        Movie(id=f"movie-{i}", name=f"Movie {i}", year=1900 + i, was_good=i % 2 == 0)
        for i in range(50)
    ]

    store_calls = [repository.store(movie) for movie in movies]
    fetch_calls = [repository.fetch(f"movie-{i % 50}") for i in range(100)]
    calls = []
    for i, call in enumerate(store_calls):
        calls.append(call)
        calls.extend(fetch_calls[2 * i:2 * i + 2])

    results = await asyncio.gather(*calls)

    outcomes = [r for r in results if isinstance(r, StoreOutcome)]
    assert outcomes == [StoreOutcome.CREATED] * 50

    fetched = [r for r in results if isinstance(r, Movie)]
    by_id = {movie.id: movie for movie in movies}
    for movie in fetched:
        assert movie == by_id[movie.id]

    assert await store.count() == 50
    for movie in movies:
        assert await store.get(movie.id) == movie


@pytest.mark.asyncio
async def test_stats(repository, dune):
    await repository.store(dune)
    await repository.fetch("1")
    await repository.fetch("1")

    stats = await repository.get_stats()
    assert stats["cache_hits"] == 1
    assert stats["cache_misses"] == 1
    assert stats["cache_size"] == 1
    assert stats["store_size"] == 1


@pytest.mark.asyncio
async def test_cache_lock_is_free_while_store_is_locked(repository, store, cache, dune):
    other = Movie(id="2", name="Arrival", year=2016, was_good=True)
    await repository.store(dune)
    await repository.store(other)
    await repository.fetch("2")

    async with store._lock.writer():
        pending = asyncio.create_task(repository.fetch("1"))
        for _ in range(5):
            await asyncio.sleep(0)

        # The miss released the cache lock before waiting on the store
        assert not pending.done()
        assert cache._lock.readers == 0
        assert not cache._lock.writer_active

        # The cache stays usable while the store is write-locked
        await asyncio.wait_for(cache.populate("3", other), timeout=1)
        hit = await asyncio.wait_for(repository.fetch("2"), timeout=1)
        assert hit == other
        assert not pending.done()

    assert await asyncio.wait_for(pending, timeout=1) == dune
    assert await cache.get("1") == dune
