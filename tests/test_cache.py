import time

import pytest

from pokedex.cache import Cache


@pytest.fixture
def make_cache():
    caches = []

    def factory(interval):
        cache = Cache(interval)
        caches.append(cache)
        return cache

    yield factory
    for cache in caches:
        cache.close()


@pytest.mark.parametrize(
    "key, val",
    [
        ("https://example.com", b"testdata"),
        ("https://example.com/path", b"moretestdata"),
    ],
)
def test_add_get(make_cache, key, val):
    cache = make_cache(5.0)
    cache.add(key, val)
    assert cache.get(key) == val


def test_reap_loop(make_cache):
    base_time = 0.005
    wait_time = base_time + 0.005
    cache = make_cache(base_time)
    cache.add("https://example.com", b"testdata")

    assert cache.get("https://example.com") == b"testdata"

    time.sleep(wait_time)
    deadline = time.monotonic() + 2.0
    while cache.get("https://example.com") is not None and time.monotonic() < deadline:
        time.sleep(0.005)

    assert cache.get("https://example.com") is None
    assert len(cache) == 0


def test_get_missing_key_returns_none(make_cache):
    cache = make_cache(5.0)
    assert cache.get("https://example.com/missing") is None


def test_empty_value_is_distinguished_from_missing(make_cache):
    cache = make_cache(5.0)
    cache.add("https://example.com/empty", b"")
    assert cache.get("https://example.com/empty") == b""


def test_add_replaces_existing_value(make_cache):
    cache = make_cache(5.0)
    cache.add("https://example.com", b"first")
    cache.add("https://example.com", b"second")
    assert cache.get("https://example.com") == b"second"
    assert len(cache) == 1


def test_fresh_entries_survive(make_cache):
    cache = make_cache(5.0)
    cache.add("https://example.com", b"testdata")
    time.sleep(0.02)
    assert cache.get("https://example.com") == b"testdata"


def test_close_stops_reaping():
    cache = Cache(0.005)
    cache.close()
    cache.add("https://example.com", b"testdata")
    time.sleep(0.03)
    assert cache.get("https://example.com") == b"testdata"


def test_context_manager_returns_cache():
    with Cache(5.0) as cache:
        cache.add("k", b"v")
        assert cache.get("k") == b"v"
    assert cache.interval == 5.0


@pytest.mark.parametrize("interval", [0, -1.0])
def test_non_positive_interval_rejected(interval):
    with pytest.raises(ValueError):
        Cache(interval)