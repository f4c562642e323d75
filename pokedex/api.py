"""HTTP access to the Pokemon API, backed by a response cache."""

from __future__ import annotations

import json
import urllib.error
import urllib.request
from collections.abc import Callable
from typing import Any, TypeVar

from .cache import Cache
from .models import LocationArea, PaginatedLocationAreas, Pokemon

T = TypeVar("T")


class ApiError(Exception):
    """A request to the API failed or its response could not be decoded."""


class PokeApiClient:
    """Fetches and decodes API resources, caching raw response bodies by URL."""

    def __init__(self, cache: Cache) -> None:
        self.cache = cache

    def fetch_data(self, url: str) -> bytes:
        """Return the body at ``url``, from the cache when it is there."""
        cached = self.cache.get(url)
        if cached is not None:
            return cached

        try:
            response = urllib.request.urlopen(url)
        except urllib.error.HTTPError as exc:
            exc.close()
            raise ApiError(f"response failed with status code: {exc.code}") from exc
        except (urllib.error.URLError, OSError, ValueError) as exc:
            raise ApiError(f"error during location area GET request: {exc}") from exc

        with response:
            if response.status > 299:
                raise ApiError(f"response failed with status code: {response.status}")
            try:
                body = response.read()
            except OSError as exc:
                raise ApiError(f"error reading location area body: {exc}") from exc

        self.cache.add(url, body)
        return body

    def _fetch(self, url: str, build: Callable[[Any], T], what: str) -> T:
        data = self.fetch_data(url)
        try:
            return build(json.loads(data))
        except (ValueError, TypeError) as exc:
            raise ApiError(f"error unmarshaling {what}: {exc}") from exc

    def fetch_pokemon(self, url: str) -> Pokemon:
        """Fetch and decode a Pokemon resource."""
        return self._fetch(url, Pokemon.from_dict, "pokemon")

    def fetch_location_area(self, url: str) -> LocationArea:
        """Fetch and decode a location area resource."""
        return self._fetch(url, LocationArea.from_dict, "location area")

    def fetch_paginated_location_areas(self, url: str) -> PaginatedLocationAreas:
        """Fetch and decode one page of the location area listing."""
        return self._fetch(
            url,
            PaginatedLocationAreas.from_dict,
            "paginated response for location area",
        )