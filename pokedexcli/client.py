"""HTTP client for the Pokemon API with a response cache."""

from __future__ import annotations

import json
import urllib.error
import urllib.request
from collections.abc import Callable
from typing import Any, TypeVar

from .cache import Cache
from .models import Location, LocationPage, Pokemon

BASE_URL = "https://pokeapi.co/api/v2"

Fetch = Callable[[str, float], bytes]
T = TypeVar("T")


class APIError(Exception):
    """A request failed or its response could not be decoded."""


def _urlopen_fetch(url: str, timeout: float) -> bytes:
    request = urllib.request.Request(url, method="GET")
    try:
        with urllib.request.urlopen(request, timeout=timeout) as response:
            return response.read()
    except urllib.error.HTTPError as exc:
        # The body of an error response is decoded like any other.
        with exc:
            return exc.read()


class Client:
    """Fetches locations and Pokemon, caching raw responses by URL."""

    def __init__(
        self,
        timeout: float = 5.0,
        cache_interval: float = 300.0,
        fetch: Fetch | None = None,
    ) -> None:
        self.timeout = timeout
        self._fetch = fetch if fetch is not None else _urlopen_fetch
        self._cache = Cache(cache_interval)

    def list_locations(self, page_url: str | None = None) -> LocationPage:
        """Return one page of location areas; the first page when ``page_url`` is None."""
        url = page_url if page_url is not None else f"{BASE_URL}/location-area"
        return self._get(url, LocationPage.from_json)

    def get_location(self, location_name: str) -> Location:
        """Return the location area with the given name."""
        return self._get(f"{BASE_URL}/location-area/{location_name}", Location.from_json)

    def get_pokemon(self, pokemon_name: str) -> Pokemon:
        """Return the Pokemon with the given name."""
        return self._get(f"{BASE_URL}/pokemon/{pokemon_name}", Pokemon.from_json)

    def close(self) -> None:
        """Release the cache's background thread."""
        self._cache.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _get(self, url: str, parse: Callable[[Any], T]) -> T:
        cached = self._cache.get(url)
        if cached is not None:
            return self._decode(url, cached, parse)

        try:
            body = self._fetch(url, self.timeout)
        except OSError as exc:
            raise APIError(f"request to {url} failed: {exc}") from exc

        result = self._decode(url, body, parse)
        self._cache.add(url, body)
        return result

    @staticmethod
    def _decode(url: str, body: bytes, parse: Callable[[Any], T]) -> T:
        try:
            return parse(json.loads(body))
        except ValueError as exc:
            raise APIError(f"invalid response from {url}: {exc}") from exc