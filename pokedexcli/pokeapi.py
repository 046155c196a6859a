"""Client for the PokeAPI, with response caching and a personal Pokedex."""

from __future__ import annotations

import random
import urllib.error
import urllib.request
from typing import Callable, Protocol, TypeVar

from .cache import Cache
from .models import LocationArea, LocationAreaPage, Pokemon

BASE_URL = "https://pokeapi.co/api/v2"
LOCATION_AREA_URL = f"{BASE_URL}/location-area"
POKEMON_URL = f"{BASE_URL}/pokemon"

CACHE_INTERVAL = 60.0
MAX_CATCH_CHANCE = 200
REQUEST_TIMEOUT = 30.0

_T = TypeVar("_T")


class PokeAPIError(Exception):
    """A request to the PokeAPI failed or returned unusable data."""


class PokemonNotCaughtError(PokeAPIError):
    """The requested Pokemon is not in the Pokedex."""

    def __init__(self, name: str) -> None:
        super().__init__("you have not caught that pokemon")
        self.name = name


class _Random(Protocol):
    def randrange(self, stop: int) -> int: ...


def http_get(url: str) -> bytes:
    """Fetch ``url`` and return the response body; raise PokeAPIError on failure."""
    try:
        with urllib.request.urlopen(url, timeout=REQUEST_TIMEOUT) as response:
            return response.read()
    except urllib.error.HTTPError as exc:
        body = exc.read().decode("utf-8", "replace")
        raise PokeAPIError(
            f"Response failed with status code: {exc.code} and\nbody: {body}"
        ) from exc
    except (urllib.error.URLError, OSError, ValueError) as exc:
        raise PokeAPIError(f"request to {url} failed: {exc}") from exc


class PokeAPIClient:
    """Fetches PokeAPI resources through a cache and keeps the caught Pokemon."""

    def __init__(
        self,
        cache: Cache | None = None,
        fetcher: Callable[[str], bytes] = http_get,
        rng: _Random | None = None,
    ) -> None:
        self._owns_cache = cache is None
        self.cache = cache if cache is not None else Cache(CACHE_INTERVAL)
        self._fetch_remote = fetcher
        self._rng: _Random = rng if rng is not None else random.Random()
        self._pokedex: dict[str, Pokemon] = {}

    def fetch(self, url: str) -> bytes:
        """Return the body for ``url``, from the cache when it is there."""
        body = self.cache.get(url)
        if body is None:
            body = self._fetch_remote(url)
            self.cache.add(url, body)
        return body

    def _load(self, url: str, parser: Callable[[bytes], _T]) -> _T:
        body = self.fetch(url)
        try:
            return parser(body)
        except ValueError as exc:
            raise PokeAPIError(f"could not decode response from {url}: {exc}") from exc

    def get_location_page(self, url: str) -> LocationAreaPage:
        """Return the page of location areas found at ``url``."""
        return self._load(url, LocationAreaPage.from_json)

    def get_location_area(self, name: str) -> LocationArea:
        """Return the location area called ``name``."""
        return self._load(f"{LOCATION_AREA_URL}/{name}", LocationArea.from_json)

    def get_pokemon(self, name: str) -> Pokemon:
        """Return the Pokemon called ``name``."""
        return self._load(f"{POKEMON_URL}/{name}", Pokemon.from_json)

    def catch(self, name: str) -> bool:
        """Try to catch ``name``; return True and record it if the throw succeeds.

        The higher the Pokemon's base experience, the harder it is to catch.
        """
        pokemon = self.get_pokemon(name)
        chance = self._rng.randrange(MAX_CATCH_CHANCE)
        if chance > pokemon.base_experience:
            self._pokedex.setdefault(name, pokemon)
            return True
        return False

    def inspect(self, name: str) -> Pokemon:
        """Return the caught Pokemon ``name``; raise PokemonNotCaughtError if absent."""
        try:
            return self._pokedex[name]
        except KeyError:
            raise PokemonNotCaughtError(name) from None

    def pokedex(self) -> list[Pokemon]:
        """Return every caught Pokemon, in the order they were caught."""
        return list(self._pokedex.values())

    def close(self) -> None:
        """Release the cache if this client created it."""
        if self._owns_cache:
            self.cache.close()

    def __contains__(self, name: object) -> bool:
        return name in self._pokedex

    def __enter__(self) -> PokeAPIClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()