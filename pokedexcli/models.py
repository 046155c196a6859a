"""Typed views of the PokeAPI responses the Pokedex uses."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


def parse_json(body: bytes | bytearray | str) -> Any:
    """Decode a JSON document; raise ValueError if it is malformed."""
    if isinstance(body, (bytes, bytearray)):
        try:
            body = bytes(body).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ValueError(f"response is not valid UTF-8: {exc}") from exc
    return json.loads(body)


def _object(data: Any, what: str) -> Mapping[str, Any]:
    if isinstance(data, (bytes, bytearray, str)):
        data = parse_json(data)
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError(f"{what}: expected a JSON object, got {type(data).__name__}")
    return data


def _int(obj: Mapping[str, Any], key: str) -> int:
    value = obj.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {key!r}: expected an integer, got {value!r}")
    return value


def _bool(obj: Mapping[str, Any], key: str) -> bool:
    value = obj.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"field {key!r}: expected a boolean, got {value!r}")
    return value


def _str(obj: Mapping[str, Any], key: str) -> str:
    value = obj.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r}: expected a string, got {value!r}")
    return value


def _optional_str(obj: Mapping[str, Any], key: str) -> str | None:
    value = obj.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"field {key!r}: expected a string, got {value!r}")
    return value


def _objects(obj: Mapping[str, Any], key: str) -> list[Mapping[str, Any]]:
    value = obj.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"field {key!r}: expected a list, got {value!r}")
    return [_object(item, key) for item in value]


def _resource(obj: Mapping[str, Any], key: str) -> NamedResource:
    return NamedResource.from_dict(obj.get(key))


@dataclass(frozen=True)
class NamedResource:
    """A name together with the API URL that describes it."""

    name: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> NamedResource:
        obj = _object(data, "named resource")
        return cls(name=_str(obj, "name"), url=_str(obj, "url"))


@dataclass(frozen=True)
class LocationAreaPage:
    """One page of the location-area listing."""

    count: int = 0
    next: str | None = None
    previous: str | None = None
    results: list[NamedResource] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Any) -> LocationAreaPage:
        obj = _object(data, "location area page")
        return cls(
            count=_int(obj, "count"),
            next=_optional_str(obj, "next"),
            previous=_optional_str(obj, "previous"),
            results=[NamedResource.from_dict(item) for item in _objects(obj, "results")],
        )


@dataclass(frozen=True)
class LocationArea:
    """A location area and the Pokemon that can be encountered there."""

    id: int = 0
    name: str = ""
    game_index: int = 0
    location: NamedResource = field(default_factory=NamedResource)
    pokemon_encounters: list[NamedResource] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Any) -> LocationArea:
        obj = _object(data, "location area")
        return cls(
            id=_int(obj, "id"),
            name=_str(obj, "name"),
            game_index=_int(obj, "game_index"),
            location=_resource(obj, "location"),
            pokemon_encounters=[
                _resource(encounter, "pokemon")
                for encounter in _objects(obj, "pokemon_encounters")
            ],
        )


@dataclass(frozen=True)
class PokemonStat:
    """A base stat of a Pokemon."""

    name: str
    base_stat: int
    effort: int = 0


@dataclass(frozen=True)
class Pokemon:
    """The details of a Pokemon the Pokedex shows and uses for catching."""

    id: int = 0
    name: str = ""
    base_experience: int = 0
    height: int = 0
    weight: int = 0
    order: int = 0
    is_default: bool = False
    species: NamedResource = field(default_factory=NamedResource)
    abilities: list[NamedResource] = field(default_factory=list)
    stats: list[PokemonStat] = field(default_factory=list)
    types: list[NamedResource] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Any) -> Pokemon:
        obj = _object(data, "pokemon")
        return cls(
            id=_int(obj, "id"),
            name=_str(obj, "name"),
            base_experience=_int(obj, "base_experience"),
            height=_int(obj, "height"),
            weight=_int(obj, "weight"),
            order=_int(obj, "order"),
            is_default=_bool(obj, "is_default"),
            species=_resource(obj, "species"),
            abilities=[_resource(item, "ability") for item in _objects(obj, "abilities")],
            stats=[
                PokemonStat(
                    name=_resource(item, "stat").name,
                    base_stat=_int(item, "base_stat"),
                    effort=_int(item, "effort"),
                )
                for item in _objects(obj, "stats")
            ],
            types=[_resource(item, "type") for item in _objects(obj, "types")],
        )