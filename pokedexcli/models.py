"""Records decoded from the JSON documents served by the Pokemon API."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeVar

T = TypeVar("T")


def _object(data: Any, what: str) -> Mapping[str, Any]:
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
        raise ValueError(f"{key}: expected an integer, got {value!r}")
    return value


def _str(obj: Mapping[str, Any], key: str) -> str:
    value = obj.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{key}: expected a string, got {value!r}")
    return value


def _optional_str(obj: Mapping[str, Any], key: str) -> str | None:
    value = obj.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"{key}: expected a string or null, got {value!r}")
    return value


def _bool(obj: Mapping[str, Any], key: str) -> bool:
    value = obj.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"{key}: expected a boolean, got {value!r}")
    return value


def _list(obj: Mapping[str, Any], key: str, parse: Callable[[Any], T]) -> list[T]:
    value = obj.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"{key}: expected a list, got {type(value).__name__}")
    return [parse(item) for item in value]


@dataclass(frozen=True)
class NamedResource:
    """A name together with the URL of the resource it names."""

    name: str = ""
    url: str = ""

    @classmethod
    def from_json(cls, data: Any) -> NamedResource:
        obj = _object(data, "named resource")
        return cls(name=_str(obj, "name"), url=_str(obj, "url"))


@dataclass(frozen=True)
class LocationPage:
    """One page of the location-area listing."""

    count: int = 0
    next: str | None = None
    previous: str | None = None
    results: list[NamedResource] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Any) -> LocationPage:
        obj = _object(data, "location page")
        return cls(
            count=_int(obj, "count"),
            next=_optional_str(obj, "next"),
            previous=_optional_str(obj, "previous"),
            results=_list(obj, "results", NamedResource.from_json),
        )


@dataclass(frozen=True)
class PokemonEncounter:
    """A Pokemon that can be met in a location area."""

    pokemon: NamedResource = field(default_factory=NamedResource)

    @classmethod
    def from_json(cls, data: Any) -> PokemonEncounter:
        obj = _object(data, "pokemon encounter")
        return cls(pokemon=NamedResource.from_json(obj.get("pokemon")))


@dataclass(frozen=True)
class Location:
    """A location area and the Pokemon found there."""

    id: int = 0
    name: str = ""
    game_index: int = 0
    location: NamedResource = field(default_factory=NamedResource)
    pokemon_encounters: list[PokemonEncounter] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Any) -> Location:
        obj = _object(data, "location")
        return cls(
            id=_int(obj, "id"),
            name=_str(obj, "name"),
            game_index=_int(obj, "game_index"),
            location=NamedResource.from_json(obj.get("location")),
            pokemon_encounters=_list(obj, "pokemon_encounters", PokemonEncounter.from_json),
        )


@dataclass(frozen=True)
class PokemonStat:
    """A base stat of a Pokemon."""

    base_stat: int = 0
    effort: int = 0
    stat: NamedResource = field(default_factory=NamedResource)

    @classmethod
    def from_json(cls, data: Any) -> PokemonStat:
        obj = _object(data, "stat")
        return cls(
            base_stat=_int(obj, "base_stat"),
            effort=_int(obj, "effort"),
            stat=NamedResource.from_json(obj.get("stat")),
        )


@dataclass(frozen=True)
class PokemonType:
    """One of the types of a Pokemon."""

    slot: int = 0
    type: NamedResource = field(default_factory=NamedResource)

    @classmethod
    def from_json(cls, data: Any) -> PokemonType:
        obj = _object(data, "type")
        return cls(slot=_int(obj, "slot"), type=NamedResource.from_json(obj.get("type")))


@dataclass(frozen=True)
class PokemonAbility:
    """One of the abilities of a Pokemon."""

    ability: NamedResource = field(default_factory=NamedResource)
    is_hidden: bool = False
    slot: int = 0

    @classmethod
    def from_json(cls, data: Any) -> PokemonAbility:
        obj = _object(data, "ability")
        return cls(
            ability=NamedResource.from_json(obj.get("ability")),
            is_hidden=_bool(obj, "is_hidden"),
            slot=_int(obj, "slot"),
        )


@dataclass(frozen=True)
class Pokemon:
    """A Pokemon species entry."""

    id: int = 0
    name: str = ""
    base_experience: int = 0
    height: int = 0
    weight: int = 0
    order: int = 0
    is_default: bool = False
    species: NamedResource = field(default_factory=NamedResource)
    stats: list[PokemonStat] = field(default_factory=list)
    types: list[PokemonType] = field(default_factory=list)
    abilities: list[PokemonAbility] = field(default_factory=list)

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
            species=NamedResource.from_json(obj.get("species")),
            stats=_list(obj, "stats", PokemonStat.from_json),
            types=_list(obj, "types", PokemonType.from_json),
            abilities=_list(obj, "abilities", PokemonAbility.from_json),
        )