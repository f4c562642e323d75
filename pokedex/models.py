"""Records decoded from the public Pokemon API's JSON responses."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeVar

T = TypeVar("T")


def _require_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise TypeError(f"{what} must be a JSON object, got {type(data).__name__}")
    return data


def _str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"field {key!r} must be a string, got {type(value).__name__}")
    return value


def _int(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"field {key!r} must be an integer, got {type(value).__name__}")
    return value


def _obj(data: Mapping[str, Any], key: str, build: Callable[[Any], T]) -> T:
    value = data.get(key)
    return build({} if value is None else value)


def _list(data: Mapping[str, Any], key: str, build: Callable[[Any], T]) -> list[T]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"field {key!r} must be a list, got {type(value).__name__}")
    return [build(item) for item in value]


@dataclass
class Location:
    name: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> Location:
        data = _require_mapping(data, "location")
        return cls(name=_str(data, "name"), url=_str(data, "url"))


@dataclass
class PaginatedLocationAreas:
    next: str = ""
    previous: str = ""
    results: list[Location] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> PaginatedLocationAreas:
        data = _require_mapping(data, "paginated location areas")
        return cls(
            next=_str(data, "next"),
            previous=_str(data, "previous"),
            results=_list(data, "results", Location.from_dict),
        )


@dataclass
class EncounteredPokemon:
    name: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> EncounteredPokemon:
        data = _require_mapping(data, "encountered pokemon")
        return cls(name=_str(data, "name"), url=_str(data, "url"))


@dataclass
class Encounter:
    pokemon: EncounteredPokemon = field(default_factory=EncounteredPokemon)

    @classmethod
    def from_dict(cls, data: Any) -> Encounter:
        data = _require_mapping(data, "encounter")
        return cls(pokemon=_obj(data, "pokemon", EncounteredPokemon.from_dict))


@dataclass
class LocationArea:
    encounters: list[Encounter] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> LocationArea:
        data = _require_mapping(data, "location area")
        return cls(encounters=_list(data, "pokemon_encounters", Encounter.from_dict))


@dataclass
class StatDetail:
    name: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> StatDetail:
        data = _require_mapping(data, "stat detail")
        return cls(name=_str(data, "name"), url=_str(data, "url"))


@dataclass
class PokemonStat:
    stat: StatDetail = field(default_factory=StatDetail)
    value: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> PokemonStat:
        data = _require_mapping(data, "pokemon stat")
        return cls(
            stat=_obj(data, "stat", StatDetail.from_dict),
            value=_int(data, "base_stat"),
        )


@dataclass
class PokemonTypeDetail:
    name: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> PokemonTypeDetail:
        data = _require_mapping(data, "pokemon type detail")
        return cls(name=_str(data, "name"), url=_str(data, "url"))


@dataclass
class PokemonType:
    type: PokemonTypeDetail = field(default_factory=PokemonTypeDetail)

    @classmethod
    def from_dict(cls, data: Any) -> PokemonType:
        data = _require_mapping(data, "pokemon type")
        return cls(type=_obj(data, "type", PokemonTypeDetail.from_dict))


@dataclass
class Pokemon:
    name: str = ""
    base_experience: int = 0
    height: int = 0
    weight: int = 0
    stats: list[PokemonStat] = field(default_factory=list)
    types: list[PokemonType] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> Pokemon:
        data = _require_mapping(data, "pokemon")
        return cls(
            name=_str(data, "name"),
            base_experience=_int(data, "base_experience"),
            height=_int(data, "height"),
            weight=_int(data, "weight"),
            stats=_list(data, "stats", PokemonStat.from_dict),
            types=_list(data, "types", PokemonType.from_dict),
        )