"""The Pokedex commands and the session state they share."""

from __future__ import annotations

import random
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from .api import PokeApiClient
from .models import Location, LocationArea, Pokemon

API_BASE = "https://pokeapi.co/api/v2"
FIRST_LOCATION_PAGE = f"{API_BASE}/location-area?limit=20"

MIN_BASE_EXPERIENCE = 20
MAX_BASE_EXPERIENCE = 400


class CommandError(Exception):
    """A command was used wrongly or cannot be carried out."""


@dataclass
class Config:
    """State shared by all commands during one session."""

    client: PokeApiClient
    next: str = ""
    previous: str = ""
    pokemon: dict[str, Pokemon] = field(default_factory=dict)
    rng: random.Random = field(default_factory=random.Random)


@dataclass(frozen=True)
class Command:
    """A named command with its help text and the function that runs it."""

    name: str
    description: str
    callback: Callable[[Config, Sequence[str]], None]


def get_commands() -> dict[str, Command]:
    """Return every available command, keyed by name."""
    commands = (
        Command("exit", "Exit the Pokedex", command_exit),
        Command("help", "Displays a help message", command_help),
        Command(
            "map",
            "Displays the names of 20 location areas in the Pokemon world",
            command_map,
        ),
        Command(
            "mapb",
            "Displays the previous 20 location area names in the Pokemon world",
            command_map_back,
        ),
        Command("explore", "List all Pokemon in a location", command_explore),
        Command(
            "catch",
            "Attempt to catch Pokemon to add them to your collection",
            command_catch,
        ),
        Command(
            "inspect",
            "See details about a Pokemon that you've caught",
            command_inspect,
        ),
        Command("pokedex", "View all Pokemon that you've caught", command_pokedex),
    )
    return {command.name: command for command in commands}


def command_exit(config: Config, args: Sequence[str]) -> None:
    """Say goodbye and end the program with a success status."""
    print("Closing the Pokedex... Goodbye!")
    sys.stdout.flush()
    sys.exit(0)


def command_help(config: Config, args: Sequence[str]) -> None:
    """Print a usage message listing every command."""
    print("Welcome to the Pokedex!")
    print("Usage:")
    print()
    for command in get_commands().values():
        print(f"{command.name}: {command.description}")


def _print_locations(locations: Sequence[Location]) -> None:
    for location in locations:
        print(location.name)


def _show_location_page(config: Config, url: str) -> None:
    page = config.client.fetch_paginated_location_areas(url)
    config.next = page.next
    config.previous = page.previous
    _print_locations(page.results)


def command_map(config: Config, args: Sequence[str]) -> None:
    """Show the next page of location areas."""
    _show_location_page(config, config.next or FIRST_LOCATION_PAGE)


def command_map_back(config: Config, args: Sequence[str]) -> None:
    """Show the previous page of location areas."""
    if not config.previous:
        raise CommandError("cannot map back any further")
    _show_location_page(config, config.previous)


def _print_location_area_pokemon(location_area: LocationArea) -> None:
    for encounter in location_area.encounters:
        print(encounter.pokemon.name)


def command_explore(config: Config, args: Sequence[str]) -> None:
    """List the Pokemon that can be met in a location area."""
    if not args:
        raise CommandError("must include the location you want to explore")
    url = f"{API_BASE}/location-area/{args[0]}"
    _print_location_area_pokemon(config.client.fetch_location_area(url))


def command_catch(config: Config, args: Sequence[str]) -> None:
    """Throw a Pokeball at the named Pokemon."""
    if not args:
        raise CommandError(
            "must include the name of the pokemon your trying to catch"
        )
    name = args[0]
    print(f"Throwing a Pokeball at {name}...")
    pokemon = config.client.fetch_pokemon(f"{API_BASE}/pokemon/{name}")
    catch_pokemon(pokemon, config)


def catch_pokemon(pokemon: Pokemon, config: Config) -> bool:
    """Try to catch ``pokemon``; harder the more base experience it has.

    Returns whether it was caught; a caught Pokemon is added to the Pokedex.
    """
    span = MAX_BASE_EXPERIENCE - MIN_BASE_EXPERIENCE
    probability = 1.0 - (pokemon.base_experience - MIN_BASE_EXPERIENCE) / span
    caught = config.rng.random() < probability
    if caught:
        config.pokemon[pokemon.name] = pokemon
        print(pokemon.name, "was caught!")
    else:
        print(pokemon.name, "escaped!")
    return caught


def command_inspect(config: Config, args: Sequence[str]) -> None:
    """Print the details of a Pokemon already caught."""
    if not args:
        raise CommandError("specify the name of the pokemon you want to inspect")
    name = args[0]
    pokemon = config.pokemon.get(name)
    if pokemon is None:
        raise CommandError(f"you have not caught {name}")

    print("Name:", pokemon.name)
    print("Height:", pokemon.height)
    print("Weight:", pokemon.weight)
    print("Stats:")
    for stat in pokemon.stats:
        print(f"\t-{stat.stat.name}: {stat.value}")
    print("Types:")
    for pokemon_type in pokemon.types:
        print(f"\t-{pokemon_type.type.name}")


def command_pokedex(config: Config, args: Sequence[str]) -> None:
    """List every Pokemon caught so far."""
    print("Your Pokedex:")
    for pokemon in config.pokemon.values():
        print(f" - {pokemon.name}")