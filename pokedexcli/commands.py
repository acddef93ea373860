"""The commands understood by the Pokedex prompt."""

from __future__ import annotations

import random
import sys
from collections.abc import Callable
from dataclasses import dataclass, field

from .client import Client
from .models import LocationPage, Pokemon

CATCH_THRESHOLD = 40


class CommandError(Exception):
    """A command was used wrongly or could not do its work."""


@dataclass
class Config:
    """State shared by the commands during one session."""

    client: Client
    next_locations_url: str | None = None
    prev_locations_url: str | None = None
    caught_pokemon: dict[str, Pokemon] = field(default_factory=dict)
    rng: random.Random = field(default_factory=random.Random)


CommandCallback = Callable[..., None]


@dataclass(frozen=True)
class Command:
    """A command: how it is written, what it does, and the function that runs it."""

    name: str
    description: str
    callback: CommandCallback


def _single_argument(args: tuple[str, ...], message: str) -> str:
    if len(args) != 1:
        raise CommandError(message)
    return args[0]


def command_help(cfg: Config, *args: str) -> None:
    """Print a usage message listing every command."""
    print()
    print("Welcome to the Pokedex!")
    print("Usage:")
    print()
    for command in get_commands().values():
        print(f"{command.name}: {command.description}")
    print()


def command_exit(cfg: Config, *args: str) -> None:
    """Say goodbye and end the program."""
    print("Closing the Pokedex... Goodbye!")
    sys.exit(0)


def command_catch(cfg: Config, *args: str) -> None:
    """Throw a Pokeball at the named Pokemon; the more experienced it is, the likelier it escapes."""
    name = _single_argument(args, "you must provide a pokemon name")
    pokemon = cfg.client.get_pokemon(name)

    if pokemon.base_experience <= 0:
        raise CommandError(f"{pokemon.name} has no base experience to catch against")
    roll = cfg.rng.randrange(pokemon.base_experience)

    print(f"Throwing a Pokeball at {pokemon.name}...")
    if roll > CATCH_THRESHOLD:
        print(f"{pokemon.name} escaped!")
        return

    print(f"{pokemon.name} was caught!")
    print("You may now inspect it with the inspect command.")
    cfg.caught_pokemon[pokemon.name] = pokemon


def command_explore(cfg: Config, *args: str) -> None:
    """List the Pokemon that can be found in the named location area."""
    name = _single_argument(args, "you must provide a location name")
    location = cfg.client.get_location(name)
    print(f"Exploring {location.name}...")
    print("Found Pokemon: ")
    for encounter in location.pokemon_encounters:
        print(f" - {encounter.pokemon.name}")


def command_inspect(cfg: Config, *args: str) -> None:
    """Show the details of a Pokemon that has been caught."""
    name = _single_argument(args, "you must provide a Pokemon name")
    pokemon = cfg.caught_pokemon.get(name)
    if pokemon is None:
        raise CommandError(f"you have not caught {name} yet")

    print(f"Name: {pokemon.name}")
    print(f"Height: {pokemon.height}")
    print(f"Weight: {pokemon.weight}")
    print("Stats:")
    for stat in pokemon.stats:
        print(f" - {stat.stat.name}: {stat.base_stat}")
    print("Types:")
    for pokemon_type in pokemon.types:
        print(f" - {pokemon_type.type.name}")
    print("Abilities:")
    for ability in pokemon.abilities:
        print(f" -{ability.ability.name}")


def _show_page(cfg: Config, page: LocationPage) -> None:
    cfg.next_locations_url = page.next
    cfg.prev_locations_url = page.previous
    for location in page.results:
        print(location.name)


def command_map(cfg: Config, *args: str) -> None:
    """Print the next page of location areas."""
    _show_page(cfg, cfg.client.list_locations(cfg.next_locations_url))


def command_mapb(cfg: Config, *args: str) -> None:
    """Print the previous page of location areas."""
    if cfg.prev_locations_url is None:
        raise CommandError("you're on the first page")
    _show_page(cfg, cfg.client.list_locations(cfg.prev_locations_url))


def command_pokedex(cfg: Config, *args: str) -> None:
    """List the Pokemon caught so far."""
    print("Your Pokedex:")
    if not cfg.caught_pokemon:
        print("No pokemon caught yet.")
        return
    for pokemon in cfg.caught_pokemon.values():
        print(f" - {pokemon.name}")


def get_commands() -> dict[str, Command]:
    """Return every command keyed by the word that invokes it."""
    return {
        "help": Command("help", "Displays a help message", command_help),
        "catch": Command("catch <pokemon_name>", "Attempt to catch a pokemon", command_catch),
        "explore": Command("explore <location_name>", "Explore a location", command_explore),
        "inspect": Command("inspect <pokemon_name>", "Inspect a caught pokemon", command_inspect),
        "pokedex": Command("pokedex", "View your caught pokemon", command_pokedex),
        "map": Command("map", "Get the next page of locations", command_map),
        "mapb": Command("mapb", "Get the previous page of locations", command_mapb),
        "exit": Command("exit", "Exit the Pokedex", command_exit),
    }