import pytest

from pokedexcli.client import APIError
from pokedexcli.commands import (
    CommandError,
    Config,
    command_catch,
    command_exit,
    command_explore,
    command_help,
    command_inspect,
    command_map,
    command_mapb,
    command_pokedex,
    get_commands,
)
from pokedexcli.models import Location, LocationPage, Pokemon

PIKACHU = Pokemon.from_json(
    {
        "name": "pikachu",
        "base_experience": 112,
        "height": 4,
        "weight": 60,
        "stats": [{"base_stat": 35, "effort": 0, "stat": {"name": "hp", "url": ""}}],
        "types": [{"slot": 1, "type": {"name": "electric", "url": ""}}],
        "abilities": [{"ability": {"name": "static", "url": ""}, "is_hidden": False, "slot": 1}],
    }
)

CANALAVE = Location.from_json(
    {
        "name": "canalave-city-area",
        "pokemon_encounters": [
            {"pokemon": {"name": "tentacool", "url": ""}},
            {"pokemon": {"name": "staryu", "url": ""}},
        ],
    }
)

PAGE_ONE = LocationPage.from_json(
    {
        "count": 4,
        "next": "page-2",
        "previous": None,
        "results": [{"name": "area-a", "url": ""}, {"name": "area-b", "url": ""}],
    }
)
PAGE_TWO = LocationPage.from_json(
    {
        "count": 4,
        "next": None,
        "previous": "page-1",
        "results": [{"name": "area-c", "url": ""}, {"name": "area-d", "url": ""}],
    }
)


class FakeClient:
    def __init__(self):
        self.page_requests = []

    def get_pokemon(self, name):
        if name != PIKACHU.name:
            raise APIError(f"invalid response for {name}")
        return PIKACHU

    def get_location(self, name):
        if name != CANALAVE.name:
            raise APIError(f"invalid response for {name}")
        return CANALAVE

    def list_locations(self, page_url=None):
        self.page_requests.append(page_url)
        return PAGE_TWO if page_url == "page-2" else PAGE_ONE


class FixedRoll:
    def __init__(self, value):
        self.value = value
        self.limits = []

    def randrange(self, stop):
        self.limits.append(stop)
        return self.value


@pytest.fixture
def cfg():
    return Config(client=FakeClient())


def test_get_commands_lists_every_command():
    commands = get_commands()
    assert set(commands) == {"help", "catch", "explore", "inspect", "pokedex", "map", "mapb", "exit"}
    assert commands["catch"].name == "catch <pokemon_name>"
    assert commands["map"].callback is command_map


def test_help_prints_each_command(cfg, capsys):
    command_help(cfg)
    out = capsys.readouterr().out
    assert "Welcome to the Pokedex!" in out
    for command in get_commands().values():
        assert f"{command.name}: {command.description}" in out


def test_exit_says_goodbye_and_exits(cfg, capsys):
    with pytest.raises(SystemExit) as info:
        command_exit(cfg)
    assert info.value.code == 0
    assert "Closing the Pokedex... Goodbye!" in capsys.readouterr().out


def test_catch_success_records_pokemon(cfg, capsys):
    cfg.rng = FixedRoll(40)
    command_catch(cfg, "pikachu")
    out = capsys.readouterr().out
    assert "Throwing a Pokeball at pikachu..." in out
    assert "pikachu was caught!" in out
    assert cfg.caught_pokemon == {"pikachu": PIKACHU}
    assert cfg.rng.limits == [PIKACHU.base_experience]


def test_catch_escape_records_nothing(cfg, capsys):
    cfg.rng = FixedRoll(41)
    command_catch(cfg, "pikachu")
    assert "pikachu escaped!" in capsys.readouterr().out
    assert cfg.caught_pokemon == {}


@pytest.mark.parametrize("args", [(), ("a", "b")])
def test_catch_requires_one_name(cfg, args):
    with pytest.raises(CommandError, match="you must provide a pokemon name"):
        command_catch(cfg, *args)


def test_catch_propagates_client_errors(cfg):
    with pytest.raises(APIError):
        command_catch(cfg, "missingno")


def test_explore_lists_encounters(cfg, capsys):
    command_explore(cfg, "canalave-city-area")
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Exploring canalave-city-area..."
    assert lines[2:] == [" - tentacool", " - staryu"]


def test_explore_requires_one_name(cfg):
    with pytest.raises(CommandError, match="you must provide a location name"):
        command_explore(cfg)


def test_inspect_uncaught(cfg):
    with pytest.raises(CommandError, match="you have not caught pikachu yet"):
        command_inspect(cfg, "pikachu")


def test_inspect_requires_one_name(cfg):
    with pytest.raises(CommandError, match="you must provide a Pokemon name"):
        command_inspect(cfg)


def test_inspect_caught_pokemon(cfg, capsys):
    cfg.caught_pokemon["pikachu"] = PIKACHU
    command_inspect(cfg, "pikachu")
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Name: pikachu"
    assert f"Height: {PIKACHU.height}" in lines
    assert f"Weight: {PIKACHU.weight}" in lines
    assert " - hp: 35" in lines
    assert " - electric" in lines
    assert " -static" in lines


def test_map_then_mapb_pages(cfg, capsys):
    command_map(cfg)
    assert capsys.readouterr().out.splitlines() == ["area-a", "area-b"]
    assert cfg.next_locations_url == "page-2"
    assert cfg.prev_locations_url is None

    command_map(cfg)
    assert capsys.readouterr().out.splitlines() == ["area-c", "area-d"]
    assert cfg.prev_locations_url == "page-1"

    command_mapb(cfg)
    assert capsys.readouterr().out.splitlines() == ["area-a", "area-b"]
    assert cfg.client.page_requests == [None, "page-2", "page-1"]


def test_mapb_on_first_page(cfg):
    with pytest.raises(CommandError, match="you're on the first page"):
        command_mapb(cfg)


def test_pokedex_empty(cfg, capsys):
    command_pokedex(cfg)
    assert capsys.readouterr().out.splitlines() == ["Your Pokedex:", "No pokemon caught yet."]


def test_pokedex_lists_caught(cfg, capsys):
    cfg.caught_pokemon["pikachu"] = PIKACHU
    command_pokedex(cfg)
    assert capsys.readouterr().out.splitlines() == ["Your Pokedex:", " - pikachu"]