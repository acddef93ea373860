# pokedexcli

An interactive Pokedex for the terminal. You page through the world's location
areas, explore them to see which Pokemon live there, try to catch those Pokemon
and then inspect the ones you caught. Data comes from the public PokeAPI over
HTTP. Raw responses are kept in an in-memory cache keyed by URL; a background
sweep removes entries that are more than five minutes old, so revisiting a page
soon after is answered without a new request.

## Installation

```
pip install .
```

It needs Python 3.10 or newer and nothing outside the standard library.

## Usage

Start the prompt:

```
pokedexcli
```

`pokedexcli --help` shows a short description; the command takes no other
options. The prompt can also be started with `python -m pokedexcli.repl`.

Type commands at the `Pokedex > ` prompt. Input is lower-cased and split on
whitespace, so case and extra spaces do not matter.

| Command                    | What it does                               |
|----------------------------|--------------------------------------------|
| `help`                     | Displays a help message                    |
| `map`                      | Get the next page of locations             |
| `mapb`                     | Get the previous page of locations         |
| `explore <location_name>`  | Explore a location                         |
| `catch <pokemon_name>`     | Attempt to catch a pokemon                 |
| `inspect <pokemon_name>`   | Inspect a caught pokemon                   |
| `pokedex`                  | View your caught pokemon                   |
| `exit`                     | Exit the Pokedex                           |

A short session (the names listed depend on the API's data):

```
Pokedex > map
canalave-city-area
eterna-city-area
...
Pokedex > explore pastoria-city-area
Exploring pastoria-city-area...
Found Pokemon:
 - tentacool
 - magikarp
 ...
Pokedex > catch magikarp
Throwing a Pokeball at magikarp...
magikarp was caught!
You may now inspect it with the inspect command.
Pokedex > inspect magikarp
Name: magikarp
Height: ...
Weight: ...
Stats:
 - hp: ...
...
```

Notes on behaviour:

- `catch` rolls a random number below the Pokemon's base experience; a roll
  above 40 means it escapes, so Pokemon with more base experience are harder
  to catch.
- `mapb` on the first page prints `you're on the first page`.
- `inspect` only works for Pokemon you have caught in this session.
- An unknown command prints `Unknown command`. A command used wrongly, or a
  request that fails or returns something that cannot be decoded, prints its
  error and returns you to the prompt.
- `exit` prints a goodbye and ends the program; so does the end of input.

## What it does not do

Caught Pokemon live only in memory for the length of a session; nothing is
saved to disk, and the Pokedex starts empty every time. The cache is in memory
too and is not shared between sessions.

## Using it as a library

The pieces behind the prompt can be used on their own:

- `pokedexcli.client.Client(timeout=5.0, cache_interval=300.0, fetch=None)`
  has `list_locations(page_url=None)`, `get_location(name)` and
  `get_pokemon(name)`, which return the dataclasses in `pokedexcli.models`
  (`LocationPage`, `Location`, `Pokemon`, ...). Failures raise
  `pokedexcli.client.APIError`. A custom `fetch(url, timeout) -> bytes`
  callable can replace the built-in HTTP request. Call `close()`, or use the
  client as a context manager, to stop the cache's background thread.
- `pokedexcli.cache.Cache(interval)` is a thread-safe in-memory store of
  bytes whose entries are swept once they are older than `interval` seconds.
  It has `add`, `get`, `reap` and `close`, and works as a context manager.
- `pokedexcli.commands` holds the prompt's commands, `Config` (the session
  state) and `get_commands()`; commands raise `CommandError` on misuse.
- `pokedexcli.repl.clean_input` splits a line into lower-cased words, and
  `start_repl(cfg, stdin=None)` runs the prompt over any text stream.

```python
from pokedexcli.client import Client

with Client() as client:
    page = client.list_locations()
    for result in page.results:
        print(result.name)
```

## Running the tests

```
pip install .[test]
pytest
```