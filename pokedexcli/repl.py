"""The interactive Pokedex prompt."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import TextIO

from .client import APIError, Client
from .commands import CommandError, Config, get_commands

PROMPT = "Pokedex > "


def clean_input(text: str) -> list[str]:
    """Lower-case ``text`` and split it into whitespace-separated words."""
    return text.lower().split()


def start_repl(cfg: Config, stdin: TextIO | None = None) -> None:
    """Read commands line by line and run them until input ends."""
    stream = sys.stdin if stdin is None else stdin
    commands = get_commands()
    while True:
        print(PROMPT, end="", flush=True)
        line = stream.readline()
        if not line:
            print()
            return

        words = clean_input(line)
        if not words:
            continue

        name, *args = words
        command = commands.get(name)
        if command is None:
            print("Unknown command")
            continue
        try:
            command.callback(cfg, *args)
        except (CommandError, APIError) as exc:
            print(exc)


def main(argv: Sequence[str] | None = None) -> int:
    """Start an interactive Pokedex session."""
    parser = argparse.ArgumentParser(prog="pokedexcli", description="An interactive Pokedex.")
    parser.parse_args(argv)

    with Client(timeout=5.0, cache_interval=300.0) as client:
        start_repl(Config(client=client))
    return 0


if __name__ == "__main__":
    sys.exit(main())