"""The interactive Pokedex prompt."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence

from .api import ApiError, PokeApiClient
from .cache import Cache
from .commands import CommandError, Config, get_commands

PROMPT = "Pokedex > "
CACHE_INTERVAL = 5.0


def clean_input(text: str) -> list[str]:
    """Lower-case ``text`` and split it into words."""
    return text.lower().split()


def run(cache: Cache, lines: Iterable[str] | None = None) -> None:
    """Read commands from ``lines`` (standard input by default) until they end."""
    config = Config(client=PokeApiClient(cache))
    commands = get_commands()
    source = iter(sys.stdin if lines is None else lines)

    while True:
        print(PROMPT, end="", flush=True)
        line = next(source, None)
        if line is None:
            print()
            return
        words = clean_input(line)
        if not words:
            continue
        command = commands.get(words[0])
        if command is None:
            print("Unknown command")
            continue
        try:
            command.callback(config, words[1:])
        except (CommandError, ApiError) as exc:
            print("Error:", exc)


def main(argv: Sequence[str] | None = None) -> int:
    """Start an interactive Pokedex session."""
    parser = argparse.ArgumentParser(
        prog="pokedex", description="Explore the Pokemon world from the terminal."
    )
    parser.parse_args(argv)
    with Cache(CACHE_INTERVAL) as cache:
        run(cache)
    return 0


if __name__ == "__main__":
    sys.exit(main())