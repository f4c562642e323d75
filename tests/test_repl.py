import io
import json

import pytest

from pokedex.cache import Cache
from pokedex.repl import PROMPT, clean_input, main, run


@pytest.mark.parametrize(
    "text,expected",
    [
        (" hello world   ", ["hello", "world"]),
        ("  hello  ", ["hello"]),
        ("  hello  world  ", ["hello", "world"]),
        ("  HellO  World  ", ["hello", "world"]),
    ],
)
def test_clean_input(text, expected):
    assert clean_input(text) == expected


def test_clean_input_empty():
    assert clean_input("   ") == []


@pytest.fixture
def cache():
    c = Cache(60)
    yield c
    c.close()


def test_run_unknown_command(cache, capsys):
    run(cache, ["dance"])
    out = capsys.readouterr().out
    assert "Unknown command\n" in out
    assert out.count(PROMPT) == 2


def test_run_help(cache, capsys):
    run(cache, ["HELP"])
    assert "Welcome to the Pokedex!" in capsys.readouterr().out


def test_run_reports_command_errors(cache, capsys):
    run(cache, ["mapb", "catch"])
    out = capsys.readouterr().out
    assert "Error: cannot map back any further\n" in out
    assert "Error: must include the name" in out


def test_run_skips_blank_lines(cache, capsys):
    run(cache, ["", "   ", "pokedex"])
    out = capsys.readouterr().out
    assert out.count(PROMPT) == 4
    assert "Your Pokedex:\n" in out


def test_run_explore_with_args(cache, capsys):
    cache.add(
        "https://pokeapi.co/api/v2/location-area/pastoria-city-area",
        json.dumps({"pokemon_encounters": [{"pokemon": {"name": "tentacool"}}]}).encode(),
    )
    run(cache, ["explore Pastoria-City-Area"])
    assert "tentacool\n" in capsys.readouterr().out


def test_run_exit_stops(cache, capsys):
    with pytest.raises(SystemExit) as info:
        run(cache, ["exit", "help"])
    assert info.value.code == 0
    out = capsys.readouterr().out
    assert "Goodbye!" in out
    assert "Welcome" not in out


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("pokedex\n"))
    assert main([]) == 0
    assert "Your Pokedex:" in capsys.readouterr().out