"""Interactive command-line Pokedex backed by the PokeAPI."""

__version__ = "0.1.0"