# pokedex

An interactive command-line Pokedex. It lets you browse location areas of the
Pokemon world, explore which Pokemon can be found in them, try to catch them,
and inspect the ones you have caught. Data comes from the public PokeAPI over
HTTP. Responses are kept for a few seconds in an in-memory cache, so repeating
a lookup does not fetch it again.

## Installation

```
pip install .
```

No third-party libraries are needed at run time.

## Usage

Start the prompt:

```
pokedex
```

Then type commands at the `Pokedex > ` prompt. Input is lower-cased and split
on whitespace. The first word is the command and the rest are its arguments.

| Command             | What it does                                                   |
|---------------------|----------------------------------------------------------------|
| `help`              | Shows a help message listing all commands                      |
| `exit`              | Closes the Pokedex                                             |
| `map`               | Shows the next 20 location area names                          |
| `mapb`              | Shows the previous 20 location area names                      |
| `explore <area>`    | Lists the Pokemon that can be met in a location area           |
| `catch <pokemon>`   | Throws a Pokeball; stronger Pokemon escape more often          |
| `inspect <pokemon>` | Shows the height, weight, stats and types of a caught Pokemon  |
| `pokedex`           | Lists every Pokemon you have caught                            |

Example session:

```
Pokedex > map
canalave-city-area
eterna-city-area
...
Pokedex > explore pastoria-city-area
tentacool
tentacruel
...
Pokedex > catch pikachu
Throwing a Pokeball at pikachu...
pikachu was caught!
Pokedex > inspect pikachu
Name: pikachu
Height: 4
Weight: 60
Stats:
	-hp: 35
	...
Types:
	-electric
```

How likely a catch is to succeed depends on the Pokemon's base experience.
Pokemon with low experience are nearly always caught, and the strongest ones
nearly always escape.

## Using it from Python

The pieces can also be used as a library:

```python
from pokedex.cache import Cache
from pokedex.api import PokeApiClient

cache = Cache(5.0)  # entries expire after five seconds
client = PokeApiClient(cache)
pokemon = client.fetch_pokemon("https://pokeapi.co/api/v2/pokemon/pikachu")
print(pokemon.name, pokemon.base_experience)
cache.close()
```

`pokedex.repl.clean_input` turns a raw input line into lower-cased words.
`pokedex.repl.run` drives the command loop over any iterable of lines.