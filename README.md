# pokedexcli

An interactive Pokedex for the terminal. It lets you page through location
areas, explore an area for Pokemon, and try to catch Pokemon. You can then
inspect and list the ones you caught. Data comes from the public PokeAPI over
HTTP. Responses are kept in an in-memory cache, so a repeated request is
answered without going back to the network.

No third-party libraries are needed.

## Installation

```
pip install .
```

## Usage

Start the prompt:

```
pokedexcli
```

The command takes no options other than `--help`. It reads commands from
standard input and writes `Pokedex >` before each one. Input is lower-cased and
split on whitespace, so `CATCH Pikachu` is the same as `catch pikachu`. Blank
lines are ignored. An unknown command prints `Command not found!`.

| Command              | What it does |
|----------------------|--------------|
| `help`               | Prints a welcome line and each command with its description |
| `exit`               | Prints a goodbye message and leaves the prompt |
| `map`                | Shows the next page of location areas (the first page at the start) |
| `mapb`               | Shows the previous page of location areas |
| `explore <area>`     | Lists the Pokemon that can be encountered in a location area |
| `catch <pokemon>`    | Throws a Pokeball at a Pokemon |
| `inspect <pokemon>`  | Shows the name, height, weight, stats and types of a caught Pokemon |
| `pokedex`            | Lists every Pokemon caught so far, in the order they were caught |

Notes on the commands:

- If `map` has no next page, or `mapb` has no previous page, the current page
  is shown again.
- If `explore`, `catch` or `inspect` is given no argument, it prints a usage
  line.
- Each throw draws a random number below 200. The Pokemon is caught if that
  number is greater than the Pokemon's base experience, so a Pokemon with a
  higher base experience is harder to catch. The hint about `inspect` is
  printed only the first time a Pokemon is caught.
- `inspect` on a Pokemon you have not caught prints
  `you have not caught that pokemon`.
- If a request fails or its response cannot be decoded, the prompt prints
  `Error: ...` and carries on. Requests time out after 30 seconds.

The prompt ends at `exit` or at the end of input.

Example session:

```
Pokedex >map
canalave-city-area
eterna-city-area
...
Pokedex >explore canalave-city-area
tentacool
...
Pokedex >catch tentacool
Throwing a Pokeball at tentacool...
tentacool was caught!
You may now inspect it with the inspect command.
Pokedex >inspect tentacool
Name: tentacool
Height: 9
Weight: 455
Stats:
  -hp: 40
  ...
Types:
- water
- poison
Pokedex >pokedex
 - tentacool
Pokedex >exit
Closing the Pokedex... Goodbye!
```

## Caching

The client stores each response body by URL. Every 60 seconds a background
thread removes entries that are more than 60 seconds old. A response is
therefore reused for at least one minute and at most about two.

## Using it from Python

- `pokedexcli.cli`
  - `clean_input(text)` lower-cases a line and splits it into words.
  - `Repl(client=None, *, out=None, config=None)` holds the commands.
    - `execute(line)` runs one line and returns `False` once `exit` has run.
    - `run(lines)` prompts for and runs each line in an iterable.
  - `Config` holds the `next`, `current` and `previous` page URLs.
  - `main(argv=None)` is what the `pokedexcli` command runs.
- `pokedexcli.pokeapi`
  - `PokeAPIClient(cache=None, fetcher=http_get, rng=None)` fetches data from
    the API.
    - `fetch(url)` returns a response body, from the cache when it can.
    - `get_location_page(url)`, `get_location_area(name)` and
      `get_pokemon(name)` return the parsed forms of those responses.
    - `catch(name)` returns `True` if the throw succeeds and records the
      Pokemon.
    - `inspect(name)` returns a caught Pokemon and raises
      `PokemonNotCaughtError` if it has not been caught.
    - `pokedex()` returns the caught Pokemon.
    - `name in client` tells whether a Pokemon has been caught.
    - A client can be used as a context manager. If it created its own cache,
      it closes that cache on exit.
  - `http_get(url)` returns a response body and raises `PokeAPIError` on
    failure. Non-2xx responses are failures and report the status code and
    body.
- `pokedexcli.cache.Cache(interval, *, clock=time.monotonic, autoreap=True)`
  is a thread-safe store of bytes.
  - `add(key, val)` stores a value.
  - `get(key)` returns the stored bytes, or `None` if the key is absent.
  - `reap()` removes expired entries and returns how many it removed.
  - `close()` stops the background thread.
  - It also supports `len()`, `in`, the `running` property and use as a
    context manager.
  - An `interval` that is not positive raises `ValueError`.
- `pokedexcli.models` holds the parsed responses. These are `NamedResource`,
  `LocationAreaPage`, `LocationArea`, `PokemonStat` and `Pokemon`, together
  with `parse_json(body)`. Malformed JSON or a field of the wrong type raises
  `ValueError`.

The `fetcher` and `rng` arguments let you supply responses and throws yourself:

```python
import json
import random

from pokedexcli.cache import Cache
from pokedexcli.pokeapi import PokeAPIClient

bodies = {
    "https://pokeapi.co/api/v2/pokemon/pidgey": json.dumps(
        {"name": "pidgey", "base_experience": 50, "height": 3, "weight": 18}
    ).encode(),
}

with Cache(60, autoreap=False) as cache:
    client = PokeAPIClient(cache, fetcher=bodies.__getitem__, rng=random.Random(1))
    if client.catch("pidgey"):
        print(client.inspect("pidgey").weight)
```

## What it does not do

The Pokedex lives only in memory. Caught Pokemon are not saved anywhere and
are gone when the program exits. The response cache is not kept on disk
either.

## Running the tests

```
pip install ".[test]"
pytest
```