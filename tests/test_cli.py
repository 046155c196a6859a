import io
import json

import pytest

from pokedexcli.cache import Cache
from pokedexcli.cli import PROMPT, Config, Repl, clean_input, main
from pokedexcli.pokeapi import LOCATION_AREA_URL, POKEMON_URL, PokeAPIClient, PokeAPIError


@pytest.mark.parametrize(
    "text, expected",
    [
        ("  hello  world  ", ["hello", "world"]),
        ("Charmander Bulbasaur PIKACHU", ["charmander", "bulbasaur", "pikachu"]),
    ],
)
def test_clean_input(text, expected):
    assert clean_input(text) == expected


class FakeFetcher:
    def __init__(self, responses):
        self.responses = responses
        self.calls = []

    def __call__(self, url):
        self.calls.append(url)
        if url not in self.responses:
            raise PokeAPIError(f"no response for {url}")
        return self.responses[url]


class FixedRandom:
    def __init__(self, value):
        self.value = value

    def randrange(self, stop):
        return self.value


PAGE2 = LOCATION_AREA_URL + "?offset=20&limit=20"


def page(names, next_url=None, previous_url=None):
    return json.dumps(
        {
            "count": 40,
            "next": next_url,
            "previous": previous_url,
            "results": [{"name": n, "url": ""} for n in names],
        }
    ).encode()


def pokemon_body(name, base_experience):
    return json.dumps(
        {
            "name": name,
            "base_experience": base_experience,
            "height": 4,
            "weight": 60,
            "stats": [
                {"base_stat": 35, "effort": 0, "stat": {"name": "hp", "url": ""}},
                {"base_stat": 55, "effort": 0, "stat": {"name": "attack", "url": ""}},
            ],
            "types": [{"slot": 1, "type": {"name": "electric", "url": ""}}],
        }
    ).encode()


RESPONSES = {
    LOCATION_AREA_URL: page(["first-area", "second-area"], next_url=PAGE2),
    PAGE2: page(["third-area"], previous_url=LOCATION_AREA_URL),
    LOCATION_AREA_URL + "/first-area": json.dumps(
        {"name": "first-area", "pokemon_encounters": [{"pokemon": {"name": "zubat", "url": ""}}]}
    ).encode(),
    POKEMON_URL + "/pikachu": pokemon_body("pikachu", 112),
}


def make_repl(roll=199, config=None):
    fetcher = FakeFetcher(RESPONSES)
    client = PokeAPIClient(cache=Cache(60, autoreap=False), fetcher=fetcher, rng=FixedRandom(roll))
    out = io.StringIO()
    return Repl(client, out=out, config=config), out, fetcher


def test_help_lists_commands():
    repl, out, _ = make_repl()
    assert repl.execute("help") is True
    text = out.getvalue()
    assert text.startswith("Welcome to the Pokedex!\nUsage:\n\n")
    assert "map: Get the map\n" in text
    assert "exit: Exit the Pokedex\n" in text


def test_unknown_command():
    repl, out, _ = make_repl()
    assert repl.execute("fly") is True
    assert out.getvalue() == "Command not found!\n"


def test_blank_line_does_nothing():
    repl, out, _ = make_repl()
    assert repl.execute("   ") is True
    assert out.getvalue() == ""


def test_map_pages_forward_and_back():
    repl, out, _ = make_repl()
    repl.execute("map")
    assert out.getvalue() == "first-area\nsecond-area\n"
    assert repl.config.next == PAGE2
    repl.execute("MAP")
    assert out.getvalue().endswith("third-area\n")
    assert repl.config.current == PAGE2
    assert repl.config.previous == LOCATION_AREA_URL
    repl.execute("mapb")
    assert out.getvalue().endswith("first-area\nsecond-area\n")
    assert repl.config.current == LOCATION_AREA_URL


def test_map_without_urls():
    repl, out, fetcher = make_repl(config=Config(current=None))
    repl.execute("map")
    repl.execute("mapb")
    assert out.getvalue() == "No next URL available!\nNo previous URL available!\n"
    assert fetcher.calls == []


def test_map_error_is_reported():
    repl, out, _ = make_repl(config=Config(current="https://example.com/none"))
    assert repl.execute("map") is True
    assert out.getvalue().startswith("Error: ")
    assert repl.config.current == "https://example.com/none"


def test_explore_lists_pokemon():
    repl, out, _ = make_repl()
    repl.execute("explore first-area")
    assert out.getvalue() == "zubat\n"


def test_explore_requires_argument():
    repl, out, fetcher = make_repl()
    repl.execute("explore")
    assert out.getvalue().startswith("usage: explore")
    assert fetcher.calls == []


def test_catch_then_inspect_and_pokedex():
    repl, out, _ = make_repl(roll=199)
    repl.execute("catch Pikachu")
    assert out.getvalue() == (
        "Throwing a Pokeball at pikachu...\n"
        "pikachu was caught!\n"
        "You may now inspect it with the inspect command.\n"
    )
    out.seek(0)
    out.truncate()
    repl.execute("inspect pikachu")
    assert out.getvalue() == (
        "Name: pikachu\nHeight: 4\nWeight: 60\nStats:\n"
        "  -hp: 35\n  -attack: 55\nTypes:\n- electric\n"
    )
    out.seek(0)
    out.truncate()
    repl.execute("pokedex")
    assert out.getvalue() == " - pikachu\n"


def test_catch_escape():
    repl, out, _ = make_repl(roll=0)
    repl.execute("catch pikachu")
    assert out.getvalue() == "Throwing a Pokeball at pikachu...\npikachu escaped!\n"
    assert "pikachu" not in repl.client


def test_catch_unknown_pokemon_reports_error():
    repl, out, _ = make_repl()
    repl.execute("catch missingno")
    assert out.getvalue().startswith("Error: ")
    assert "Throwing" not in out.getvalue()


def test_inspect_uncaught():
    repl, out, _ = make_repl()
    repl.execute("inspect pikachu")
    assert out.getvalue() == "you have not caught that pokemon\n"


def test_exit_stops_run():
    repl, out, _ = make_repl()
    repl.run(["exit\n", "help\n"])
    assert out.getvalue() == PROMPT + "Closing the Pokedex... Goodbye!\n"


def test_run_prompts_for_each_line():
    repl, out, _ = make_repl()
    repl.run(["fly\n", "swim\n"])
    assert out.getvalue() == (
        PROMPT + "Command not found!\n" + PROMPT + "Command not found!\n" + PROMPT
    )


def test_main_exits_on_exit(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("exit\n"))
    assert main([]) == 0
    assert "Closing the Pokedex... Goodbye!" in capsys.readouterr().out