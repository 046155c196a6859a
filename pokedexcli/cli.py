"""Interactive Pokedex command loop."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Callable, TextIO

from .pokeapi import LOCATION_AREA_URL, PokeAPIClient, PokeAPIError, PokemonNotCaughtError

PROMPT = "Pokedex >"


def clean_input(text: str) -> list[str]:
    """Lowercase ``text`` and split it into whitespace-separated words."""
    return text.lower().split()


@dataclass
class Config:
    """Pagination state for the location-area listing."""

    next: str | None = None
    current: str | None = LOCATION_AREA_URL
    previous: str | None = None


@dataclass(frozen=True)
class Command:
    """A REPL command and the handler that runs it."""

    name: str
    description: str
    callback: Callable[[list[str]], None]


class Repl:
    """Reads commands line by line and runs them against a PokeAPI client."""

    def __init__(
        self,
        client: PokeAPIClient | None = None,
        *,
        out: TextIO | None = None,
        config: Config | None = None,
    ) -> None:
        self.client = client if client is not None else PokeAPIClient()
        self.out = out if out is not None else sys.stdout
        self.config = config if config is not None else Config()
        self._running = True
        self.commands: dict[str, Command] = {
            command.name: command
            for command in (
                Command("help", "Displays a help message", self.cmd_help),
                Command("exit", "Exit the Pokedex", self.cmd_exit),
                Command("map", "Get the map", self.cmd_map),
                Command("mapb", "Get the previous map", self.cmd_mapb),
                Command("explore", "Explore <area name>", self.cmd_explore),
                Command("catch", "Try to catch <pokemon name>", self.cmd_catch),
                Command("inspect", "Inspect catched <pokemon name>", self.cmd_inspect),
                Command("pokedex", "List all pokemon in the pokedex", self.cmd_pokedex),
            )
        }

    def _say(self, text: str = "") -> None:
        print(text, file=self.out)

    def execute(self, line: str) -> bool:
        """Run one input line; return False once the user has asked to exit."""
        words = clean_input(line)
        if not words:
            return self._running
        command = self.commands.get(words[0])
        if command is None:
            self._say("Command not found!")
            return self._running
        try:
            command.callback(words[1:])
        except PokeAPIError as exc:
            self._say(f"Error: {exc}")
        return self._running

    def run(self, lines: Iterable[str]) -> None:
        """Prompt for and run each line until exit or the input ends."""
        for line in lines:
            self.out.write(PROMPT)
            if not self.execute(line):
                return
        self.out.write(PROMPT)

    def cmd_help(self, args: list[str]) -> None:
        self._say("Welcome to the Pokedex!")
        self._say("Usage:")
        self._say()
        for command in self.commands.values():
            self._say(f"{command.name}: {command.description}")

    def cmd_exit(self, args: list[str]) -> None:
        self._say("Closing the Pokedex... Goodbye!")
        self._running = False

    def cmd_map(self, args: list[str]) -> None:
        url = self.config.next or self.config.current
        if not url:
            self._say("No next URL available!")
            return
        self._show_page(url)

    def cmd_mapb(self, args: list[str]) -> None:
        url = self.config.previous or self.config.current
        if not url:
            self._say("No previous URL available!")
            return
        self._show_page(url)

    def _show_page(self, url: str) -> None:
        page = self.client.get_location_page(url)
        self.config.current = url
        self.config.next = page.next
        self.config.previous = page.previous
        for result in page.results:
            self._say(result.name)

    def _argument(self, args: list[str], usage: str) -> str | None:
        if not args:
            self._say(f"usage: {usage}")
            return None
        return args[0]

    def cmd_explore(self, args: list[str]) -> None:
        location = self._argument(args, "explore <area name>")
        if location is None:
            return
        area = self.client.get_location_area(location)
        for pokemon in area.pokemon_encounters:
            self._say(pokemon.name)

    def cmd_catch(self, args: list[str]) -> None:
        name = self._argument(args, "catch <pokemon name>")
        if name is None:
            return
        self.client.get_pokemon(name)
        already_caught = name in self.client
        self._say(f"Throwing a Pokeball at {name}...")
        if self.client.catch(name):
            self._say(f"{name} was caught!")
            if not already_caught:
                self._say("You may now inspect it with the inspect command.")
        else:
            self._say(f"{name} escaped!")

    def cmd_inspect(self, args: list[str]) -> None:
        name = self._argument(args, "inspect <pokemon name>")
        if name is None:
            return
        try:
            pokemon = self.client.inspect(name)
        except PokemonNotCaughtError as exc:
            self._say(str(exc))
            return
        self._say(f"Name: {pokemon.name}")
        self._say(f"Height: {pokemon.height}")
        self._say(f"Weight: {pokemon.weight}")
        self._say("Stats:")
        for stat in pokemon.stats:
            self._say(f"  -{stat.name}: {stat.base_stat}")
        self._say("Types:")
        for kind in pokemon.types:
            self._say(f"- {kind.name}")

    def cmd_pokedex(self, args: list[str]) -> None:
        for pokemon in self.client.pokedex():
            self._say(f" - {pokemon.name}")


def main(argv: list[str] | None = None) -> int:
    """Start the interactive Pokedex on standard input."""
    parser = argparse.ArgumentParser(
        prog="pokedexcli", description="An interactive Pokedex backed by the PokeAPI."
    )
    parser.parse_args(argv)
    with PokeAPIClient() as client:
        Repl(client).run(sys.stdin)
    return 0


if __name__ == "__main__":
    sys.exit(main())