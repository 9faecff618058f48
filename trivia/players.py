"""Players and reading their details from the console."""

from __future__ import annotations

from dataclasses import dataclass

from trivia.console import Console

MIN_PLAYERS = 2
MAX_PLAYERS = 4
MAX_ALIAS_LENGTH = 10


@dataclass
class Player:
    """A player known by an alias and an identity number."""

    alias: str
    dni: int


def ask_player_count(console: Console) -> int:
    """Ask until a player count between 2 and 4 is given."""
    while True:
        count = console.ask_int(f"\nIngrese la cantidad de jugadores (Max {MAX_PLAYERS}): ")
        if MIN_PLAYERS <= count <= MAX_PLAYERS:
            return count
        console.say(f"El numero de jugadores debe ser de {MIN_PLAYERS} a {MAX_PLAYERS}.")


def read_player(console: Console) -> Player:
    """Ask for one player's alias and identity number."""
    alias = console.ask("Ingresar ALIAS: ")
    while len(alias) > MAX_ALIAS_LENGTH:
        console.say(
            f"ERROR! Alias demasiado largo (Max {MAX_ALIAS_LENGTH} caracteres). "
            "Intente nuevamente."
        )
        alias = console.ask("Ingresar ALIAS: ")
    dni = console.ask_int("Ingresar DNI: ")
    return Player(alias, dni)


def read_players(console: Console, count: int) -> list[Player]:
    """Ask for the details of ``count`` players in turn."""
    players = []
    for number in range(1, count + 1):
        console.say(f"\n----------- JUGADOR {number} -----------")
        players.append(read_player(console))
    console.say()
    return players