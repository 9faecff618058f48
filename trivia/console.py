"""Line-oriented terminal input and output, and the game's menus."""

from __future__ import annotations

import math
import os
import subprocess
import sys
from typing import Callable, TextIO, TypeVar

_T = TypeVar("_T")


class Console:
    """Reads answers from one text stream and writes prompts to another."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        clear_screen: bool = False,
    ) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._clear_screen = clear_screen

    def say(self, text: str = "") -> None:
        """Write one line of text."""
        self._out.write(f"{text}\n")

    def ask(self, prompt: str) -> str:
        """Show a prompt and return the line typed, without its line ending."""
        self._out.write(prompt)
        self._out.flush()
        line = self._in.readline()
        if not line:
            raise EOFError("input ended")
        return line.rstrip("\r\n")

    def _ask_number(self, prompt: str, convert: Callable[[str], _T]) -> _T:
        while True:
            text = self.ask(prompt).strip()
            try:
                return convert(text)
            except ValueError:
                continue

    def ask_int(self, prompt: str) -> int:
        """Ask until a whole number is typed."""
        return self._ask_number(prompt, int)

    def ask_float(self, prompt: str) -> float:
        """Ask until a finite number is typed."""

        def convert(text: str) -> float:
            value = float(text)
            if not math.isfinite(value):
                raise ValueError(text)
            return value

        return self._ask_number(prompt, convert)

    def pause(self) -> None:
        """Wait for the user to press Enter, then clear the screen."""
        self._out.write("\nPresiona una tecla para continuar...")
        self._out.flush()
        self._in.readline()
        self.clear()

    def clear(self) -> None:
        """Clear the terminal when screen clearing is enabled."""
        if self._clear_screen:
            subprocess.run("cls" if os.name == "nt" else "clear", shell=True, check=False)


def main_menu(console: Console) -> int:
    """Show the main menu and return the option chosen."""
    console.say("\n\n--------- BIENVENIDOS!!! ---------\n")
    console.say("Menu Principal:")
    console.say("1. Jugar Partida")
    console.say("2. Mostrar Puntajes")
    console.say("3. Vaciar Historial")
    console.say("4. Salir")
    return console.ask_int("\nSeleccione una opcion: ")


def confirm_clear_history(console: Console) -> bool:
    """Ask whether the score history should be emptied; the caller empties it."""
    console.say("\n\nQuieres eliminar historial?\n")
    console.say("1. SI")
    console.say("2. NO")
    option = console.ask_int("\nIngrese una opcion: ")
    while option not in (1, 2):
        option = console.ask_int("Por favor, ingrese opcion 1 o 2: ")
    if option == 1:
        console.pause()
        return True
    console.say("\nAccion cancelada, regresando al menu principal.")
    console.pause()
    return False