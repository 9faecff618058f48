"""Playing a match: turns, scoring and breaking ties."""

from __future__ import annotations

import random
import time
from typing import Callable, Sequence

from trivia.console import Console
from trivia.players import Player, ask_player_count, read_players
from trivia.questions import Question

MAX_ROUNDS = 25
TIME_LIMIT = 15
POINTS_IN_TIME = 15
POINTS_LATE = 10

_RULE = "-" * 87


def answer_points(correct: bool, elapsed: float) -> int:
    """Points for an answer given after ``elapsed`` seconds."""
    if not correct:
        return 0
    return POINTS_IN_TIME if elapsed <= TIME_LIMIT else POINTS_LATE


def has_tie(scores: Sequence[int]) -> bool:
    """True when more than one player shares the highest score."""
    return scores.count(max(scores)) > 1


def break_tie(
    console: Console,
    players: Sequence[Player],
    scores: list[int],
    rng: random.Random | None = None,
) -> int:
    """Ask the leading players an arithmetic question; the closest gains a point.

    Returns the index of the winner, whose score in ``scores`` is increased.
    """
    if rng is None:
        rng = random.Random()
    first, second, third = (rng.randrange(100) + 50 for _ in range(3))
    expected = first * second // third

    console.say(_RULE)
    console.say("La partida termino en empate.")
    console.say("Se debe responder una pregunta matematica para determinar el ganador.")
    console.say(
        "El ganador sera quien acierte el resultado o quien este mas cerca de dicho resultado."
    )
    console.say(_RULE + "\n")

    best = max(scores)
    winner = -1
    smallest = -1
    for index, (player, score) in enumerate(zip(players, scores)):
        if score != best:
            continue
        console.say(f"Responde el Jugador > {player.alias} <")
        guess = console.ask_float(f"Cual es el resultado de {first} x {second} / {third}: ")
        difference = abs(int(guess - expected))
        if smallest == -1 or difference < smallest:
            winner, smallest = index, difference

    console.say(f"\nEl resultado es: {expected:.2f}")
    scores[winner] += 1
    console.say(
        f"\nEl jugador '{players[winner].alias}' es el GANADOR y sumara un punto extra. "
        "Felicidades!"
    )
    console.pause()
    return winner


def play_match(
    console: Console,
    questions: Sequence[Question],
    rng: random.Random | None = None,
    clock: Callable[[], float] | None = None,
) -> tuple[list[Player], list[int]]:
    """Register the players, play every turn and settle a tie.

    Each player answers up to 25 questions and their turn ends at the first
    wrong answer. Returns the players and their final scores.
    """
    if rng is None:
        rng = random.Random()
    if clock is None:
        clock = time.monotonic

    console.say("-------------- Inicia el Juego!!! --------------")
    count = ask_player_count(console)
    console.clear()
    players = read_players(console, count)
    console.clear()

    scores = [0] * count
    unused = list(range(len(questions)))
    turn = 0
    round_no = 1
    while turn < count:
        console.say(f"-------- Turno del jugador {turn + 1} ({players[turn].alias}) --------\n")
        if round_no > MAX_ROUNDS:
            console.say("Felicidades! Haz completado todas las rondas.")
            console.say("Continua el siguiente jugador.")
            turn += 1
            round_no = 1
            console.pause()
            continue

        if not unused:
            raise ValueError("not enough questions for the match")
        question = questions[unused.pop(rng.randrange(len(unused)))]
        console.say(f"Ronda {round_no}")
        console.say(question.text)
        console.say()
        for number, option in enumerate(question.options, start=1):
            console.say(f"{number}) {option}")

        start = clock()
        choice = console.ask_int("\nElija una opcion: ")
        elapsed = clock() - start

        points = answer_points(choice == question.correct, elapsed)
        if points:
            console.say("Respuesta Correcta!")
            scores[turn] += points
            round_no += 1
        else:
            prefix = "Ups! " if elapsed <= TIME_LIMIT else ""
            console.say(f"{prefix}Respuesta Incorrecta. Continua el siguiente Jugador.")
            turn += 1
            round_no = 1
        console.pause()

    if has_tie(scores):
        break_tie(console, players, scores, rng)
    return players, scores