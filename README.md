# trivia

A console trivia game for two to four players, with prompts in Spanish.

Players take turns answering multiple-choice questions. Each question is
drawn at random from the loaded questions and is not asked twice in the
same match. A player keeps answering until they miss a question or
complete 25 rounds. Then the next player takes over.

## Scoring

- A correct answer given within 15 seconds earns 15 points.
- A correct answer that takes longer earns 10 points.
- A wrong answer earns nothing and ends the player's turn.

Two or more players may finish with the highest score. In that case a
tie-break follows. Every leading player answers the same arithmetic
question, `a x b / c`, where each number is between 50 and 149. The
expected result is the whole-number quotient. The player whose answer is
closest to it wins and earns one extra point. If two answers are equally
close, the player who answered first wins.

## Question files

Questions are read from two UTF-8 text files with one entry per line.
Blank lines are skipped.

The questions file holds a number and the question text:

```
1, What is the capital of France?
```

The answers file holds a number, four options and the number of the
correct option (1 to 4). An option may be up to 49 characters long and
may not contain a comma.

```
1, Madrid, Paris, Rome, Berlin, 2
```

The two files are paired line by line. The first `count` lines of each
are used, and each file must have at least that many.

## Using the package

A `Console` object drives the game. It handles prompts and output. By
default it uses standard input and output. It can also be given any text
streams, so a match can be played in a terminal or driven from code.
Pass `clear_screen=True` to clear the terminal after each pause.

```python
import random
import time

from trivia.console import Console
from trivia.questions import load_questions
from trivia.game import play_match

questions = load_questions("preguntas.txt", "respuestas.txt", 100)
players, scores = play_match(Console(), questions, random.Random(), time.monotonic)
```

`play_match` does the following:

- asks how many players there are (2 to 4), with `ask_player_count`;
- reads each player's alias (at most 10 characters) and ID number;
- plays every turn and settles any tie;
- returns the list of `Player` objects and their final scores.

It raises `ValueError` if it runs out of questions. The `rng` and `clock`
arguments are optional. By default they are a fresh `random.Random()` and
`time.monotonic`.

`load_questions` raises `QuestionFileError` if a file cannot be read, if a
file has too few lines, or if a line is malformed. It returns a list of
`Question` objects, each with `number`, `text`, `options` and `correct`.
`QuestionFileError` is a subclass of `ValueError`. You can parse single
lines with `parse_question_line` and `parse_answer_line`.

The building blocks are also available on their own:

- `trivia.game.answer_points(correct, elapsed)` returns the points earned
  by one answer.
- `trivia.game.has_tie(scores)` tells whether the top score is shared.
- `trivia.game.break_tie(console, players, scores, rng)` runs the
  tie-break question. It adds the extra point to `scores` and returns the
  winner's index.
- `trivia.players.read_players(console, count)` asks for each player's
  details.
- `trivia.console.main_menu(console)` shows the main menu and returns the
  number chosen.
- `trivia.console.confirm_clear_history(console)` asks for confirmation
  and returns `True` or `False`.

## What the package does not do

The package has no command to start the game. To play, call `play_match`
from your own code.

It keeps no score history either:

- Final scores are returned, not stored.
- Nothing prints a score table.
- Nothing acts on the "Mostrar Puntajes" and "Vaciar Historial" menu
  choices. `main_menu` only returns the number chosen, and
  `confirm_clear_history` only asks for confirmation.

## Running the tests

Install the `test` extra, then run `pytest` from the project directory.