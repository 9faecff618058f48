"""Trivia questions and the text files they are loaded from."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike
from typing import Union

QUESTION_COUNT = 100
OPTION_COUNT = 4
MAX_OPTION_LENGTH = 49

_QUESTION_RE = re.compile(r"\s*([+-]?\d+),\s*(.+)")
_OPTION = rf"([^,\s][^,]{{0,{MAX_OPTION_LENGTH - 1}}})"
_ANSWER_RE = re.compile(
    r"\s*([+-]?\d+)," + r",".join([r"\s*" + _OPTION] * OPTION_COUNT) + r",\s*([+-]?\d+)\s*"
)

PathType = Union[str, "PathLike[str]"]


class QuestionFileError(ValueError):
    """Raised when the question or answer files cannot be read or parsed."""


@dataclass(frozen=True)
class Question:
    """A question with its four options and the number (1-4) of the right one."""

    number: int
    text: str
    options: tuple[str, ...]
    correct: int


def parse_question_line(line: str) -> tuple[int, str]:
    """Parse a line of the form ``number, question text``."""
    match = _QUESTION_RE.fullmatch(line.rstrip("\r\n"))
    if match is None:
        raise QuestionFileError(f"malformed question line: {line!r}")
    return int(match.group(1)), match.group(2)


def parse_answer_line(line: str) -> tuple[int, tuple[str, ...], int]:
    """Parse a line of the form ``number, opt1, opt2, opt3, opt4, correct``."""
    match = _ANSWER_RE.fullmatch(line.rstrip("\r\n"))
    if match is None:
        raise QuestionFileError(f"malformed answer line: {line!r}")
    groups = match.groups()
    return int(groups[0]), tuple(groups[1 : 1 + OPTION_COUNT]), int(groups[-1])


def _content_lines(path: PathType) -> list[str]:
    with open(path, encoding="utf-8") as handle:
        return [line for line in handle if line.strip()]


def load_questions(
    questions_path: PathType, answers_path: PathType, count: int = QUESTION_COUNT
) -> list[Question]:
    """Load ``count`` questions, pairing each question line with its answer line."""
    try:
        question_lines = _content_lines(questions_path)
        answer_lines = _content_lines(answers_path)
    except OSError as exc:
        raise QuestionFileError("Error al abrir archivos de preguntas o respuestas.") from exc
    if len(question_lines) < count or len(answer_lines) < count:
        raise QuestionFileError(f"expected {count} questions and answers")
    questions = []
    for question_line, answer_line in zip(question_lines[:count], answer_lines[:count]):
        number, text = parse_question_line(question_line)
        _, options, correct = parse_answer_line(answer_line)
        questions.append(Question(number, text, options, correct))
    return questions