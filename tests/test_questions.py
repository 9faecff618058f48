import pytest

from trivia.questions import (
    Question,
    QuestionFileError,
    load_questions,
    parse_answer_line,
    parse_question_line,
)


def test_parse_question_line():
    assert parse_question_line("3, Capital de Francia?\n") == (3, "Capital de Francia?")


def test_parse_answer_line():
    number, options, correct = parse_answer_line("3, Paris, Roma, Lima, Oslo, 1\n")
    assert number == 3
    assert options == ("Paris", "Roma", "Lima", "Oslo")
    assert correct == 1


def test_parse_answer_line_rejects_long_option():
    line = "1, " + "x" * 50 + ", b, c, d, 2"
    with pytest.raises(QuestionFileError):
        parse_answer_line(line)


def test_parse_answer_line_accepts_option_at_limit():
    _, options, _ = parse_answer_line("1, " + "x" * 49 + ", b, c, d, 2")
    assert len(options[0]) == 49


def test_parse_answer_line_rejects_missing_option():
    with pytest.raises(QuestionFileError):
        parse_answer_line("1, a, b, c, 2")


def test_load_questions(tmp_path):
    qpath = tmp_path / "preguntas.txt"
    apath = tmp_path / "respuestas.txt"
    qpath.write_text("1, Uno?\n\n2, Dos?\n", encoding="utf-8")
    apath.write_text("1, a, b, c, d, 4\n2, e, f, g, h, 2\n", encoding="utf-8")
    questions = load_questions(qpath, apath, 2)
    assert questions == [
        Question(1, "Uno?", ("a", "b", "c", "d"), 4),
        Question(2, "Dos?", ("e", "f", "g", "h"), 2),
    ]


def test_load_questions_missing_file(tmp_path):
    with pytest.raises(QuestionFileError, match="Error al abrir"):
        load_questions(tmp_path / "no.txt", tmp_path / "tampoco.txt", 1)


def test_load_questions_too_few(tmp_path):
    qpath = tmp_path / "preguntas.txt"
    apath = tmp_path / "respuestas.txt"
    qpath.write_text("1, Uno?\n", encoding="utf-8")
    apath.write_text("1, a, b, c, d, 4\n", encoding="utf-8")
    with pytest.raises(QuestionFileError):
        load_questions(qpath, apath, 2)