import io

from trivia.console import Console
from trivia.players import Player, ask_player_count, read_player, read_players


def make_console(*lines):
    out = io.StringIO()
    console = Console(io.StringIO("".join(f"{line}\n" for line in lines)), out)
    return console, out


def test_ask_player_count_rejects_out_of_range():
    console, out = make_console("5", "1", "3")
    assert ask_player_count(console) == 3
    assert out.getvalue().count("El numero de jugadores debe ser de 2 a 4.") == 2


def test_ask_player_count_accepts_bounds():
    console, _ = make_console("2")
    assert ask_player_count(console) == 2
    console, _ = make_console("4")
    assert ask_player_count(console) == 4


def test_read_player_rejects_long_alias():
    console, out = make_console("abcdefghijkl", "ana", "1234")
    assert read_player(console) == Player("ana", 1234)
    assert "ERROR! Alias demasiado largo" in out.getvalue()


def test_read_player_accepts_ten_characters():
    console, out = make_console("abcdefghij", "99")
    assert read_player(console) == Player("abcdefghij", 99)
    assert "ERROR!" not in out.getvalue()


def test_read_players_in_order():
    console, out = make_console("ana", "1", "bob", "2")
    players = read_players(console, 2)
    assert [p.alias for p in players] == ["ana", "bob"]
    assert "JUGADOR 2" in out.getvalue()