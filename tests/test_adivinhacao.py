import io

import pytest

from joguinhos.adivinhacao import Level, Outcome, compare, main, play


@pytest.mark.parametrize(
    "guess, secret, outcome",
    [(30, 30, Outcome.CORRECT), (50, 30, Outcome.TOO_HIGH), (10, 30, Outcome.TOO_LOW)],
)
def test_compare(guess, secret, outcome):
    assert compare(guess, secret) is outcome


def test_levels_and_attempts():
    assert Level("F") is Level.EASY
    assert Level.EASY.attempts is None
    assert Level.MEDIUM.attempts == 7
    assert Level.HARD.attempts == 5
    with pytest.raises(ValueError):
        Level("X")


def test_easy_game_until_found():
    out = io.StringIO()
    assert play(30, Level.EASY, [50, 10, 30], out) is True
    text = out.getvalue()
    assert "Parabens voce acertou!" in text
    assert "O seu chute eh maior que numero secreto!" in text
    assert "O seu chute eh menor que o numero secreto!" in text
    assert "Tentativa" not in text


def test_hard_game_lost_after_five():
    out = io.StringIO()
    supply = iter([1] * 6)
    assert play(99, "D", supply, out) is False
    text = out.getvalue()
    assert "Tentativa 5 de 5" in text
    assert "Tentativa 6" not in text
    assert text.endswith("Voce perdeu!\n")
    assert list(supply) == [1]


def test_medium_game_allows_seven():
    out = io.StringIO()
    guesses = [0, 1, 2, 3, 4, 5, 6]
    assert play(6, Level.MEDIUM, guesses, out) is True
    assert "Tentativa 7 de 7" in out.getvalue()
    assert "Voce perdeu!" not in out.getvalue()


def test_running_out_of_guesses():
    out = io.StringIO()
    assert play(5, Level.EASY, [1, 2], out) is False
    assert out.getvalue().count("Qual o numero do chute? : ") == 3


def test_main_easy_finds_number(monkeypatch, capsys):
    numbers = " ".join(str(n) for n in range(100))
    monkeypatch.setattr("sys.stdin", io.StringIO("X\nF\n" + numbers + "\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.count("Facil(F), Medio(M), Dificil(D) ?") == 2
    assert "Parabens voce acertou!" in out


def test_main_without_level(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 1
    assert "Bem-vindos ao jogo da adivinhacao" in capsys.readouterr().out