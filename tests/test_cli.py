"""
Testing the console layer with fake input/output.
"""

import pytest

import mastermind.cli as cli
from mastermind.cli import HumanCodeGuesser, HumanCodeMaker, main, parse_code, render_history
from mastermind.engine import Feedback
from mastermind.session import HistoryEntry


def feed(lines):
    it = iter(lines)
    return lambda prompt="": next(it)


@pytest.fixture(autouse=True)
def offline(monkeypatch):
    monkeypatch.setenv("MASTERMIND_RANDOM_SOURCE", "local")
    monkeypatch.setenv("MASTERMIND_MAX_GUESSES", "12")


@pytest.mark.parametrize(
    "text, pegs",
    [
        ("1234", [1, 2, 3, 4]),
        (" 1 2 3 4 ", [1, 2, 3, 4]),
        ("1,2,3,4", [1, 2, 3, 4]),
        ("12x4", [1, 2, "x", 4]),
        ("", []),
    ],
)
def test_parse_code(text, pegs):
    assert parse_code(text) == pegs


def test_render_history_marks_strong_and_weak():
    board = render_history([HistoryEntry(guess=(1, 2, 3, 4), feedback=Feedback(1, 2))])
    assert "1 2 3 4" in board
    assert "*.." in board


def test_human_code_maker_retries_until_valid():
    output = []
    maker = HumanCodeMaker(read=feed(["123", "1239", "6543"]), write=output.append)
    assert maker.create_code() == (6, 5, 4, 3)
    assert len(output) == 2


def test_human_code_guesser_shows_board():
    output = []
    guesser = HumanCodeGuesser(read=feed(["5 5 6 6"]), write=output.append)
    history = (HistoryEntry(guess=(1, 1, 1, 1), feedback=Feedback(0, 1)),)
    assert guesser.next_guess(history, 3) == [5, 5, 6, 6]
    assert "Guesses left: 3" in output
    assert any("1 1 1 1" in line for line in output)


def test_main_human_guesser_solves(monkeypatch):
    monkeypatch.setattr(cli, "fetch_code", lambda **kwargs: [2, 4, 6, 1])
    output = []
    code = main(["--max-guesses", "3"], read=feed(["1111", "abc", "2461"]), write=output.append)

    assert code == 0
    assert any(line.startswith("Invalid guess") for line in output)
    assert output[-1] == "Code cracked in 2 guess(es)! The secret was: 2 4 6 1"


class AlwaysGuesses:
    def __init__(self, code):
        self._code = code

    def next_guess(self, history, guesses_remaining):
        return self._code


@pytest.mark.parametrize(
    "computer_guess, exit_code, last_line",
    [
        ([6, 6, 6, 6], 0, "Code cracked in 1 guess(es)! The secret was: 6 6 6 6"),
        ([1, 1, 1, 1], 1, "No more guesses left. The secret was: 6 6 6 6"),
    ],
)
def test_main_human_maker_computer_guesser(monkeypatch, computer_guess, exit_code, last_line):
    monkeypatch.setattr(cli, "RandomCodeGuesser", lambda: AlwaysGuesses(computer_guess))
    output = []
    code = main(
        ["--maker", "human", "--guesser", "random", "--max-guesses", "1"],
        read=feed(["6 6 6 6"]),
        write=output.append,
    )
    assert code == exit_code
    assert output[-1] == last_line


def test_main_stops_cleanly_when_input_closes(monkeypatch):
    monkeypatch.setattr(cli, "fetch_code", lambda **kwargs: [1, 2, 3, 4])

    def closed(prompt=""):
        raise EOFError

    output = []
    assert main([], read=closed, write=output.append) == 2
    assert output[-1] == "Input closed; game abandoned."


def test_main_reports_bad_guess_limit():
    output = []
    code = main(["--guesser", "random", "--max-guesses", "0"], read=feed([]), write=output.append)
    assert code == 2
    assert output[-1].startswith("Error:")


def test_main_reports_bad_configuration(monkeypatch):
    monkeypatch.setenv("MASTERMIND_MAX_GUESSES", "lots")
    output = []
    assert main([], read=feed([]), write=output.append) == 2
    assert output[0].startswith("Configuration error")
