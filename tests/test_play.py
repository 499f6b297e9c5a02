"""
Testing the driver loop with scripted players.
"""

import random

from mastermind.play import play_game
from mastermind.players import FixedCodeMaker, RandomCodeGuesser, RandomCodeMaker


class ScriptedGuesser:
    def __init__(self, guesses):
        self._guesses = list(guesses)
        self.seen_remaining = []
        self.seen_history_lengths = []

    def next_guess(self, history, guesses_remaining):
        self.seen_remaining.append(guesses_remaining)
        self.seen_history_lengths.append(len(history))
        return self._guesses.pop(0)


def test_play_game_until_solved():
    guesser = ScriptedGuesser([[1, 1, 1, 1], [2, 4, 6, 1]])
    session = play_game(FixedCodeMaker([2, 4, 6, 1]), guesser, max_guesses=12)

    assert session.phase == "solved"
    assert session.guesses_taken == 2
    assert guesser.seen_remaining == [12, 11]
    assert guesser.seen_history_lengths == [0, 1]
    assert session.reveal_secret() == (2, 4, 6, 1)


def test_play_game_until_exhausted():
    guesser = ScriptedGuesser([[6, 6, 6, 6]] * 3)
    session = play_game(FixedCodeMaker([1, 2, 3, 4]), guesser, max_guesses=3)
    assert session.phase == "exhausted"
    assert session.guesses_remaining == 0


def test_play_game_asks_again_after_invalid_guess():
    guesser = ScriptedGuesser([[1, 2, 3], [1, 2, 3, 9], "1234", [1, 2, 3, 4]])
    rejected = []
    scored = []

    session = play_game(
        FixedCodeMaker([1, 2, 3, 4]),
        guesser,
        max_guesses=2,
        on_feedback=lambda guess, feedback, s: scored.append((guess, feedback)),
        on_rejected=lambda exc: rejected.append(exc.reason),
    )

    assert rejected == ["wrong_length", "out_of_range_element", "not_a_sequence"]
    assert scored == [((1, 2, 3, 4), (4, 0))]
    assert session.phase == "solved"
    assert session.guesses_taken == 1


def test_random_players_always_finish():
    maker = RandomCodeMaker(fetch=lambda: [3, 1, 4, 1])
    session = play_game(maker, RandomCodeGuesser(random.Random(3)), max_guesses=12)
    assert session.is_over
    assert 1 <= session.guesses_taken <= 12
