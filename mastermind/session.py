"""
One game of Mastermind.

A GameSession owns the secret, the guess counter and the history. The only
way to move it forward is submit_guess(); everything else just looks.
"""

import logging
from dataclasses import dataclass
from threading import RLock
from typing import Tuple

from .engine import Feedback, score_guess, validate_code
from .errors import GameAlreadyEnded, NonPositiveGuessLimit, SecretStillHidden
from .types import EXHAUSTED, IN_PROGRESS, SOLVED, TERMINAL_PHASES, Code, Phase

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HistoryEntry:
    guess: Code
    feedback: Feedback


class GameSession:
    def __init__(self, secret: Code, max_guesses: int) -> None:
        self._secret = validate_code(secret)

        if isinstance(max_guesses, bool) or not isinstance(max_guesses, int) or max_guesses <= 0:
            raise NonPositiveGuessLimit(f"max_guesses must be a positive integer, got {max_guesses!r}")

        self._max_guesses = max_guesses
        self._guesses_taken = 0
        self._history: list[HistoryEntry] = []
        self._phase: Phase = IN_PROGRESS
        # submit_guess reads and writes several fields; keep it atomic per session
        self._lock = RLock()

    def __repr__(self) -> str:
        # never show the secret
        return (
            f"GameSession(phase={self._phase!r}, "
            f"guesses_taken={self._guesses_taken}, max_guesses={self._max_guesses})"
        )

    # --- Mutation ---

    def submit_guess(self, guess: Code) -> Feedback:
        """
        Score one guess and advance the game.

        Raises GameAlreadyEnded once the game is solved or exhausted, and a
        ValidationError for a malformed guess. Either way nothing changes.
        """
        with self._lock:
            if self._phase in TERMINAL_PHASES:
                raise GameAlreadyEnded(f"game is already {self._phase}; no more guesses allowed")

            attempt = validate_code(guess)
            feedback = score_guess(self._secret, attempt)

            self._history.append(HistoryEntry(guess=attempt, feedback=feedback))
            self._guesses_taken += 1

            if feedback.solved:
                self._phase = SOLVED
            elif self._guesses_taken >= self._max_guesses:
                self._phase = EXHAUSTED

            logger.debug(
                "guess %d/%d scored strong=%d weak=%d",
                self._guesses_taken, self._max_guesses, feedback.strong, feedback.weak,
            )
            if self._phase != IN_PROGRESS:
                logger.info("game %s after %d guess(es)", self._phase, self._guesses_taken)

            return feedback

    # --- Observation ---

    @property
    def phase(self) -> Phase:
        with self._lock:
            return self._phase

    @property
    def is_over(self) -> bool:
        return self.phase in TERMINAL_PHASES

    @property
    def max_guesses(self) -> int:
        return self._max_guesses

    @property
    def guesses_taken(self) -> int:
        with self._lock:
            return self._guesses_taken

    @property
    def guesses_remaining(self) -> int:
        with self._lock:
            return self._max_guesses - self._guesses_taken

    def history_snapshot(self) -> Tuple[HistoryEntry, ...]:
        # Entries are frozen and hold tuples, so a tuple of them is safe to hand out
        with self._lock:
            return tuple(self._history)

    def reveal_secret(self) -> Code:
        """End-of-game disclosure only; raises SecretStillHidden before that."""
        with self._lock:
            if self._phase not in TERMINAL_PHASES:
                raise SecretStillHidden("the secret is only revealed once the game is over")
            return self._secret
