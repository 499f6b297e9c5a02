"""
Player roles.

Anything that can make a secret is a CodeMaker; anything that can come up with
the next guess is a CodeGuesser. A human at a prompt, a random generator or a
future solver all plug in the same way; no base class needed.
"""

import random
from typing import Callable, List, Optional, Protocol, Sequence

from .engine import random_code, validate_code
from .random_client import fetch_code
from .session import HistoryEntry
from .types import Code


class CodeMaker(Protocol):
    def create_code(self) -> Code:
        ...


class CodeGuesser(Protocol):
    def next_guess(self, history: Sequence[HistoryEntry], guesses_remaining: int) -> Code:
        ...


class RandomCodeMaker:
    """Secret from random.org (or the local fallback)."""

    def __init__(self, fetch: Callable[[], List[int]] = fetch_code) -> None:
        self._fetch = fetch

    def create_code(self) -> Code:
        # still validated: the source is outside our control
        return validate_code(self._fetch())


class FixedCodeMaker:
    """Always hands out the same, already validated secret."""

    def __init__(self, code: Code) -> None:
        self._code = validate_code(code)

    def create_code(self) -> Code:
        return self._code


class RandomCodeGuesser:
    """The 'computer' player: ignores the history and guesses at random."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng

    def next_guess(self, history: Sequence[HistoryEntry], guesses_remaining: int) -> Code:
        return random_code(self._rng)
