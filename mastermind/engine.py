"""
Pure game logic (no HTTP, no storage, no console).
We compute two feedback numbers for each guess:
- strong: how many indices are exactly correct (right peg, right place)
- weak: how many of the remaining guess pegs appear somewhere else in the
  remaining secret pegs (each secret peg can be matched only once)

Duplicates are allowed in both the secret and the guess.
"""

import random
from collections.abc import Sequence
from typing import NamedTuple, Optional

from .errors import NonIntegerElement, NotASequence, OutOfRangeElement, WrongLength
from .types import CODE_LENGTH, MAX_PEG, MIN_PEG, Code


class Feedback(NamedTuple):
    strong: int
    weak: int

    @property
    def solved(self) -> bool:
        return self.strong == CODE_LENGTH


def validate_code(code) -> Code:
    """
    Check the shape of a code and return an immutable copy of it.

    Checks run in a fixed order so the error says what is wrong first:
    not a sequence -> wrong length -> non-integer peg -> peg out of range.
    """

    # Strings are sequences too, but "1234" is not a code
    if not isinstance(code, Sequence) or isinstance(code, (str, bytes, bytearray)):
        raise NotASequence(f"expected a sequence of {CODE_LENGTH} pegs, got {type(code).__name__}")

    if len(code) != CODE_LENGTH:
        raise WrongLength(f"expected {CODE_LENGTH} pegs, got {len(code)}")

    for peg in code:
        # bool is a subclass of int; True is not a peg
        if isinstance(peg, bool) or not isinstance(peg, int):
            raise NonIntegerElement(f"pegs must be integers, found {peg!r}")

    for peg in code:
        if peg < MIN_PEG or peg > MAX_PEG:
            raise OutOfRangeElement(f"pegs must be between {MIN_PEG} and {MAX_PEG}, found {peg}")

    return tuple(code)


def score_guess(secret, guess) -> Feedback:
    """
    Example:
      secret = [1, 1, 2, 3]
      guess  = [1, 1, 1, 1]
      strong = 2  (first two positions)
      weak   = 0  (both 1s in the secret are already used up)
      Returns Feedback(strong=2, weak=0)
    """

    # 0. Validate both codes before touching anything
    secret_left = list(validate_code(secret))
    guess_left = list(validate_code(guess))

    # 1. Strong matches: consume both pegs so they can't count as weak later
    strong = 0
    i = 0
    while i < CODE_LENGTH:
        if guess_left[i] == secret_left[i]:
            strong += 1
            secret_left[i] = None
            guess_left[i] = None
        i += 1

    # 2. Weak matches: each remaining guess peg takes the first free secret
    #    peg with the same value
    weak = 0
    for peg in guess_left:
        if peg is None:
            continue
        j = 0
        while j < CODE_LENGTH:
            if secret_left[j] is not None and secret_left[j] == peg:
                weak += 1
                secret_left[j] = None
                break
            j += 1

    return Feedback(strong, weak)


def random_code(rng: Optional[random.Random] = None) -> Code:
    """Uniformly random code; pass an rng for reproducible games."""
    rng = rng or random.SystemRandom()
    return tuple(rng.randint(MIN_PEG, MAX_PEG) for _ in range(CODE_LENGTH))
