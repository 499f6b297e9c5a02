"""
Driver loop: code-maker makes a secret, code-guesser guesses until the game ends.
"""

import logging
from typing import Callable, Optional

from .engine import Feedback
from .errors import ValidationError
from .players import CodeGuesser, CodeMaker
from .session import GameSession
from .types import Code

logger = logging.getLogger(__name__)


def play_game(
    code_maker: CodeMaker,
    code_guesser: CodeGuesser,
    max_guesses: int,
    on_feedback: Optional[Callable[[Code, Feedback, GameSession], None]] = None,
    on_rejected: Optional[Callable[[ValidationError], None]] = None,
) -> GameSession:
    session = GameSession(code_maker.create_code(), max_guesses)

    while not session.is_over:
        guess = code_guesser.next_guess(session.history_snapshot(), session.guesses_remaining)
        try:
            feedback = session.submit_guess(guess)
        except ValidationError as exc:
            # rejected guesses don't use up the budget; just ask again
            logger.warning("guess rejected (%s): %s", exc.reason, exc)
            if on_rejected is not None:
                on_rejected(exc)
            continue

        if on_feedback is not None:
            on_feedback(tuple(guess), feedback, session)

    return session
