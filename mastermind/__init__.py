"""
Mastermind: scoring engine, game session and the thin layers that drive them.
"""

from .engine import Feedback, random_code, score_guess, validate_code
from .errors import (
    ConfigurationError,
    GameAlreadyEnded,
    GameNotFound,
    InvalidStateError,
    MastermindError,
    NonIntegerElement,
    NonPositiveGuessLimit,
    NotASequence,
    OutOfRangeElement,
    SecretStillHidden,
    ValidationError,
    WrongLength,
)
from .session import GameSession, HistoryEntry

__all__ = [
    "Feedback",
    "random_code",
    "score_guess",
    "validate_code",
    "GameSession",
    "HistoryEntry",
    "MastermindError",
    "ValidationError",
    "NotASequence",
    "WrongLength",
    "NonIntegerElement",
    "OutOfRangeElement",
    "ConfigurationError",
    "NonPositiveGuessLimit",
    "InvalidStateError",
    "GameAlreadyEnded",
    "SecretStillHidden",
    "GameNotFound",
]
