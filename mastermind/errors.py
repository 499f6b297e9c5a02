"""
Error taxonomy.

Everything the core raises derives from MastermindError so the outer layers
(HTTP routes, console driver) can map errors to responses in one place.
ValidationError is also a ValueError; code that only knows "bad input" can
keep catching ValueError.
"""


class MastermindError(Exception):
    """Base class for every error raised by this package."""


# --- Validation: a Code-shaped input broke its invariants ---

class ValidationError(MastermindError, ValueError):
    reason = "invalid_code"


class NotASequence(ValidationError):
    reason = "not_a_sequence"


class WrongLength(ValidationError):
    reason = "wrong_length"


class NonIntegerElement(ValidationError):
    reason = "non_integer_element"


class OutOfRangeElement(ValidationError):
    reason = "out_of_range_element"


# --- Configuration ---

class ConfigurationError(MastermindError):
    reason = "bad_configuration"


class NonPositiveGuessLimit(ConfigurationError):
    reason = "non_positive_guess_limit"


# --- State machine ---

class InvalidStateError(MastermindError):
    reason = "invalid_state"


class GameAlreadyEnded(InvalidStateError):
    reason = "game_already_ended"


class SecretStillHidden(InvalidStateError):
    reason = "secret_still_hidden"


class GameNotFound(MastermindError, LookupError):
    reason = "game_not_found"
