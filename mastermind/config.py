"""
Single place to:
- Load env vars from .env if present (dev convenience)
- Read and check the few knobs the game has
- Hand them out as one frozen Settings object
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .errors import ConfigurationError

RANDOM_SOURCES = ("random.org", "local")


@dataclass(frozen=True)
class Settings:
    app_env: str = "local"
    max_guesses: int = 12
    random_source: str = "random.org"
    random_timeout: float = 3.0
    log_level: str = "INFO"

    @property
    def use_remote_random(self) -> bool:
        return self.random_source == "random.org"


def load_settings() -> Settings:
    load_dotenv()

    raw_max = os.getenv("MASTERMIND_MAX_GUESSES", "12")
    try:
        max_guesses = int(raw_max)
    except ValueError:
        raise ConfigurationError(f"MASTERMIND_MAX_GUESSES must be an integer, got {raw_max!r}") from None
    if max_guesses <= 0:
        raise ConfigurationError(f"MASTERMIND_MAX_GUESSES must be positive, got {max_guesses}")

    random_source = os.getenv("MASTERMIND_RANDOM_SOURCE", "random.org")
    if random_source not in RANDOM_SOURCES:
        raise ConfigurationError(
            f"MASTERMIND_RANDOM_SOURCE must be one of {', '.join(RANDOM_SOURCES)}, got {random_source!r}"
        )

    raw_timeout = os.getenv("MASTERMIND_RANDOM_TIMEOUT", "3.0")
    try:
        random_timeout = float(raw_timeout)
    except ValueError:
        raise ConfigurationError(f"MASTERMIND_RANDOM_TIMEOUT must be a number, got {raw_timeout!r}") from None

    return Settings(
        app_env=os.getenv("APP_ENV", "local"),
        max_guesses=max_guesses,
        random_source=random_source,
        random_timeout=random_timeout,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
