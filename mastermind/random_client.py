"""
- HTTP call with clear fallback
Get 4 random pegs (1..6) from random.org. If anything goes wrong (no internet,
timeout, bad response), we fall back to a local secure random generator so the game still works.
"""

import logging
from secrets import randbelow
from typing import List

import requests

from .types import CODE_LENGTH, MAX_PEG, MIN_PEG

logger = logging.getLogger(__name__)

RANDOM_URL = "https://www.random.org/integers/"


def fetch_code(length: int = CODE_LENGTH, timeout_seconds: float = 3.0, use_remote: bool = True) -> List[int]:
    if not use_remote:
        return _local_code(length)

    # Parameters to send to random.org
    params = {
        "num": length,     # how many numbers we want
        "min": MIN_PEG,    # smallest allowed peg
        "max": MAX_PEG,    # largest allowed peg
        "col": 1,          # one number per line
        "base": 10,        # normal decimal numbers
        "format": "plain", # plain text response
        "rnd": "new",      # always generate new numbers
    }

    try:
        # keep network quick; if it takes too long, we will just fallback
        response = requests.get(RANDOM_URL, params=params, timeout=timeout_seconds)

        # If the response was not 200 OK, this will raise an error
        response.raise_for_status()

        # The body looks like:
        #   3\n1\n6\n2\n
        pegs = [int(line) for line in response.text.splitlines() if line.strip() != ""]

        if len(pegs) != length:
            raise ValueError(f"random.org returned {len(pegs)} values, expected {length}.")

        for peg in pegs:
            if peg < MIN_PEG or peg > MAX_PEG:
                raise ValueError(f"random.org number out of range {MIN_PEG}..{MAX_PEG}.")

        return pegs

    except (requests.RequestException, ValueError) as exc:
        logger.warning("random.org unavailable (%s); using local secure random", exc)
        return _local_code(length)


def _local_code(length: int) -> List[int]:
    # randbelow(6) gives 0..5, shift up to 1..6
    return [MIN_PEG + randbelow(MAX_PEG - MIN_PEG + 1) for _ in range(length)]
