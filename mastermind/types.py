"""
Labels for clarity.
"""

from typing import Literal, Tuple

Peg = int  # 1 -> 6
Code = Tuple[Peg, ...]  # always 4 pegs once validated
Phase = Literal["in_progress", "solved", "exhausted"]

CODE_LENGTH = 4
MIN_PEG = 1
MAX_PEG = 6

IN_PROGRESS: Phase = "in_progress"
SOLVED: Phase = "solved"
EXHAUSTED: Phase = "exhausted"
TERMINAL_PHASES = (SOLVED, EXHAUSTED)
