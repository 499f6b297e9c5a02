"""
Command-line interface (text-based play)
- Human adapters read codes from a prompt; the random players need no input
- The board is redrawn after every guess; the secret is shown at the end
- Exit status: 0 solved, 1 out of guesses, 2 error or input closed
"""

import argparse
import sys
from typing import Callable, List, Optional, Sequence

from .config import load_settings
from .engine import Feedback, validate_code
from .errors import MastermindError, ValidationError
from .logging_config import setup_logging
from .play import play_game
from .players import RandomCodeGuesser, RandomCodeMaker
from .random_client import fetch_code
from .session import GameSession, HistoryEntry
from .types import CODE_LENGTH, MAX_PEG, MIN_PEG, SOLVED, Code


def parse_code(text: str) -> List:
    """
    Turn '1234', '1 2 3 4' or '1,2,3,4' into a list of pegs.
    Anything that isn't a digit is kept as-is so the engine can reject it.
    """
    text = text.strip()
    if " " in text or "," in text:
        parts = text.replace(",", " ").split()
    else:
        parts = list(text)

    pegs = []
    for part in parts:
        try:
            pegs.append(int(part))
        except ValueError:
            pegs.append(part)
    return pegs


def render_history(history: Sequence[HistoryEntry]) -> str:
    line = "+" + "-" * 13 + "+" + "-" * 12 + "+"
    rows = [line, "| Guess       | Feedback   |", line]
    for entry in history:
        pegs = " ".join(str(p) for p in entry.guess)
        marks = "*" * entry.feedback.strong + "." * entry.feedback.weak
        rows.append(f"| {pegs:<11} | {marks:<10} |")
    rows.append(line)
    return "\n".join(rows)


class HumanCodeMaker:
    def __init__(self, read: Callable[[str], str] = input, write: Callable[[str], None] = print) -> None:
        self._read = read
        self._write = write

    def create_code(self) -> Code:
        while True:
            text = self._read(f"Enter a secret of {CODE_LENGTH} pegs ({MIN_PEG}-{MAX_PEG}): ")
            try:
                return validate_code(parse_code(text))
            except ValidationError as exc:
                self._write(f"Invalid code: {exc}")


class HumanCodeGuesser:
    def __init__(self, read: Callable[[str], str] = input, write: Callable[[str], None] = print) -> None:
        self._read = read
        self._write = write

    def next_guess(self, history: Sequence[HistoryEntry], guesses_remaining: int) -> Code:
        if history:
            self._write(render_history(history))
        self._write(f"Guesses left: {guesses_remaining}")
        # validation happens in the session; a bad guess comes straight back here
        return parse_code(self._read("Your guess: "))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mastermind", description="Play Mastermind in the terminal.")
    parser.add_argument("--maker", choices=("random", "human"), default="random",
                        help="who creates the secret code")
    parser.add_argument("--guesser", choices=("human", "random"), default="human",
                        help="who guesses")
    parser.add_argument("--max-guesses", type=int, default=None,
                        help="guess budget (default: MASTERMIND_MAX_GUESSES or 12)")
    return parser


def main(argv: Optional[List[str]] = None, read: Callable[[str], str] = input,
         write: Callable[[str], None] = print) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
    except MastermindError as exc:
        write(f"Configuration error: {exc}")
        return 2
    setup_logging(settings.log_level)

    if args.maker == "human":
        maker = HumanCodeMaker(read, write)
    else:
        maker = RandomCodeMaker(
            fetch=lambda: fetch_code(timeout_seconds=settings.random_timeout,
                                     use_remote=settings.use_remote_random)
        )

    if args.guesser == "random":
        guesser = RandomCodeGuesser()
    else:
        guesser = HumanCodeGuesser(read, write)

    def show_feedback(guess: Code, feedback: Feedback, session: GameSession) -> None:
        write(f"{' '.join(str(p) for p in guess)}  ->  strong={feedback.strong} weak={feedback.weak}")

    def show_rejected(exc: ValidationError) -> None:
        write(f"Invalid guess: {exc}")

    write("=== Mastermind ===")
    max_guesses = args.max_guesses if args.max_guesses is not None else settings.max_guesses
    try:
        session = play_game(maker, guesser, max_guesses, on_feedback=show_feedback, on_rejected=show_rejected)
    except MastermindError as exc:
        write(f"Error: {exc}")
        return 2
    except EOFError:
        # stdin closed or piped input ran out
        write("Input closed; game abandoned.")
        return 2

    write(render_history(session.history_snapshot()))
    secret = " ".join(str(p) for p in session.reveal_secret())
    if session.phase == SOLVED:
        write(f"Code cracked in {session.guesses_taken} guess(es)! The secret was: {secret}")
        return 0
    write(f"No more guesses left. The secret was: {secret}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
