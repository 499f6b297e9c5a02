"""
In-memory store
Holds the live GameSessions of this process, keyed by id, plus a scoreboard.
Nothing survives a restart. Finished games stay until remove() or
evict_finished() drops them; a long-running server should call one of those.
"""

from dataclasses import dataclass
from threading import RLock
from typing import Dict, Optional, Set
from uuid import uuid4

from .engine import Feedback
from .errors import GameNotFound
from .session import GameSession
from .types import SOLVED, Code


@dataclass
class Stats:
    games_started: int = 0
    games_solved: int = 0
    games_exhausted: int = 0

    current_streak: int = 0
    best_streak: int = 0

    total_guesses_in_solves: int = 0
    fastest_solve: Optional[int] = None

    @property
    def average_guesses_to_solve(self) -> Optional[float]:
        if self.games_solved == 0:
            return None
        return self.total_guesses_in_solves / self.games_solved


class GameStore:
    def __init__(self) -> None:
        self._games: Dict[str, GameSession] = {}
        self._counted: Set[str] = set()
        self._lock = RLock()
        self._stats = Stats()

    def create(self, secret: Code, max_guesses: int) -> str:
        # GameSession validates; nothing is stored if it raises
        session = GameSession(secret, max_guesses)
        new_id = str(uuid4())
        with self._lock:
            self._games[new_id] = session
            self._stats.games_started += 1
        return new_id

    def get(self, game_id: str) -> GameSession:
        with self._lock:
            session = self._games.get(game_id)
        if session is None:
            raise GameNotFound(f"no game with id {game_id!r}")
        return session

    def guess(self, game_id: str, attempt: Code) -> Feedback:
        session = self.get(game_id)
        # The session serialises its own guesses; the store lock is only taken
        # for the scoreboard, and a game is counted once when it ends.
        feedback = session.submit_guess(attempt)
        if session.is_over:
            with self._lock:
                if game_id not in self._counted:
                    self._counted.add(game_id)
                    self._update_stats_on_end(session)
        return feedback

    def remove(self, game_id: str) -> None:
        with self._lock:
            if self._games.pop(game_id, None) is None:
                raise GameNotFound(f"no game with id {game_id!r}")
            self._counted.discard(game_id)

    def evict_finished(self) -> int:
        """Drop every finished game and return how many went."""
        with self._lock:
            finished = [gid for gid, session in self._games.items() if session.is_over]
            for gid in finished:
                del self._games[gid]
                self._counted.discard(gid)
        return len(finished)

    def _update_stats_on_end(self, session: GameSession) -> None:
        if session.phase == SOLVED:
            self._stats.games_solved += 1

            self._stats.current_streak += 1
            if self._stats.current_streak > self._stats.best_streak:
                self._stats.best_streak = self._stats.current_streak

            guesses_used = session.guesses_taken
            self._stats.total_guesses_in_solves += guesses_used
            if self._stats.fastest_solve is None or guesses_used < self._stats.fastest_solve:
                self._stats.fastest_solve = guesses_used
        else:
            self._stats.games_exhausted += 1
            self._stats.current_streak = 0

    def get_stats(self) -> Stats:
        with self._lock:
            return Stats(**vars(self._stats))

    def reset_stats(self) -> None:
        with self._lock:
            self._stats = Stats()
