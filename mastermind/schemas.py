"""
Pydantic models for the HTTP layer.
- Define the structure of API requests and responses.
- Peg values are NOT range-checked here: the engine does that, so the API and
  the console reject bad codes with the same errors.
"""

from typing import Any, List, Literal, Optional

from pydantic import BaseModel, Field

PhaseOut = Literal["in_progress", "solved", "exhausted"]


# 1. Start a game
class NewGameRequest(BaseModel):
    max_guesses: Optional[int] = Field(None, description="Guess budget; server default when omitted")


class NewGameResponse(BaseModel):
    game_id: str = Field(..., description="Unique ID for the game; secret is never returned")
    max_guesses: int = Field(..., description="Guess budget for this game")
    guesses_remaining: int = Field(..., description="How many guesses remain")
    phase: PhaseOut = Field(..., description="Current phase of the game")


# 2. A player's guess
class GuessRequest(BaseModel):
    guess: Any = Field(..., description="Exactly 4 integer pegs, each between 1 and 6.")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"guess": [1, 2, 3, 4]},
            ]
        }
    }


# 3. Feedback for a single guess
class FeedbackOut(BaseModel):
    strong: int = Field(..., description="Right peg, right position")
    weak: int = Field(..., description="Right peg, wrong position")


class HistoryEntryOut(BaseModel):
    guess: List[int] = Field(..., description="The submitted guess")
    feedback: FeedbackOut


# 4. Overall state of a game
class GameStateOut(BaseModel):
    game_id: str
    phase: PhaseOut
    max_guesses: int
    guesses_taken: int
    guesses_remaining: int
    history: List[HistoryEntryOut] = Field(..., description="All guesses so far, oldest first")


# 5. Result of a guess
class GuessResponse(BaseModel):
    guess: List[int] = Field(..., description="The guess that was scored")
    feedback: FeedbackOut
    phase: PhaseOut
    guesses_remaining: int
    secret: Optional[List[int]] = Field(None, description="Only revealed once the game is over")
    note: Optional[str] = None


class SecretOut(BaseModel):
    secret: List[int]
    phase: PhaseOut


# 6. Stateless scoring
class ScoreRequest(BaseModel):
    secret: Any
    guess: Any


# 7. Scoreboard
class StatsOut(BaseModel):
    games_started: int = Field(..., description="Total games started by this process")
    games_solved: int
    games_exhausted: int
    current_streak: int = Field(..., description="Current consecutive solves")
    best_streak: int
    average_guesses_to_solve: Optional[float] = None
    fastest_solve: Optional[int] = Field(None, description="Fewest guesses taken to solve a game")

