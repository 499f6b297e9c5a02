'''
In-memory Mastermind API

Endpoints:
POST /games                   -> start a game
GET  /games/{id}              -> read phase & history (never the secret)
POST /games/{id}/guess        -> submit a guess
POST /games/{id}/auto-guess   -> let the computer guess (random)
GET  /games/{id}/secret       -> reveal the secret once the game is over
DELETE /games/{id}            -> forget one game
DELETE /games                 -> forget every finished game
POST /score                   -> score a guess against a secret, no game needed

Extras:
GET  /stats                   -> scoreboard
POST /stats/reset             -> reset scoreboard

Games live in process memory only; a restart forgets them.
'''

import logging
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from .config import load_settings
from .engine import Feedback, score_guess
from .errors import (
    ConfigurationError,
    GameNotFound,
    InvalidStateError,
    MastermindError,
    ValidationError,
)
from .logging_config import setup_logging
from .players import RandomCodeGuesser, RandomCodeMaker
from .random_client import fetch_code
from .schemas import (
    FeedbackOut,
    GameStateOut,
    GuessRequest,
    GuessResponse,
    HistoryEntryOut,
    NewGameRequest,
    NewGameResponse,
    ScoreRequest,
    SecretOut,
    StatsOut,
)
from .session import GameSession
from .store import GameStore
from .types import Code

settings = load_settings()
setup_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Mastermind API", version="3.0.0")

# --- Dev convenience: allow everything locally so the docs and a front-end work easily ---
if settings.app_env == "local":
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"]
    )

_store = GameStore()


# One store per process; tests override this dependency with a fresh one
def get_store() -> GameStore:
    return _store


def new_secret() -> Code:
    maker = RandomCodeMaker(
        fetch=lambda: fetch_code(
            timeout_seconds=settings.random_timeout,
            use_remote=settings.use_remote_random,
        )
    )
    return maker.create_code()


def _http_error(exc: MastermindError) -> HTTPException:
    if isinstance(exc, GameNotFound):
        status = 404
    elif isinstance(exc, InvalidStateError):
        status = 409
    else:
        # ValidationError, ConfigurationError: the caller sent something bad
        status = 400
    return HTTPException(status_code=status, detail={"error": exc.reason, "message": str(exc)})


def _feedback_out(feedback: Feedback) -> FeedbackOut:
    return FeedbackOut(strong=feedback.strong, weak=feedback.weak)


def _guess_response(session: GameSession, guess: Code, feedback: Feedback) -> GuessResponse:
    # When the game ends, include the secret in the response
    secret = None
    note = None
    if session.is_over:
        secret = list(session.reveal_secret())
        note = f"Game {session.phase}. No more guesses allowed."
    return GuessResponse(
        guess=list(guess),
        feedback=_feedback_out(feedback),
        phase=session.phase,
        guesses_remaining=session.guesses_remaining,
        secret=secret,
        note=note,
    )


# ---------------- Routes ----------------

@app.post("/games", response_model=NewGameResponse, summary="Start a new game")
def start_game(
    payload: Optional[NewGameRequest] = None,
    store: GameStore = Depends(get_store),
) -> NewGameResponse:
    max_guesses = settings.max_guesses
    if payload is not None and payload.max_guesses is not None:
        max_guesses = payload.max_guesses

    try:
        game_id = store.create(new_secret(), max_guesses)
    except ConfigurationError as exc:
        raise _http_error(exc)

    session = store.get(game_id)
    logger.info("started game %s with %d guesses", game_id, max_guesses)
    return NewGameResponse(
        game_id=game_id,
        max_guesses=session.max_guesses,
        guesses_remaining=session.guesses_remaining,
        phase=session.phase,
    )


@app.get("/games/{game_id}", response_model=GameStateOut, summary="Get current game state")
def get_game(
    game_id: str,
    store: GameStore = Depends(get_store),
) -> GameStateOut:
    try:
        session = store.get(game_id)
    except GameNotFound as exc:
        raise _http_error(exc)

    history = session.history_snapshot()
    return GameStateOut(
        game_id=game_id,
        phase=session.phase,
        max_guesses=session.max_guesses,
        guesses_taken=session.guesses_taken,
        guesses_remaining=session.guesses_remaining,
        history=[
            HistoryEntryOut(guess=list(entry.guess), feedback=_feedback_out(entry.feedback))
            for entry in history
        ],
    )


@app.post("/games/{game_id}/guess", response_model=GuessResponse, summary="Submit a guess")
def submit_guess(
    game_id: str,
    payload: GuessRequest,
    store: GameStore = Depends(get_store),
) -> GuessResponse:
    try:
        feedback = store.guess(game_id, payload.guess)
        session = store.get(game_id)
    except MastermindError as exc:
        raise _http_error(exc)
    return _guess_response(session, payload.guess, feedback)


@app.post("/games/{game_id}/auto-guess", response_model=GuessResponse, summary="Let the computer guess")
def auto_guess(
    game_id: str,
    store: GameStore = Depends(get_store),
) -> GuessResponse:
    try:
        session = store.get(game_id)
        guess = RandomCodeGuesser().next_guess(session.history_snapshot(), session.guesses_remaining)
        feedback = store.guess(game_id, guess)
    except MastermindError as exc:
        raise _http_error(exc)
    return _guess_response(session, guess, feedback)


@app.get("/games/{game_id}/secret", response_model=SecretOut, summary="Reveal the secret of a finished game")
def reveal_secret(
    game_id: str,
    store: GameStore = Depends(get_store),
) -> SecretOut:
    try:
        session = store.get(game_id)
        secret = session.reveal_secret()
    except MastermindError as exc:
        raise _http_error(exc)
    return SecretOut(secret=list(secret), phase=session.phase)


@app.post("/score", response_model=FeedbackOut, summary="Score a guess against a secret")
def score(payload: ScoreRequest) -> FeedbackOut:
    try:
        feedback = score_guess(payload.secret, payload.guess)
    except ValidationError as exc:
        raise _http_error(exc)
    return _feedback_out(feedback)


@app.get("/stats", response_model=StatsOut, summary="Get scoreboard")
def get_stats(store: GameStore = Depends(get_store)) -> StatsOut:
    stats = store.get_stats()
    return StatsOut(
        games_started=stats.games_started,
        games_solved=stats.games_solved,
        games_exhausted=stats.games_exhausted,
        current_streak=stats.current_streak,
        best_streak=stats.best_streak,
        average_guesses_to_solve=stats.average_guesses_to_solve,
        fastest_solve=stats.fastest_solve,
    )


@app.post("/stats/reset", summary="Reset the scoreboard")
def reset_stats(store: GameStore = Depends(get_store)) -> dict:
    store.reset_stats()
    return {"message": "Stats reset."}


@app.delete("/games/{game_id}", summary="Forget a game")
def delete_game(game_id: str, store: GameStore = Depends(get_store)) -> dict:
    try:
        store.remove(game_id)
    except GameNotFound as exc:
        raise _http_error(exc)
    return {"message": "Game removed."}


@app.delete("/games", summary="Forget every finished game")
def evict_finished(store: GameStore = Depends(get_store)) -> dict:
    return {"evicted": store.evict_finished()}
