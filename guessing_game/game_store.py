from __future__ import annotations

import logging
from datetime import UTC, datetime
from uuid import UUID, uuid4

import redis

from guessing_game.api.models import GameState, GuessResponse
from guessing_game.core.secret import SecretSource, draw_secret
from guessing_game.lock import game_lock
from guessing_game.turns import take_turn

logger = logging.getLogger(__name__)

GAMES_SET_KEY = "guessing:games"
GAME_KEY_PREFIX = "guessing:game:"  # + {uuid}
SECRET_KEY_PREFIX = "guessing:secret:"  # + {uuid}


class GameNotFoundError(ValueError):
    pass


def _now() -> datetime:
    return datetime.now(tz=UTC)


def _game_key(game_id: UUID) -> str:
    return f"{GAME_KEY_PREFIX}{game_id}"


def _secret_key(game_id: UUID) -> str:
    return f"{SECRET_KEY_PREFIX}{game_id}"


def create_game(*, r: redis.Redis, source: SecretSource) -> GameState:
    now = _now()
    state = GameState(game_id=uuid4(), created_at=now, last_updated_at=now)

    # Stored apart from the state document so it never leaks through the API model.
    r.set(_secret_key(state.game_id), str(draw_secret(source)))
    r.sadd(GAMES_SET_KEY, str(state.game_id))
    save_game(r=r, state=state)

    logger.info("created game %s", state.game_id)
    return state


def save_game(*, r: redis.Redis, state: GameState) -> None:
    state.last_updated_at = _now()
    r.set(_game_key(state.game_id), state.model_dump_json())


def get_game(*, r: redis.Redis, game_id: UUID) -> GameState | None:
    raw = r.get(_game_key(game_id))
    if not raw:
        return None
    return GameState.model_validate_json(raw)


def require_game(*, r: redis.Redis, game_id: UUID) -> GameState:
    state = get_game(r=r, game_id=game_id)
    if state is None:
        raise GameNotFoundError("Game not found")
    return state


def list_games(*, r: redis.Redis) -> list[GameState]:
    games: list[GameState] = []
    for raw_id in sorted(r.smembers(GAMES_SET_KEY)):
        state = get_game(r=r, game_id=UUID(raw_id))
        if state is not None:
            games.append(state)
    return sorted(games, key=lambda g: g.created_at)


def _require_secret(*, r: redis.Redis, game_id: UUID) -> int:
    raw = r.get(_secret_key(game_id))
    if raw is None:
        raise GameNotFoundError("Game not found")
    return int(raw)


def submit_guess(*, r: redis.Redis, game_id: UUID, text: str) -> GuessResponse:
    """Apply one raw input line to a stored game.

    Malformed text is not an error: it comes back with `accepted=False` and no
    messages, the HTTP counterpart of a silent re-prompt.
    """

    with game_lock(r=r, game_id=str(game_id)):
        state = require_game(r=r, game_id=game_id)
        secret = _require_secret(r=r, game_id=game_id)

        result = take_turn(state=state, secret=secret, text=text)
        save_game(r=r, state=state)

    return GuessResponse(
        state=state,
        accepted=result.accepted,
        guess=result.guess,
        outcome=result.outcome,
        messages=list(result.messages),
    )
