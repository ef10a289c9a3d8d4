from __future__ import annotations

from uuid import UUID

import redis
from fastapi import APIRouter, Depends, HTTPException, status

from guessing_game.api.deps import get_redis, get_secret_source
from guessing_game.api.models import GameListResponse, GameState, GuessRequest, GuessResponse
from guessing_game.core.secret import SecretSource
from guessing_game.game_store import GameNotFoundError, create_game, get_game, list_games, submit_guess

router = APIRouter()


@router.get("/healthcheck")
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.post("/game", response_model=GameState, status_code=status.HTTP_201_CREATED)
async def create_game_route(
    r: redis.Redis = Depends(get_redis),
    source: SecretSource = Depends(get_secret_source),
) -> GameState:
    return create_game(r=r, source=source)


@router.get("/game", response_model=GameListResponse)
async def list_games_route(r: redis.Redis = Depends(get_redis)) -> GameListResponse:
    return GameListResponse(games=list_games(r=r))


@router.get("/game/{game_id}", response_model=GameState)
async def get_game_route(game_id: UUID, r: redis.Redis = Depends(get_redis)) -> GameState:
    state = get_game(r=r, game_id=game_id)
    if state is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Game not found")
    return state


@router.post("/game/{game_id}/guess", response_model=GuessResponse)
async def guess_route(
    game_id: UUID,
    payload: GuessRequest,
    r: redis.Redis = Depends(get_redis),
) -> GuessResponse:
    try:
        return submit_guess(r=r, game_id=game_id, text=payload.text)
    except GameNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e)) from e
