from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from guessing_game.core.phases import GamePhase, Outcome


class GameState(BaseModel):
    game_id: UUID
    created_at: datetime
    last_updated_at: datetime

    phase: GamePhase = GamePhase.playing

    # Accepted guesses only; malformed input is counted separately.
    attempts: int = 0
    rejected_inputs: int = 0

    last_outcome: Outcome | None = None

    # The secret is deliberately not a field; the store keeps it under its own key.


class GuessRequest(BaseModel):
    # Raw line as typed; parsing happens server side so the rules match the terminal game.
    text: str = Field(..., max_length=1000)


class GuessResponse(BaseModel):
    state: GameState
    accepted: bool
    guess: int | None = None
    outcome: Outcome | None = None
    messages: list[str] = Field(default_factory=list)


class GameListResponse(BaseModel):
    games: list[GameState]
