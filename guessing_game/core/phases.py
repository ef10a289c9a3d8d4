from __future__ import annotations

from enum import StrEnum


class GamePhase(StrEnum):
    playing = "playing"
    won = "won"


class Outcome(StrEnum):
    too_small = "too_small"
    too_big = "too_big"
    win = "win"
