from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TextIO
from uuid import uuid4

from guessing_game.api.models import GameState
from guessing_game.core.secret import RandomSecretSource, SecretSource, draw_secret
from guessing_game.turns import take_turn

logger = logging.getLogger(__name__)

BANNER = "Guess the number!"
PROMPT = "Please input your guess."


class InputReadError(Exception):
    """The input stream could not supply another line. Not retried."""


def _now() -> datetime:
    return datetime.now(tz=UTC)


def new_game_state() -> GameState:
    now = _now()
    return GameState(game_id=uuid4(), created_at=now, last_updated_at=now)


@dataclass(slots=True)
class GameLoop:
    """One terminal game session, from banner to a single win."""

    # None when the process started without fd 0 (sys.stdin is None then).
    stdin: TextIO | None
    stdout: TextIO
    source: SecretSource = field(default_factory=RandomSecretSource)

    def _say(self, line: str) -> None:
        print(line, file=self.stdout, flush=True)

    def _read_line(self) -> str:
        if self.stdin is None:
            raise InputReadError("Failed to read line: no input stream")
        # ValueError covers "I/O operation on closed file".
        try:
            line = self.stdin.readline()
        except (OSError, UnicodeDecodeError, ValueError) as e:
            raise InputReadError("Failed to read line") from e

        # readline() only returns "" at end of stream; a blank line is still "\n".
        if line == "":
            raise InputReadError("Failed to read line: input stream closed")
        return line

    def run(self) -> GameState:
        """Play until the secret is guessed and return the final (won) state."""

        self._say(BANNER)
        state = new_game_state()
        secret = draw_secret(self.source)
        logger.debug("game %s started", state.game_id)

        while True:
            self._say(PROMPT)
            result = take_turn(state=state, secret=secret, text=self._read_line())
            state.last_updated_at = _now()
            if not result.accepted:
                continue

            for message in result.messages:
                self._say(message)
            if result.is_win:
                logger.info("game %s won after %d guesses", state.game_id, state.attempts)
                return state
