"""Terminal entry point: `guessing-game` or `python -m guessing_game`."""

from __future__ import annotations

import logging
import sys

from guessing_game.core.secret import RandomSecretSource
from guessing_game.game_loop import GameLoop, InputReadError
from guessing_game.infra.logging_setup import configure_logging

logger = logging.getLogger(__name__)


def main() -> int:
    configure_logging()

    loop = GameLoop(stdin=sys.stdin, stdout=sys.stdout, source=RandomSecretSource())
    try:
        loop.run()
    except InputReadError as e:
        logger.debug("input failure", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0
