from __future__ import annotations

import logging
from dataclasses import dataclass

from guessing_game.api.models import GameState
from guessing_game.core.guess import OUTCOME_MESSAGES, ParseFailure, compare_guess, parse_guess
from guessing_game.core.phases import Outcome
from guessing_game.fsm import GuessFSM

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TurnResult:
    """What one submitted line did.

    - `accepted`: False when the line was not a guess (caller re-prompts silently).
    - `messages`: user-facing lines, in order.
    """

    accepted: bool
    guess: int | None = None
    outcome: Outcome | None = None
    messages: tuple[str, ...] = ()

    @property
    def is_win(self) -> bool:
        return self.outcome == Outcome.win


def take_turn(*, state: GameState, secret: int, text: str) -> TurnResult:
    """Apply one raw input line to `state`.

    Shared by the terminal loop and the HTTP store, so both follow the same rules.
    """

    fsm = GuessFSM(state)
    if fsm.current_state == fsm.won:
        raise ValueError("Game is completed")

    parsed = parse_guess(text)
    if isinstance(parsed, ParseFailure):
        state.rejected_inputs += 1
        logger.debug("game %s: ignoring non-numeric input %r", state.game_id, parsed.text)
        return TurnResult(accepted=False)

    outcome = compare_guess(parsed.value, secret)
    state.attempts += 1
    state.last_outcome = outcome

    if outcome == Outcome.win:
        fsm.hit()
    else:
        fsm.miss()
    fsm.sync_phase_to_model()

    logger.debug("game %s: guess #%d=%d -> %s", state.game_id, state.attempts, parsed.value, outcome.value)
    return TurnResult(
        accepted=True,
        guess=parsed.value,
        outcome=outcome,
        messages=(f"You guessed: {parsed.value}", OUTCOME_MESSAGES[outcome]),
    )
