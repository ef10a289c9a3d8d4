from __future__ import annotations

from statemachine import State, StateMachine

from guessing_game.api.models import GameState
from guessing_game.core.phases import GamePhase


class GuessFSM(StateMachine):
    """FSM wrapper around GameState.

    - phases: playing -> won
    - a wrong guess loops on `playing`; nothing leaves `won`.
    """

    playing = State(GamePhase.playing.value, value=GamePhase.playing.value, initial=True)
    won = State(GamePhase.won.value, value=GamePhase.won.value, final=True)

    miss = playing.to.itself()
    hit = playing.to(won)

    def __init__(self, game: GameState):
        self.game = game
        super().__init__(start_value=game.phase.value)

    def sync_phase_to_model(self) -> None:
        self.game.phase = GamePhase(str(self.current_state.value))
