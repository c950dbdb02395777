import logging
from enum import Enum

from duelpong.game_state import GamePhase, GameState

logger = logging.getLogger(__name__)


class Action(Enum):
    PRIMARY = "primary"   # start / pause-resume / new game
    CANCEL = "cancel"     # back to menu, or quit from the menu


def apply_action(state: GameState, action: Action) -> bool:
    """Apply a key-press action. Returns False when the program should exit."""
    phase = state.phase

    if action is Action.CANCEL:
        if phase == GamePhase.MENU:
            logger.info("quit requested from menu")
            return False
        state.reset()
        return True

    if action is Action.PRIMARY:
        if phase == GamePhase.MENU:
            state.start_round()
        elif phase in (GamePhase.PLAYING, GamePhase.PAUSED):
            state.toggle_pause()
        elif phase == GamePhase.GAME_OVER:
            state.reset()
    return True
