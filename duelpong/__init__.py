"""Two-player Pong: gameplay core."""

from duelpong.ball import Ball
from duelpong.config import CFG, GameConfig
from duelpong.controls import Action, apply_action
from duelpong.game_state import GameEvent, GamePhase, GameState, Side, Snapshot
from duelpong.paddle import Paddle

__all__ = [
    "Action",
    "Ball",
    "CFG",
    "GameConfig",
    "GameEvent",
    "GamePhase",
    "GameState",
    "Paddle",
    "Side",
    "Snapshot",
    "apply_action",
]
