import os
from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    screen_width: int = 800
    screen_height: int = 600

    paddle_width: float = 15.0
    paddle_height: float = 80.0
    paddle_offset: float = 30.0   # gap between screen side and paddle
    paddle_speed: float = 400.0   # px/s

    ball_size: float = 12.0
    ball_speed: float = 300.0     # px/s at launch

    max_score: int = 5


CFG = GameConfig()


def log_level() -> str:
    return os.getenv("PONG_LOG_LEVEL", "INFO").upper()


def audio_muted() -> bool:
    return os.getenv("PONG_MUTE", "").strip().lower() in ("1", "true", "yes", "on")
