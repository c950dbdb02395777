import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from duelpong.ball import Ball
from duelpong.config import CFG, GameConfig
from duelpong.paddle import Paddle

logger = logging.getLogger(__name__)

Rect = Tuple[int, int, int, int]


class GamePhase(Enum):
    MENU = "menu"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class Side(Enum):
    LEFT = "left"
    RIGHT = "right"


class GameEvent(Enum):
    WALL_BOUNCE = "wall_bounce"
    PADDLE_HIT = "paddle_hit"
    POINT_LEFT = "point_left"
    POINT_RIGHT = "point_right"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of one frame, handed to the renderer."""

    phase: GamePhase
    ball: Rect
    paddle_left: Rect
    paddle_right: Rect
    score_left: int
    score_right: int
    max_score: int
    winner: Optional[Side]


class GameState:
    """
    Owns the ball, both paddles, the scores and the current phase.

    The frame driver moves the paddles from input, calls update(dt) once per
    frame while playing, and feeds discrete actions through the transition
    methods (start_round, toggle_pause, reset).
    """

    def __init__(
        self,
        screen_width: float,
        screen_height: float,
        ball: Ball,
        paddle_left: Paddle,
        paddle_right: Paddle,
        max_score: int = 5,
    ):
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.phase = GamePhase.MENU

        self.ball = ball
        self.paddle_left = paddle_left
        self.paddle_right = paddle_right

        self.score_left = 0
        self.score_right = 0
        self.max_score = max_score

    @classmethod
    def from_config(cls, cfg: GameConfig = CFG, rng: Optional[random.Random] = None) -> "GameState":
        w, h = float(cfg.screen_width), float(cfg.screen_height)
        paddle_y = (h - cfg.paddle_height) / 2

        left = Paddle(cfg.paddle_offset, paddle_y, cfg.paddle_width, cfg.paddle_height, cfg.paddle_speed)
        right = Paddle(w - cfg.paddle_offset - cfg.paddle_width, paddle_y,
                       cfg.paddle_width, cfg.paddle_height, cfg.paddle_speed)
        ball = Ball(w / 2, h / 2, cfg.ball_size, cfg.ball_speed, rng=rng)

        return cls(w, h, ball, left, right, max_score=cfg.max_score)

    # ---------------- phase transitions ----------------
    def start_round(self):
        self.ball.reset(self.screen_width, self.screen_height)
        self.ball.launch()
        self.phase = GamePhase.PLAYING
        logger.debug("round started, ball velocity (%.1f, %.1f)", self.ball.vel_x, self.ball.vel_y)

    def toggle_pause(self):
        if self.phase == GamePhase.PLAYING:
            self.phase = GamePhase.PAUSED
            logger.info("paused")
        elif self.phase == GamePhase.PAUSED:
            self.phase = GamePhase.PLAYING
            logger.info("resumed")

    def reset(self):
        self.score_left = 0
        self.score_right = 0
        self.ball.reset(self.screen_width, self.screen_height)
        self.phase = GamePhase.MENU
        logger.info("back to menu")

    @property
    def winner(self) -> Optional[Side]:
        if self.score_left >= self.max_score:
            return Side.LEFT
        if self.score_right >= self.max_score:
            return Side.RIGHT
        return None

    # ---------------- simulation ----------------
    def update(self, dt: float) -> Tuple[GameEvent, ...]:
        """
        Advance one frame. Returns what happened (for sound cues); the
        simulation itself never reads the events back.
        """
        if self.phase != GamePhase.PLAYING:
            return ()

        events: List[GameEvent] = []
        ball = self.ball

        ball.update(dt)

        if ball.check_wall_collision(self.screen_height):
            events.append(GameEvent.WALL_BOUNCE)

        # Both paddles are checked every frame. If the ball overlaps both in
        # the same frame the right paddle's reposition wins.
        left = self.paddle_left
        if left.check_collision(ball.x, ball.y, ball.size):
            ball.bounce_horizontal()
            ball.x = left.x + left.width + ball.size / 2
            events.append(GameEvent.PADDLE_HIT)

        right = self.paddle_right
        if right.check_collision(ball.x, ball.y, ball.size):
            ball.bounce_horizontal()
            ball.x = right.x - ball.size / 2
            events.append(GameEvent.PADDLE_HIT)

        if ball.x < 0:
            self.score_right += 1
            events.append(GameEvent.POINT_RIGHT)
            self._after_point(events)
        elif ball.x > self.screen_width:
            self.score_left += 1
            events.append(GameEvent.POINT_LEFT)
            self._after_point(events)

        return tuple(events)

    def _after_point(self, events: List[GameEvent]):
        logger.info("score %d - %d", self.score_left, self.score_right)
        self._check_game_over()
        if self.phase == GamePhase.GAME_OVER:
            events.append(GameEvent.GAME_OVER)
        else:
            self.start_round()

    def _check_game_over(self):
        if self.score_left >= self.max_score or self.score_right >= self.max_score:
            self.phase = GamePhase.GAME_OVER
            logger.info("game over, %s wins", self.winner.value)

    def snapshot(self) -> Snapshot:
        return Snapshot(
            phase=self.phase,
            ball=self.ball.rect,
            paddle_left=self.paddle_left.rect,
            paddle_right=self.paddle_right.rect,
            score_left=self.score_left,
            score_right=self.score_right,
            max_score=self.max_score,
            winner=self.winner,
        )
