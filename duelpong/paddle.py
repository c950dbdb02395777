from dataclasses import dataclass
from typing import Tuple


@dataclass
class Paddle:
    # (x, y) is the top-left corner
    x: float
    y: float
    width: float
    height: float
    speed: float = 400.0

    @property
    def rect(self) -> Tuple[int, int, int, int]:
        return int(self.x), int(self.y), int(self.width), int(self.height)

    def move_up(self, dt: float):
        self.y -= self.speed * dt
        self.y = max(0.0, self.y)

    def move_down(self, dt: float, screen_height: float):
        self.y += self.speed * dt
        self.y = min(screen_height - self.height, self.y)

    def check_collision(self, ball_x: float, ball_y: float, ball_size: float) -> bool:
        # touching edges count as a hit
        half = ball_size / 2
        return (
            ball_x + half >= self.x
            and ball_x - half <= self.x + self.width
            and ball_y + half >= self.y
            and ball_y - half <= self.y + self.height
        )
