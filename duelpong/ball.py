import math
import random
from typing import Optional, Tuple

# launch angle is drawn from (-MAX_LAUNCH_ANGLE, MAX_LAUNCH_ANGLE)
MAX_LAUNCH_ANGLE = math.pi / 4
SPEEDUP = 1.05


class Ball:
    """Square ball, positioned by its center. Velocities are in px/s."""

    def __init__(self, x: float, y: float, size: float, base_speed: float,
                 rng: Optional[random.Random] = None):
        self.x = x
        self.y = y
        self.size = size
        self.vel_x = 0.0
        self.vel_y = 0.0
        self._base_speed = base_speed
        self.rng = rng if rng is not None else random.Random()

    def __repr__(self):
        return (f"Ball(x={self.x!r}, y={self.y!r}, size={self.size!r}, "
                f"vel_x={self.vel_x!r}, vel_y={self.vel_y!r}, base_speed={self._base_speed!r})")

    @property
    def base_speed(self) -> float:
        return self._base_speed

    @property
    def rect(self) -> Tuple[int, int, int, int]:
        half = self.size / 2
        return int(self.x - half), int(self.y - half), int(self.size), int(self.size)

    def launch(self):
        direction = 1.0 if self.rng.random() < 0.5 else -1.0
        angle = self.rng.uniform(-MAX_LAUNCH_ANGLE, MAX_LAUNCH_ANGLE)
        self.vel_x = self.base_speed * math.cos(angle) * direction
        self.vel_y = self.base_speed * math.sin(angle)

    def update(self, dt: float):
        self.x += self.vel_x * dt
        self.y += self.vel_y * dt

    def bounce_horizontal(self):
        # every paddle hit speeds the ball up, no cap
        self.vel_x = -self.vel_x
        self.vel_x *= SPEEDUP
        self.vel_y *= SPEEDUP

    def bounce_vertical(self):
        self.vel_y = -self.vel_y

    def check_wall_collision(self, screen_height: float) -> bool:
        half = self.size / 2

        # top
        if self.y - half <= 0:
            self.y = half
            self.bounce_vertical()
            return True

        # bottom
        if self.y + half >= screen_height:
            self.y = screen_height - half
            self.bounce_vertical()
            return True

        return False

    def reset(self, screen_width: float, screen_height: float):
        # idle at center until the next launch()
        self.x = screen_width / 2
        self.y = screen_height / 2
        self.vel_x = 0.0
        self.vel_y = 0.0
