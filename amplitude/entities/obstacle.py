# amplitude/entities/obstacle.py
from __future__ import annotations
import random
from dataclasses import dataclass
from amplitude import settings as S
from amplitude.entities.wave import WaveFront

@dataclass(slots=True)
class Obstacle:
    x: float
    y: float
    angle: float = 0.0   # radians, positive = clockwise on screen

    def advance(self, dt: float) -> None:
        self.x -= dt * S.MOVEMENT_SPEED
        self.angle -= S.TWO_PI * S.OBSTACLE_ANGLE_FREQUENCY * dt

    def touches(self, front: WaveFront, reach: float) -> bool:
        # Square region, not a circle: each axis is tested on its own.
        r2 = reach * reach
        return (self.x - front.x) ** 2 < r2 and (self.y - front.y) ** 2 < r2

    def is_offscreen(self) -> bool:
        return self.x < S.OFFSCREEN_X

def spawn_obstacle(rng: random.Random, screen_w: float, screen_h: float) -> Obstacle:
    """New obstacle just past the right edge, random height and spin."""
    return Obstacle(
        x=screen_w + S.OBSTACLE_MARGIN,
        y=rng.random() * screen_h,
        angle=rng.random() * S.TWO_PI,
    )

def collision_reach(sprite_width: float) -> float:
    return sprite_width / 2.0 + S.WAVE_RADIUS / 2.0
