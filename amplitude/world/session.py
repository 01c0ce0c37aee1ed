# amplitude/world/session.py
from __future__ import annotations
import random
from collections import deque
from dataclasses import dataclass, field
from amplitude import settings as S
from amplitude.entities.wave import WaveFront, WaveSection
from amplitude.entities.obstacle import Obstacle, spawn_obstacle, collision_reach

def make_rng(seed: int | None = S.RNG_SEED) -> random.Random:
    return random.Random(seed) if seed is not None else random.Random()

@dataclass
class Session:
    """
    All mutable state of one play session:
    - wave front (x fixed, y oscillates)
    - trail of wave sections, oldest (leftmost) first
    - obstacles, oldest (leftmost) first
    - life, elapsed time, obstacle spawn countdown
    reset() puts everything back to the start; the rng is kept.
    """
    screen_w: float
    screen_h: float
    sprite_width: float
    rng: random.Random = field(default_factory=make_rng)

    wave_front: WaveFront = field(init=False)
    trail: deque[WaveSection] = field(default_factory=deque, init=False)
    obstacles: deque[Obstacle] = field(default_factory=deque, init=False)
    life: float = field(default=S.LIFE_MAXIMUM, init=False)
    time: float = field(default=0.0, init=False)
    countdown: float = field(default=S.OBSTACLE_COUNTDOWN, init=False)

    def __post_init__(self) -> None:
        self.wave_front = WaveFront(*self.initial_front())

    def initial_front(self) -> tuple[float, float]:
        return self.screen_w / 8.0, self.screen_h / 2.0

    @property
    def reach(self) -> float:
        """Half-extent of the collision square around the wave front."""
        return collision_reach(self.sprite_width)

    def resize(self, screen_w: float, screen_h: float) -> None:
        self.screen_w, self.screen_h = screen_w, screen_h

    def reset(self) -> None:
        self.wave_front.x, self.wave_front.y = self.initial_front()
        self.trail.clear()
        self.obstacles.clear()
        self.life = S.LIFE_MAXIMUM
        self.time = 0.0
        self.countdown = S.OBSTACLE_COUNTDOWN

    def spawn_obstacle(self) -> Obstacle:
        obstacle = spawn_obstacle(self.rng, self.screen_w, self.screen_h)
        self.obstacles.append(obstacle)
        return obstacle

    def purge_offscreen(self) -> None:
        while self.trail and self.trail[0].x < S.OFFSCREEN_X:
            self.trail.popleft()
        while self.obstacles and self.obstacles[0].is_offscreen():
            self.obstacles.popleft()
