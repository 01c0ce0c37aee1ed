# amplitude/core/clock.py
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Iterator
from amplitude.settings import FPS, MAX_STEP, DT_CLAMP

SLIVER: float = 1e-9


def slices(dt: float, max_step: float = MAX_STEP) -> Iterator[float]:
    """Cut a frame's dt into consecutive slices no longer than max_step.

    The slices sum to dt; only the last one may be shorter. dt <= 0 yields
    nothing. Float leftovers below SLIVER are dropped instead of becoming an
    extra slice.
    """
    elapsed = 0.0
    while dt - elapsed > SLIVER:
        step = min(dt - elapsed, max_step)
        elapsed += step
        yield step


@dataclass
class FrameClock:
    """Variable timestep frame clock.
    tick() -> dt in seconds since the previous tick, capped at DT_CLAMP so a
    stalled window (dragging, debugger) doesn't dump a huge frame on the step.
    """
    fps: int = FPS
    dt_clamp: float = DT_CLAMP

    def __post_init__(self) -> None:
        self._clock = pygame.time.Clock()

    def tick(self) -> float:
        ms = self._clock.tick(self.fps)
        return min(ms / 1000.0, self.dt_clamp)
