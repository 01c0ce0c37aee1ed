# amplitude/entities/wave.py
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Literal
from amplitude import settings as S

Color = tuple[int, int, int]
DampenMode = Literal["held", "depleted", "released"]

# mode -> (amplitude px, life change per second)
AMPLITUDE_TABLE: dict[DampenMode, tuple[float, float]] = {
    "held":     (S.WAVE_FRONT_AMPLITUDE_SMALL, -S.LIFE_DEPLETE),
    "depleted": (S.WAVE_FRONT_AMPLITUDE, 0.0),
    "released": (S.WAVE_FRONT_AMPLITUDE, +S.LIFE_RECOVER),
}

@dataclass(slots=True)
class WaveFront:
    x: float
    y: float

@dataclass(slots=True)
class WaveSection:
    x: float
    y: float
    color: Color

def dampen_mode(dampen: bool, life: float) -> DampenMode:
    if not dampen:
        return "released"
    if life > 0.0:
        return "held"
    return "depleted"

def select_amplitude(dampen: bool, life: float) -> tuple[float, float]:
    """Return (amplitude, life rate per second) for this input and life."""
    return AMPLITUDE_TABLE[dampen_mode(dampen, life)]

def sine_delta(time: float, step: float, frequency: float = S.WAVE_FRONT_FREQUENCY) -> float:
    """sin at `time` minus sin at `time + step` (previous minus next)."""
    w = S.TWO_PI * frequency
    return math.sin(time * w) - math.sin((time + step) * w)

def section_color(amplitude: float) -> Color:
    return S.FREE_COLOR if amplitude == S.WAVE_FRONT_AMPLITUDE else S.DAMPENED_COLOR

def clamp_life(life: float) -> float:
    return max(S.LIFE_MINIMUM, min(S.LIFE_MAXIMUM, life))
