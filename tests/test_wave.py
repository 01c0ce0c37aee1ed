import math

import pytest

from amplitude import settings as S
from amplitude.entities.wave import (
    clamp_life,
    dampen_mode,
    section_color,
    select_amplitude,
    sine_delta,
)


@pytest.mark.parametrize(
    "dampen, life, mode",
    [
        (True, 50.0, "held"),
        (True, 0.0, "depleted"),
        (True, -1.0, "depleted"),
        (False, 0.0, "released"),
        (False, 100.0, "released"),
    ],
)
def test_dampen_mode_boundaries(dampen, life, mode):
    assert dampen_mode(dampen, life) == mode


def test_amplitude_table():
    assert select_amplitude(True, 10.0) == (S.WAVE_FRONT_AMPLITUDE_SMALL, -S.LIFE_DEPLETE)
    assert select_amplitude(True, 0.0) == (S.WAVE_FRONT_AMPLITUDE, 0.0)
    assert select_amplitude(False, 10.0) == (S.WAVE_FRONT_AMPLITUDE, S.LIFE_RECOVER)


def test_sine_delta_is_previous_minus_next():
    d = sine_delta(0.0, 0.25)
    assert math.isclose(d, -1.0, abs_tol=1e-12)


def test_sine_delta_telescopes_over_full_period():
    total = sum(sine_delta(i * 0.01, 0.01) for i in range(100))
    assert math.isclose(total, 0.0, abs_tol=1e-9)


def test_section_color_follows_amplitude():
    assert section_color(S.WAVE_FRONT_AMPLITUDE) == S.FREE_COLOR
    assert section_color(S.WAVE_FRONT_AMPLITUDE_SMALL) == S.DAMPENED_COLOR


def test_clamp_life():
    assert clamp_life(130.0) == 100.0
    assert clamp_life(-0.2) == 0.0
    assert clamp_life(42.0) == 42.0
