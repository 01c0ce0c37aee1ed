# amplitude/world/step.py
from __future__ import annotations
import logging
from amplitude import settings as S
from amplitude.core.clock import slices
from amplitude.entities.wave import WaveSection, select_amplitude, sine_delta, section_color, clamp_life
from amplitude.world.session import Session

log = logging.getLogger(__name__)

def advance(session: Session, dt: float, dampen: bool) -> bool:
    """Run one slice of the simulation. Returns True if the wave front hit an obstacle."""
    # -- Wave front --
    delta = sine_delta(session.time, dt)
    amplitude, life_rate = select_amplitude(dampen, session.life)
    session.life = clamp_life(session.life + life_rate * dt)
    front = session.wave_front
    front.y += delta * amplitude
    session.time += dt
    color = section_color(amplitude)

    # -- Trail --
    for section in session.trail:
        section.x -= dt * S.MOVEMENT_SPEED
    session.trail.append(WaveSection(front.x, front.y, color))

    # -- Obstacles --
    reach = session.reach
    hit = False
    for o in session.obstacles:
        o.advance(dt)
    for o in session.obstacles:
        if o.touches(front, reach):
            hit = True

    # -- Spawn --
    session.countdown -= dt
    if session.countdown <= 0.0:
        session.countdown += S.OBSTACLE_COUNTDOWN
        session.spawn_obstacle()

    return hit

def step(session: Session, dt: float, dampen: bool, *, max_step: float = S.MAX_STEP) -> bool:
    """Advance one frame in slices of at most max_step.

    Off-screen trail samples and obstacles are purged once the frame is done.
    A collision anywhere in the frame restarts the session; returns True then.
    """
    end_game = False
    for piece in slices(dt, max_step):
        if advance(session, piece, dampen):
            end_game = True
    session.purge_offscreen()

    if end_game:
        log.info("Collision at t=%.2fs, restarting", session.time)
        session.reset()
    return end_game
