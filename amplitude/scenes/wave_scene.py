# amplitude/scenes/wave_scene.py
from __future__ import annotations
import math
import random
import pygame
from dataclasses import dataclass, field

from amplitude import settings
from amplitude.world.session import Session, make_rng
from amplitude.world.step import step


@dataclass
class WaveScene:
    """
    The one and only play scene:
    - Space held dampens the wave (costs life)
    - obstacles scroll in from the right; touching one restarts
    - life bar along the top, tinted like the newest trail sample
    """
    screen: pygame.Surface
    sprite: pygame.Surface
    rng: random.Random = field(default_factory=make_rng)
    session: Session = field(init=False)
    restarts: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        sw, sh = self.screen.get_size()
        self.session = Session(float(sw), float(sh), float(self.sprite.get_width()), self.rng)
        self._dampen_key = pygame.key.key_code(settings.DAMPEN_KEY)

    # ---- Input ----
    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            pygame.event.post(pygame.event.Event(pygame.QUIT))

        if event.type == pygame.VIDEORESIZE:
            self.session.resize(float(event.w), float(event.h))

    def dampen_held(self) -> bool:
        return bool(pygame.key.get_pressed()[self._dampen_key])

    # ---- Update ----
    def update(self, dt: float) -> None:
        sw, sh = self.screen.get_size()
        self.session.resize(float(sw), float(sh))
        if step(self.session, dt, self.dampen_held()):
            self.restarts += 1

    # ---- Render ----
    def draw(self, surface: pygame.Surface) -> None:
        surface.fill(settings.BG_COLOR)
        s = self.session

        for section in s.trail:
            pygame.draw.circle(surface, section.color, (int(section.x), int(section.y)), int(settings.WAVE_RADIUS))

        for o in s.obstacles:
            # angle is radians with y pointing down; rotate() wants CCW degrees
            img = pygame.transform.rotate(self.sprite, math.degrees(-o.angle))
            surface.blit(img, img.get_rect(center=(int(o.x), int(o.y))))

        self._draw_life_bar(surface)

    def _draw_life_bar(self, surface: pygame.Surface) -> None:
        if not self.session.trail:
            return
        m = settings.LIFE_BAR_MARGIN
        width = surface.get_width()
        bar_w = max(0.0, self.session.life / settings.LIFE_MAXIMUM * (width - 2 * m))
        color = self.session.trail[-1].color
        pygame.draw.rect(surface, color, pygame.Rect(m, m, int(bar_w), settings.LIFE_BAR_HEIGHT))
