# amplitude/app.py
from __future__ import annotations
import logging
import pygame
from amplitude import settings
from amplitude.assets import obstacle_sprite
from amplitude.core.clock import FrameClock
from amplitude.scenes.wave_scene import WaveScene

log = logging.getLogger(__name__)

def main() -> None:
    logging.basicConfig(level=settings.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")
    pygame.init()
    try:
        pygame.display.set_caption(settings.WINDOW_TITLE)
        screen = pygame.display.set_mode(settings.SCREEN_SIZE, pygame.RESIZABLE)
        sprite = obstacle_sprite()
    except (pygame.error, FileNotFoundError) as e:
        log.error("Startup failed: %s", e)
        pygame.quit()
        raise SystemExit(1) from e

    clock = FrameClock()
    scene = WaveScene(screen, sprite)

    running = True
    while running:
        # -- Input --
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            else:
                scene.handle_event(event)

        # -- Update (sub-stepped inside) --
        scene.update(clock.tick())

        # -- Render --
        scene.draw(pygame.display.get_surface())
        pygame.display.flip()

    pygame.quit()
    log.info("Exited cleanly. %d restart(s) this run.", scene.restarts)
