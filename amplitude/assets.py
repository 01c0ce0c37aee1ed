# amplitude/assets.py
# Obstacle sprite: drawn in code by default, or loaded from a PNG.

from __future__ import annotations
import math
import os
import pygame
from amplitude import settings

def load_image(path: str) -> pygame.Surface:
    """Load an image with per-pixel alpha. Needs a display mode to be set."""
    if not os.path.exists(path):
        raise FileNotFoundError(f"Sprite not found: {path}")
    return pygame.image.load(path).convert_alpha()

def make_sawblade(size: int = settings.SAWBLADE_SIZE, teeth: int = settings.SAWBLADE_TEETH) -> pygame.Surface:
    """Saw blade disc with `teeth` triangular teeth, fitting a size x size box."""
    surf = pygame.Surface((size, size), pygame.SRCALPHA)
    c = size / 2.0
    outer = c - 1
    inner = outer * 0.75

    pts: list[tuple[float, float]] = []
    for i in range(teeth):
        a0 = math.tau * i / teeth
        a1 = math.tau * (i + 0.5) / teeth
        # tooth tip leans forward, then drops back to the rim
        pts.append((c + math.cos(a0) * outer, c + math.sin(a0) * outer))
        pts.append((c + math.cos(a1) * inner, c + math.sin(a1) * inner))
    pygame.draw.polygon(surf, settings.SAWBLADE_RGB, pts)
    pygame.draw.circle(surf, settings.SAWBLADE_HUB_RGB, (int(c), int(c)), max(2, size // 6))
    return surf

def obstacle_sprite() -> pygame.Surface:
    if settings.SAWBLADE_IMAGE:
        return load_image(settings.SAWBLADE_IMAGE)
    return make_sawblade()
