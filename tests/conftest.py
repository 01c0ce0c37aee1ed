import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random

import pygame
import pytest

from amplitude.world.session import Session


@pytest.fixture
def session():
    return Session(800.0, 600.0, 64.0, random.Random(1234))


@pytest.fixture
def screen():
    pygame.init()
    surface = pygame.display.set_mode((800, 600))
    yield surface
    pygame.quit()
