import logging

import pygame
import pytest

from amplitude import app


def test_main_runs_one_frame_and_exits(monkeypatch, caplog):
    monkeypatch.setattr(pygame.event, "get", lambda *a, **k: [pygame.event.Event(pygame.QUIT)])
    with caplog.at_level(logging.INFO, logger="amplitude.app"):
        app.main()
    assert "Exited cleanly" in caplog.text


def test_main_startup_failure_exits_with_status_1(monkeypatch, caplog):
    def broken(*args, **kwargs):
        raise pygame.error("no display")

    monkeypatch.setattr(pygame.display, "set_mode", broken)
    with caplog.at_level(logging.ERROR, logger="amplitude.app"):
        with pytest.raises(SystemExit) as exc:
            app.main()
    assert exc.value.code == 1
    assert "no display" in caplog.text
