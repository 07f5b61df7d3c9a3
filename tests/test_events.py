from __future__ import annotations

import pygame
import pytest

from events import EventManager


@pytest.fixture(autouse=True)
def empty_queue():
    EventManager.clear()
    yield
    EventManager.clear()


def _translate(etype, **attrs):
    EventManager.handle(pygame.event.Event(etype, **attrs))
    return EventManager.poll()


def test_mouse_press_and_release():
    assert _translate(pygame.MOUSEBUTTONDOWN, button=1, pos=(5, 5)) == {"type": "press"}
    assert _translate(pygame.MOUSEBUTTONUP, button=1, pos=(5, 5)) == {"type": "release"}


def test_touch_mirrored_mouse_events_dropped():
    assert _translate(pygame.MOUSEBUTTONDOWN, button=1, pos=(5, 5), touch=True) is None


def test_finger_press_and_release():
    assert _translate(pygame.FINGERDOWN, x=0.5, y=0.5) == {"type": "press"}
    assert _translate(pygame.FINGERUP, x=0.5, y=0.5) == {"type": "release"}


def test_space_bar_holds():
    assert _translate(pygame.KEYDOWN, key=pygame.K_SPACE) == {"type": "press"}
    assert _translate(pygame.KEYUP, key=pygame.K_SPACE) == {"type": "release"}


def test_keys_and_window_actions():
    assert _translate(pygame.QUIT) == {"type": "quit"}
    assert _translate(pygame.KEYDOWN, key=pygame.K_ESCAPE) == {"type": "quit"}
    assert _translate(pygame.KEYDOWN, key=pygame.K_h) == {"type": "toggle_hud"}
    assert _translate(pygame.VIDEORESIZE, w=640, h=480, size=(640, 480)) == \
        {"type": "resize", "size": (640, 480)}


def test_unmapped_events_ignored():
    assert _translate(pygame.KEYDOWN, key=pygame.K_z) is None
    assert _translate(pygame.KEYUP, key=pygame.K_z) is None


def test_post_from_outside():
    EventManager.post({"type": "press"})
    EventManager.post({"type": "release"})
    assert EventManager.poll() == {"type": "press"}
    assert EventManager.poll() == {"type": "release"}
    assert EventManager.poll() is None


def test_window_size_changed_resizes():
    assert _translate(pygame.WINDOWSIZECHANGED, x=1024, y=768) == \
        {"type": "resize", "size": (1024, 768)}
