from types import SimpleNamespace

import pygame
import pytest

from raycaster.input_handler import InputHandler


def key(k, mod=0):
    return SimpleNamespace(type=pygame.KEYDOWN, key=k, mod=mod)


@pytest.fixture
def feed(monkeypatch):
    """Replace pygame.event.get with a queue of event batches."""
    batches = []
    monkeypatch.setattr(pygame.event, "get", lambda: batches.pop(0) if batches else [])
    return batches


def test_movement_keys_accumulate(feed):
    feed.append([key(pygame.K_w), key(pygame.K_UP), key(pygame.K_s), key(pygame.K_d)])
    handler = InputHandler()
    handler.process_events()
    assert handler.move_direction() == 1
    assert handler.strafe_direction() == 1
    assert handler.rotate_direction() == 0
    assert not handler.should_quit()


@pytest.mark.parametrize(
    "k,expected",
    [(pygame.K_LEFT, -1), (pygame.K_q, -1), (pygame.K_RIGHT, 1), (pygame.K_e, 1)],
)
def test_rotation_keys(feed, k, expected):
    feed.append([key(k)])
    handler = InputHandler()
    handler.process_events()
    assert handler.rotate_direction() == expected


@pytest.mark.parametrize(
    "event",
    [
        SimpleNamespace(type=pygame.QUIT),
        key(pygame.K_ESCAPE),
        key(pygame.K_x),
    ],
)
def test_quit_events(feed, event):
    feed.append([event])
    handler = InputHandler()
    handler.process_events()
    assert handler.should_quit()


def test_trace_toggle_and_state_resets_between_batches(feed):
    feed.append([key(pygame.K_TAB), key(pygame.K_a)])
    feed.append([])
    handler = InputHandler()
    handler.process_events()
    assert handler.toggle_trace_pressed()
    assert handler.strafe_direction() == -1
    handler.process_events()
    assert not handler.toggle_trace_pressed()
    assert handler.strafe_direction() == 0


def test_pointer_only_while_dragging(feed):
    feed.append([SimpleNamespace(type=pygame.MOUSEMOTION, pos=(40, 50), buttons=(0, 0, 0))])
    feed.append(
        [
            SimpleNamespace(type=pygame.MOUSEBUTTONDOWN, pos=(10, 10), button=1),
            SimpleNamespace(type=pygame.MOUSEMOTION, pos=(42, 52), buttons=(1, 0, 0)),
        ]
    )
    handler = InputHandler()
    handler.process_events()
    assert handler.pointer() is None
    handler.process_events()
    assert handler.pointer() == (42, 52)
