"""
Input handling abstraction to decouple Pygame input from camera control.
"""

from __future__ import annotations
import pygame
from typing import Optional, Tuple

_MOVE_KEYS = {pygame.K_w: 1, pygame.K_UP: 1, pygame.K_s: -1, pygame.K_DOWN: -1}
_STRAFE_KEYS = {pygame.K_a: -1, pygame.K_d: 1}
_ROTATE_KEYS = {pygame.K_LEFT: -1, pygame.K_q: -1, pygame.K_RIGHT: 1, pygame.K_e: 1}


class InputHandler:
    """
    Processes Pygame events into discrete camera actions. Each call to
    process_events() describes one batch; queries report what that batch asked for.
    """

    def __init__(self) -> None:
        self._quit = False
        self._toggle_trace = False
        # Net steps requested this batch (positive = forward/right)
        self._move = 0
        self._strafe = 0
        self._rotate = 0
        # Last pointer position while the left button is held
        self._pointer: Optional[Tuple[int, int]] = None

    def process_events(self) -> None:
        """Poll Pygame events and update the per-batch action state."""
        self._quit = False
        self._toggle_trace = False
        self._move = 0
        self._strafe = 0
        self._rotate = 0
        self._pointer = None
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._quit = True
            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_ESCAPE, pygame.K_x):
                    self._quit = True
                elif event.key == pygame.K_TAB:
                    self._toggle_trace = True
                elif event.key in _MOVE_KEYS:
                    self._move += _MOVE_KEYS[event.key]
                elif event.key in _STRAFE_KEYS:
                    self._strafe += _STRAFE_KEYS[event.key]
                elif event.key in _ROTATE_KEYS:
                    self._rotate += _ROTATE_KEYS[event.key]
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self._pointer = event.pos
            elif event.type == pygame.MOUSEMOTION and event.buttons[0]:
                self._pointer = event.pos

    def should_quit(self) -> bool:
        """Return True if a quit command was issued this batch."""
        return self._quit

    def toggle_trace_pressed(self) -> bool:
        """Return True if Tab was pressed this batch to toggle the ray trace overlay."""
        return self._toggle_trace

    def move_direction(self) -> int:
        return self._move

    def strafe_direction(self) -> int:
        return self._strafe

    def rotate_direction(self) -> int:
        return self._rotate

    def pointer(self) -> Optional[Tuple[int, int]]:
        """Return the pointer position (pixels) if dragged this batch, else None."""
        return self._pointer
