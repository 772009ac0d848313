"""
Drawing surfaces: the primitives the renderers draw with, plus a nested
scale/translate transform with save/restore semantics.
"""

from __future__ import annotations
import contextlib
from typing import Iterator, List, Optional, Tuple

import pygame

from .scene import Color
from .vector import Vector2

PixelRect = Tuple[float, float, float, float]


class Surface:
    """
    Base class for drawing targets. Public methods take coordinates in the
    current transform space and convert them to pixels; subclasses implement
    the pixel-space hooks.
    """

    def __init__(self) -> None:
        # Stack of (scale, offset) pairs; pixel = offset + scale * point
        self._transforms: List[Tuple[Vector2, Vector2]] = [
            (Vector2(1.0, 1.0), Vector2(0.0, 0.0))
        ]

    @property
    def size(self) -> Tuple[int, int]:
        raise NotImplementedError("Surface.size must be implemented by subclasses")

    @contextlib.contextmanager
    def transformed(
        self, translate: Tuple[float, float], scale: Tuple[float, float]
    ) -> Iterator[None]:
        """
        Draw in a nested coordinate space: translate first, then scale, both
        relative to the current space. The previous transform is restored on exit.
        """
        cur_scale, cur_offset = self._transforms[-1]
        offset = cur_offset + cur_scale.mul(Vector2(*translate))
        self._transforms.append((cur_scale.mul(Vector2(*scale)), offset))
        try:
            yield
        finally:
            self._transforms.pop()

    def to_pixels(self, point: Vector2) -> Vector2:
        """Map a point in the current space to pixel coordinates."""
        scale, offset = self._transforms[-1]
        return offset + scale.mul(point)

    def to_local(self, pixel: Vector2) -> Vector2:
        """Map pixel coordinates back into the current space."""
        scale, offset = self._transforms[-1]
        return (pixel - offset).div(scale)

    def _pixel_width(self, width: float) -> int:
        scale, _ = self._transforms[-1]
        return max(1, round(width * min(abs(scale.x), abs(scale.y))))

    def clear(self, color: Color) -> None:
        """Fill the whole surface, ignoring the current transform."""
        self._fill(color)

    def fill_rect(self, top_left: Vector2, size: Vector2, color: Color) -> None:
        p0 = self.to_pixels(top_left)
        p1 = self.to_pixels(top_left + size)
        self._fill_rect_px(
            (min(p0.x, p1.x), min(p0.y, p1.y), abs(p1.x - p0.x), abs(p1.y - p0.y)),
            color,
        )

    def stroke_line(
        self, start: Vector2, end: Vector2, color: Color, width: float
    ) -> None:
        self._line_px(
            self.to_pixels(start), self.to_pixels(end), color, self._pixel_width(width)
        )

    def circle(
        self,
        center: Vector2,
        radius: float,
        color: Color,
        fill: Optional[Color] = None,
        width: float = 0.02,
    ) -> None:
        """Stroke a circle outline, optionally filling it first."""
        corner = self.to_pixels(center - Vector2(radius, radius))
        far = self.to_pixels(center + Vector2(radius, radius))
        rect = (
            min(corner.x, far.x),
            min(corner.y, far.y),
            abs(far.x - corner.x),
            abs(far.y - corner.y),
        )
        if fill is not None:
            self._ellipse_px(rect, fill, 0)
        self._ellipse_px(rect, color, self._pixel_width(width))

    def _fill(self, color: Color) -> None:
        raise NotImplementedError

    def _fill_rect_px(self, rect: PixelRect, color: Color) -> None:
        raise NotImplementedError

    def _line_px(self, start: Vector2, end: Vector2, color: Color, width: int) -> None:
        raise NotImplementedError

    def _ellipse_px(self, rect: PixelRect, color: Color, width: int) -> None:
        """Draw an ellipse inside rect; width 0 fills it."""
        raise NotImplementedError


class PygameSurface(Surface):
    """Surface drawing onto a pygame.Surface (usually the display)."""

    def __init__(self, target: pygame.Surface) -> None:
        super().__init__()
        self.target = target

    @property
    def size(self) -> Tuple[int, int]:
        return self.target.get_size()

    def _clip(self, rect: PixelRect) -> Optional[pygame.Rect]:
        # Near walls produce strips far taller than the screen; clamp before
        # building a Rect so the integer conversion cannot overflow.
        width, height = self.target.get_size()
        x0 = min(max(rect[0], 0.0), width)
        y0 = min(max(rect[1], 0.0), height)
        x1 = min(max(rect[0] + rect[2], 0.0), width)
        y1 = min(max(rect[1] + rect[3], 0.0), height)
        left, top = int(round(x0)), int(round(y0))
        right, bottom = int(round(x1)), int(round(y1))
        if right <= left or bottom <= top:
            return None
        return pygame.Rect(left, top, right - left, bottom - top)

    def _fill(self, color: Color) -> None:
        self.target.fill(pygame.Color(color))

    def _fill_rect_px(self, rect: PixelRect, color: Color) -> None:
        clipped = self._clip(rect)
        if clipped is not None:
            self.target.fill(pygame.Color(color), clipped)

    def _line_px(self, start: Vector2, end: Vector2, color: Color, width: int) -> None:
        pygame.draw.line(
            self.target,
            pygame.Color(color),
            (round(start.x), round(start.y)),
            (round(end.x), round(end.y)),
            width,
        )

    def _ellipse_px(self, rect: PixelRect, color: Color, width: int) -> None:
        box = pygame.Rect(
            round(rect[0]), round(rect[1]), max(1, round(rect[2])), max(1, round(rect[3]))
        )
        pygame.draw.ellipse(self.target, pygame.Color(color), box, width)
