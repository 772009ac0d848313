"""
First-person wall projection: one ray per vertical strip across the FOV.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

import numpy as np

from .caster import cast_ray
from .config import EPS, FOV_SAMPLING, STRIP_COUNT
from .vector import Vector2

if TYPE_CHECKING:
    from .camera import Camera
    from .scene import SceneGrid
    from .surface import Surface


def render_scene(
    surface: Surface,
    grid: SceneGrid,
    camera: Camera,
    strip_count: int = STRIP_COUNT,
    sampling: str = FOV_SAMPLING,
) -> np.ndarray:
    """
    Draw one colored wall strip per column and return the strip heights.

    Strips whose ray leaves the grid are skipped (height NaN) so the
    background shows through. Heights use the distance projected onto the
    camera's forward axis rather than the raw hit distance, which keeps flat
    walls flat instead of bowing them into a fisheye arc.
    """
    width, height = surface.size
    strip_width = width / strip_count
    forward = camera.direction()
    heights = np.full(strip_count, np.nan, dtype=np.float64)
    # Boundary arms of length EPS start each traversal right at the eye
    for i, target in enumerate(camera.fov_samples(EPS, strip_count, sampling)):
        hit = cast_ray(camera.position, target, grid)
        if not grid.is_occupied(hit.cell):
            continue
        perpendicular = (hit.point - camera.position).dot(forward)
        strip_height = height / perpendicular
        heights[i] = strip_height
        surface.fill_rect(
            Vector2(i * strip_width, (height - strip_height) / 2),
            Vector2(strip_width, strip_height),
            grid.color_at(hit.cell),
        )
    return heights
