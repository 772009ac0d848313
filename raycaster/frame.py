"""
Frame driver: clears the surface and runs the first-person and minimap passes.
"""

from __future__ import annotations
import logging
from typing import TYPE_CHECKING

import numpy as np

from .config import BACKGROUND_COLOR, FOV_SAMPLING, STRIP_COUNT
from .first_person import render_scene
from .minimap import render_minimap

if TYPE_CHECKING:
    from .camera import Camera
    from .scene import SceneGrid
    from .surface import Surface

logger = logging.getLogger(__name__)


def render_frame(
    surface: Surface,
    grid: SceneGrid,
    camera: Camera,
    strip_count: int = STRIP_COUNT,
    sampling: str = FOV_SAMPLING,
    show_trace: bool = False,
) -> np.ndarray:
    """Render one full frame for the given camera state; returns strip heights."""
    surface.clear(BACKGROUND_COLOR)
    heights = render_scene(surface, grid, camera, strip_count, sampling)
    rays = render_minimap(
        surface,
        grid,
        camera,
        strip_count=strip_count,
        sampling=sampling,
        trace=show_trace,
    )
    logger.debug(
        "Frame at %r: %d/%d strips drawn, %d minimap rays",
        camera,
        int(np.count_nonzero(~np.isnan(heights))),
        strip_count,
        rays,
    )
    return heights
