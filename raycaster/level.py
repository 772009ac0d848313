"""
Level loading: the static scene grid and camera start, read from a JSON file.
"""

from __future__ import annotations
import os
import json
import math
import logging
from typing import NamedTuple, Optional

from .config import LEVEL_FILE, CAMERA_START, CAMERA_ANGLE
from .scene import SceneGrid
from .vector import Vector2

logger = logging.getLogger(__name__)


class Level(NamedTuple):
    """Everything a level defines: the grid and where the camera starts."""

    grid: SceneGrid
    position: Vector2
    heading: float


def _parse_color(value):
    # JSON has no tuples; RGB colors arrive as lists
    if isinstance(value, list):
        return tuple(int(c) for c in value)
    return value


def load_level(path: Optional[str] = None) -> Level:
    """
    Load a level from a JSON file (defaults to LEVEL_FILE inside the package).

    Expected layout:
        {"scene": [[null, "green", ...], ...],
         "camera": {"pos": [x, y], "angle": degrees}}
    The camera entry is optional. Raises RuntimeError if the file cannot be
    read or does not describe a valid grid.
    """
    level_path = path or os.path.join(os.path.dirname(__file__), LEVEL_FILE)
    try:
        with open(level_path, "r") as f:
            data = json.load(f)
        scene = data.get("scene")
        if not isinstance(scene, list):
            raise ValueError("missing 'scene' table")
        grid = SceneGrid(
            [[_parse_color(value) for value in row] for row in scene]
        )
        position = Vector2(*CAMERA_START)
        heading = math.radians(CAMERA_ANGLE)
        cam = data.get("camera")
        if isinstance(cam, dict):
            pos = cam.get("pos")
            if isinstance(pos, (list, tuple)) and len(pos) == 2:
                position = Vector2(float(pos[0]), float(pos[1]))
            ang = cam.get("angle")
            if ang is not None:
                heading = math.radians(float(ang))
    except (OSError, ValueError, TypeError, AttributeError) as e:
        logger.error("Level load failed: %s", e)
        raise RuntimeError(f"Failed to load level from {level_path}: {e}")
    logger.info(
        "Loaded level %s (%dx%d)", level_path, grid.cols, grid.rows
    )
    return Level(grid, position, heading)
