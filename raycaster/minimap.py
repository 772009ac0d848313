"""
Top-down minimap: grid, camera marker, FOV cone and one line per cast ray,
drawn in its own scaled and translated corner of the surface.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Tuple

from .caster import cast_ray, trace_ray
from .config import (
    EPS,
    FOV_SAMPLING,
    STRIP_COUNT,
    MINIMAP_POSITION,
    MINIMAP_CELL_SIZE,
    MINIMAP_ARM_LENGTH,
    MINIMAP_BACKGROUND,
    GRID_LINE_COLOR,
    GRID_LINE_WIDTH,
    RAY_LINE_WIDTH,
    CAMERA_COLOR,
    CAMERA_RADIUS,
    FOV_COLOR,
    RAY_COLOR,
    TRACE_COLOR,
    TRACE_RADIUS,
)
from .vector import Vector2

if TYPE_CHECKING:
    from .camera import Camera
    from .scene import SceneGrid
    from .surface import Surface


def minimap_to_grid(
    pixel: Tuple[float, float],
    position: Tuple[float, float] = MINIMAP_POSITION,
    cell_size: float = MINIMAP_CELL_SIZE,
) -> Vector2:
    """Convert a screen pixel to map units under the minimap transform."""
    return Vector2(
        (pixel[0] - position[0]) / cell_size,
        (pixel[1] - position[1]) / cell_size,
    )


def _draw_grid(surface: Surface, grid: SceneGrid) -> None:
    surface.fill_rect(Vector2(0, 0), Vector2(grid.cols, grid.rows), MINIMAP_BACKGROUND)
    for x in range(grid.cols + 1):
        surface.stroke_line(
            Vector2(x, 0), Vector2(x, grid.rows), GRID_LINE_COLOR, GRID_LINE_WIDTH
        )
    for y in range(grid.rows + 1):
        surface.stroke_line(
            Vector2(0, y), Vector2(grid.cols, y), GRID_LINE_COLOR, GRID_LINE_WIDTH
        )
    for (x, y), color in grid.occupied_cells():
        surface.fill_rect(Vector2(x, y), Vector2(1, 1), color)


def render_minimap(
    surface: Surface,
    grid: SceneGrid,
    camera: Camera,
    position: Tuple[float, float] = MINIMAP_POSITION,
    cell_size: float = MINIMAP_CELL_SIZE,
    strip_count: int = STRIP_COUNT,
    sampling: str = FOV_SAMPLING,
    trace: bool = False,
) -> int:
    """
    Draw the minimap and return the number of ray lines drawn.

    Rays that leave the grid without hitting a wall are not drawn. With
    trace=True every grid-line crossing of the central ray is marked.
    """
    drawn = 0
    with surface.transformed(position, (cell_size, cell_size)):
        _draw_grid(surface, grid)

        eye = camera.position
        for target in camera.fov_samples(EPS, strip_count, sampling):
            hit = cast_ray(eye, target, grid)
            if grid.is_occupied(hit.cell):
                surface.stroke_line(eye, hit.point, RAY_COLOR, RAY_LINE_WIDTH)
                drawn += 1

        left, right = camera.fov_boundary_rays(MINIMAP_ARM_LENGTH)
        surface.stroke_line(eye, left, FOV_COLOR, GRID_LINE_WIDTH)
        surface.stroke_line(eye, right, FOV_COLOR, GRID_LINE_WIDTH)
        surface.circle(eye, CAMERA_RADIUS, CAMERA_COLOR, fill=CAMERA_COLOR)

        if trace:
            for point in trace_ray(eye, camera.line_of_sight_point(), grid):
                surface.circle(point, TRACE_RADIUS, TRACE_COLOR, fill=TRACE_COLOR)
    return drawn


def minimap_contains(
    pixel: Tuple[float, float],
    grid: SceneGrid,
    position: Tuple[float, float] = MINIMAP_POSITION,
    cell_size: float = MINIMAP_CELL_SIZE,
) -> bool:
    """Return True if the pixel falls on the drawn minimap."""
    point = minimap_to_grid(pixel, position, cell_size)
    return 0 <= point.x < grid.cols and 0 <= point.y < grid.rows
