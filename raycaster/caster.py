"""
Grid ray caster: marches a ray from one grid-line crossing to the next until it
enters an occupied cell or leaves the grid.
"""

from __future__ import annotations
import math
from typing import TYPE_CHECKING, Iterator, List, NamedTuple, Tuple
from .config import EPS, MAX_EXTRA_STEPS
from .vector import Vector2

if TYPE_CHECKING:
    from .scene import SceneGrid


class RayCastError(RuntimeError):
    """Raised when a traversal fails to terminate within its step budget."""


class RayHit(NamedTuple):
    """Where a ray stopped and the cell containing that point."""

    point: Vector2
    # May lie outside the grid when the ray left it without hitting anything
    cell: Tuple[int, int]


def closest_boundary(x: float, dx: float) -> float:
    """
    Snap x to the next integer grid line in the direction of dx, nudged EPS
    past the line so the result falls inside the cell being entered.
    """
    if dx == 0:
        return x
    if dx > 0:
        return math.ceil(x) + EPS
    return math.floor(x) - EPS


def cell_of(point: Vector2) -> Tuple[int, int]:
    """Integer (col, row) of the cell containing point."""
    return (math.floor(point.x), math.floor(point.y))


def ray_step(start: Vector2, end: Vector2) -> Vector2:
    """
    Extend the ray start -> end to the first grid-line crossing beyond end.

    The ray is treated as the line y = kx + c. Both the next vertical and the
    next horizontal grid line are intersected and the crossing closer to end
    wins (the x crossing on an exact tie).
    """
    delta = end - start
    if delta.x == 0 and delta.y == 0:
        raise ValueError("Cannot step a zero-length ray")

    if delta.x == 0:
        return Vector2(end.x, closest_boundary(end.y, delta.y))

    k = delta.y / delta.x
    c = end.y - k * end.x

    x_boundary = closest_boundary(end.x, delta.x)
    x_snapped = Vector2(x_boundary, k * x_boundary + c)
    # A horizontal ray never crosses a horizontal grid line
    if delta.y == 0:
        return x_snapped

    y_boundary = closest_boundary(end.y, delta.y)
    y_snapped = Vector2((y_boundary - c) / k, y_boundary)

    if end.distance_to(x_snapped) > end.distance_to(y_snapped):
        return y_snapped
    return x_snapped


def iter_ray_steps(
    start: Vector2, toward: Vector2, grid: SceneGrid
) -> Iterator[Vector2]:
    """
    Yield each grid-line crossing of the ray from start through toward.

    Stops after the first point whose cell is outside the grid or occupied.
    The toward point itself is checked first: from an eye standing on a grid
    line it already lies in the cell ahead, and it is then the only point
    yielded. Each step crosses at least one grid line, so a ray cast from
    inside the grid needs at most rows + cols steps; RayCastError is raised if
    the traversal runs past that budget.
    """
    if toward == start:
        raise ValueError("Cannot cast a zero-length ray")
    if _stops_at(toward, grid):
        yield toward
        return
    max_steps = grid.rows + grid.cols + MAX_EXTRA_STEPS
    prev, current = start, toward
    for _ in range(max_steps):
        point = ray_step(prev, current)
        yield point
        if _stops_at(point, grid):
            return
        prev, current = current, point
    raise RayCastError(
        f"Ray from {tuple(start)} toward {tuple(toward)} did not terminate "
        f"within {max_steps} steps on {grid!r}"
    )


def _stops_at(point: Vector2, grid: SceneGrid) -> bool:
    cell = cell_of(point)
    return not grid.inside_bounds(cell) or grid.color_at(cell) is not None


def trace_ray(start: Vector2, toward: Vector2, grid: SceneGrid) -> List[Vector2]:
    """Return every crossing point of the ray, ending with the hit point."""
    return list(iter_ray_steps(start, toward, grid))


def cast_ray(start: Vector2, toward: Vector2, grid: SceneGrid) -> RayHit:
    """Cast a ray from start through toward and return where it stops."""
    *_, point = iter_ray_steps(start, toward, grid)
    return RayHit(point, cell_of(point))
