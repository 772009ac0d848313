from __future__ import annotations
import math
from typing import TYPE_CHECKING, List, Optional, Tuple
from .config import EPS, FOV_HALF_ANGLE, MOVE_STEP, ROT_STEP
from .vector import Vector2

if TYPE_CHECKING:
    from .scene import SceneGrid


class Camera:
    """Camera (player) state: position, heading and the FOV derived from them."""

    def __init__(
        self,
        position: Optional[Vector2] = None,
        heading: float = 0.0,
        move_step: float = MOVE_STEP,
        rot_step: float = ROT_STEP,
        half_fov: float = FOV_HALF_ANGLE,
    ) -> None:
        """
        Initialize the camera.
        position: location in map units (floats allowed).
        heading: facing direction in radians, 0 faces +x.
        move_step: distance moved per move/strafe call.
        rot_step: angle turned per rotate call.
        half_fov: half of the field-of-view angle in radians.
        """
        self.position = position if position is not None else Vector2(0.0, 0.0)
        self.heading = heading
        self.move_step = move_step
        self.rot_step = rot_step
        self.half_fov = half_fov

    def __repr__(self) -> str:
        return (
            f"<Camera x={self.position.x:.2f} y={self.position.y:.2f} "
            f"heading={self.heading:.3f}>"
        )

    def direction(self) -> Vector2:
        """Unit vector along the heading."""
        return Vector2.from_angle(self.heading)

    def fov_boundary_rays(self, arm_length: float) -> Tuple[Vector2, Vector2]:
        """Return the (left, right) points arm_length away along the FOV edges."""
        left = self.position + Vector2.from_angle(self.heading - self.half_fov) * arm_length
        right = self.position + Vector2.from_angle(self.heading + self.half_fov) * arm_length
        return left, right

    def line_of_sight_point(self, eps: float = EPS) -> Vector2:
        """Camera position advanced a negligible distance along the heading."""
        return self.position + self.direction() * eps

    def fov_samples(
        self, arm_length: float, count: int, sampling: str = "chord"
    ) -> List[Vector2]:
        """
        Return one sample point per column i in range(count), at t = i / count.

        "chord" interpolates linearly between the two boundary ray endpoints.
        "angular" steps the angle uniformly across the FOV and places each
        point arm_length away from the camera.
        """
        if sampling == "chord":
            left, right = self.fov_boundary_rays(arm_length)
            return [left.lerp(right, i / count) for i in range(count)]
        if sampling == "angular":
            start = self.heading - self.half_fov
            span = 2.0 * self.half_fov
            return [
                self.position + Vector2.from_angle(start + span * i / count) * arm_length
                for i in range(count)
            ]
        raise ValueError(f"Unknown FOV sampling mode: {sampling!r}")

    def _try_step(self, offset: Vector2, grid: SceneGrid) -> None:
        target = self.position + offset
        cell = (math.floor(target.x), math.floor(target.y))
        if not grid.is_occupied(cell):
            self.position = target

    def move(self, direction: int, grid: SceneGrid) -> None:
        """Move forward (direction=1) or backward (direction=-1) unless blocked."""
        self._try_step(self.direction() * (self.move_step * direction), grid)

    def strafe(self, direction: int, grid: SceneGrid) -> None:
        """Strafe right (direction=1) or left (direction=-1) unless blocked."""
        # Perpendicular direction vector (right-handed)
        side = Vector2(-math.sin(self.heading), math.cos(self.heading))
        self._try_step(side * (self.move_step * direction), grid)

    def rotate(self, direction: int) -> None:
        """Rotate left (direction=-1) or right (direction=1)."""
        self.heading += self.rot_step * direction

    def place(self, position: Vector2) -> None:
        """Set the position directly (pointer-driven placement)."""
        self.position = position
