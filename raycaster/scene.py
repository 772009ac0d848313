"""
Scene grid: a fixed rectangular table of optional colors.
A cell is occupied (a wall) when it holds a color and empty when it holds None.
"""

from __future__ import annotations
from typing import Iterator, Optional, Sequence, Tuple, Union

Color = Union[str, Tuple[int, ...]]
Cell = Tuple[int, int]


class SceneGrid:
    """Read-only grid of cells addressed by (col, row)."""

    def __init__(self, rows: Sequence[Sequence[Optional[Color]]]) -> None:
        if not rows or not rows[0]:
            raise ValueError("Scene grid must have at least one row and column")
        width = len(rows[0])
        for index, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(
                    f"Scene row {index} has {len(row)} cells, expected {width}"
                )
        self._cells: Tuple[Tuple[Optional[Color], ...], ...] = tuple(
            tuple(row) for row in rows
        )
        self.rows = len(self._cells)
        self.cols = width

    def __repr__(self) -> str:
        return f"<SceneGrid cols={self.cols} rows={self.rows}>"

    def inside_bounds(self, cell: Cell) -> bool:
        """Return True if cell lies within [0, cols) x [0, rows)."""
        x, y = cell
        return 0 <= x < self.cols and 0 <= y < self.rows

    def color_at(self, cell: Cell) -> Optional[Color]:
        """
        Return the color stored at cell, or None for an empty cell.
        Raises IndexError for a cell outside the grid; check inside_bounds first.
        """
        if not self.inside_bounds(cell):
            raise IndexError(f"Cell {cell} is outside the {self.cols}x{self.rows} grid")
        x, y = cell
        return self._cells[y][x]

    def is_occupied(self, cell: Cell) -> bool:
        """Return True if cell is inside the grid and holds a color."""
        return self.inside_bounds(cell) and self.color_at(cell) is not None

    def occupied_cells(self) -> Iterator[Tuple[Cell, Color]]:
        """Yield ((col, row), color) for every occupied cell, row by row."""
        for y, row in enumerate(self._cells):
            for x, color in enumerate(row):
                if color is not None:
                    yield (x, y), color
