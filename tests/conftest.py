import pytest

from raycaster.scene import SceneGrid
from raycaster.surface import Surface


class RecordingSurface(Surface):
    """Surface stub that records pixel-space draw calls instead of drawing."""

    def __init__(self, width=800, height=600):
        super().__init__()
        self._size = (width, height)
        self.calls = []

    @property
    def size(self):
        return self._size

    def _fill(self, color):
        self.calls.append(("fill", color))

    def _fill_rect_px(self, rect, color):
        self.calls.append(("rect", rect, color))

    def _line_px(self, start, end, color, width):
        self.calls.append(("line", start, end, color, width))

    def _ellipse_px(self, rect, color, width):
        self.calls.append(("ellipse", rect, color, width))

    def of_kind(self, kind):
        return [call for call in self.calls if call[0] == kind]


@pytest.fixture
def recording_surface():
    return RecordingSurface()


@pytest.fixture
def scenario_grid():
    """11x11 grid: column 1 is green except row 0, which is red."""
    rows = []
    for y in range(11):
        row = [None] * 11
        row[1] = "red" if y == 0 else "green"
        rows.append(row)
    return SceneGrid(rows)


@pytest.fixture
def wall_grid():
    """11x11 grid with column 8 fully occupied by a blue wall."""
    rows = []
    for _ in range(11):
        row = [None] * 11
        row[8] = "blue"
        rows.append(row)
    return SceneGrid(rows)
