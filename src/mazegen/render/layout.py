# src/mazegen/render/layout.py
# Screen geometry shared by the PNG and pygame renderers.

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..grid import Cell, Grid

Segment = Tuple[Tuple[int, int], Tuple[int, int]]


@dataclass(frozen=True)
class Layout:
    cell_size: int
    x_offset: int
    y_offset: int

    def cell_box(self, cell: Cell) -> Tuple[int, int, int, int]:
        x0 = self.x_offset + cell.x * self.cell_size
        y0 = self.y_offset + cell.y * self.cell_size
        return x0, y0, x0 + self.cell_size, y0 + self.cell_size


def fit(grid: Grid, width: int, height: int, padding: int = 0) -> Layout:
    """
    Square cells as large as fit, centred in the padded area. One pixel
    column and row is held back so the closing east and south borders
    stay on the canvas.
    """
    inner_w, inner_h = width - 2 * padding - 1, height - 2 * padding - 1
    size = min(inner_w // grid.columns, inner_h // grid.rows)
    if size <= 0:
        raise ValueError(f"{width}x{height} canvas is too small for a {grid.columns}x{grid.rows} grid")
    x_off = padding + (inner_w - grid.columns * size) // 2
    y_off = padding + (inner_h - grid.rows * size) // 2
    return Layout(size, x_off, y_off)


def wall_segments(grid: Grid, layout: Layout) -> List[Segment]:
    """
    Closed walls as line segments. The top and left borders are drawn once
    for the whole grid; each cell then only contributes its south and east
    walls, so shared walls are never drawn twice.
    """
    s, ox, oy = layout.cell_size, layout.x_offset, layout.y_offset
    segs: List[Segment] = [
        ((ox, oy), (ox + s * grid.columns, oy)),
        ((ox, oy), (ox, oy + s * grid.rows)),
    ]
    for c in grid:
        x0, y0, x1, y1 = layout.cell_box(c)
        if c.south:
            segs.append(((x0, y1), (x1, y1)))
        if c.east:
            segs.append(((x1, y0), (x1, y1)))
    return segs


def cell_at(grid: Grid, layout: Layout, pos: Tuple[int, int]) -> Optional[Cell]:
    """Cell under a pixel position, or None outside the maze."""
    px, py = pos
    if px < layout.x_offset or py < layout.y_offset:
        return None
    x = (px - layout.x_offset) // layout.cell_size
    y = (py - layout.y_offset) // layout.cell_size
    if not grid.in_bounds(x, y):
        return None
    return grid.cell(x, y)
