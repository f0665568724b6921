# src/mazegen/mapgen/rules.py
# Direction rule shared by the row-scan generators (binary tree, sidewinder).

from typing import List, Optional

from ..directions import Direction
from ..grid import Cell, Grid
from ..rng import RandomSource

History = Optional[List[Grid]]


def check_bias(bias: float) -> None:
    if not (0.0 <= bias <= 1.0):
        raise ValueError(f"bias must be within [0, 1], got {bias}")


def row_scan_direction(cell: Cell, grid: Grid, rng: RandomSource, bias: float) -> Direction:
    """
    Pick north or east for `cell`:
      - top-right corner: nothing to carve
      - right column: only north is legal
      - top row: only east is legal
      - elsewhere: one float draw, east when it is strictly below `bias`
    Only the last case consumes the random stream.
    """
    is_right_edge = cell.x == grid.columns - 1
    is_top_edge = cell.y == 0

    if is_top_edge and is_right_edge:
        return Direction.NONE
    if is_right_edge:
        return Direction.N
    if is_top_edge:
        return Direction.E
    return Direction.E if rng.next_float() < bias else Direction.N


def record(grid: Grid, history: History) -> None:
    if history is not None:
        history.append(grid.copy())
