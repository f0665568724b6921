# src/mazegen/mapgen/sidewinder.py
# Sidewinder: east carves extend a run; a north carve closes it from a random member.

from ..directions import Direction
from ..grid import Grid
from ..rng import RandomSource
from .rules import History, check_bias, record, row_scan_direction


def generate_sidewinder(
    rows: int,
    columns: int,
    rng: RandomSource,
    bias: float,
    history: History = None,
) -> Grid:
    """
    Rows are scanned top to bottom. The open run spans columns [left, right);
    `right` advances before each decision, so the current cell is always the
    last member. When the rule says north, one member is drawn with
    next_below(right - left) and carves north instead, and the next run
    starts at column `right`.
    """
    check_bias(bias)
    grid = Grid.create(rows, columns)
    for row in grid.cells:
        left = 0
        right = left
        for cell in row:
            right += 1
            d = row_scan_direction(cell, grid, rng, bias)
            if d is Direction.N:
                member = row[left + rng.next_below(right - left)]
                grid.carve(member, d)
                left = right
            else:
                grid.carve(cell, d)
            record(grid, history)
    return grid
