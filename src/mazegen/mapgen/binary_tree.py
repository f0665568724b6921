# src/mazegen/mapgen/binary_tree.py
# Binary tree: every cell opens exactly one passage, north or east.

from ..grid import Grid
from ..rng import RandomSource
from .rules import History, check_bias, record, row_scan_direction


def generate_binary_tree(
    rows: int,
    columns: int,
    rng: RandomSource,
    bias: float,
    history: History = None,
) -> Grid:
    """
    Carve a perfect maze in row-major order (top row first, left to right).
    `bias` is the chance of carving east over north for interior cells.
    The visiting order fixes how the random stream maps onto walls, so
    the same seed always yields the same maze.
    """
    check_bias(bias)
    grid = Grid.create(rows, columns)
    for row in grid.cells:
        for cell in row:
            grid.carve(cell, row_scan_direction(cell, grid, rng, bias))
            record(grid, history)
    return grid
