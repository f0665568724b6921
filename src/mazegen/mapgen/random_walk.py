# src/mazegen/mapgen/random_walk.py
# Random walk: wander uniformly over in-bounds steps, carve only on first visits.

from typing import Set

from ..grid import Cell, Grid
from ..rng import RandomSource
from .rules import History, record


def generate_random_walk(
    width: int,
    height: int,
    rng: RandomSource,
    history: History = None,
) -> Grid:
    """
    Start on a random cell (column draw, then row draw) and walk until every
    cell has been visited. A step into a visited cell carves nothing but the
    walk still moves there, which lets it leave regions it has exhausted.
    A random walk on a finite connected grid covers it with probability 1,
    so the loop has no step cap.
    """
    grid = Grid.create(rows=height, columns=width)

    x_start = rng.next_below(width)
    y_start = rng.next_below(height)
    current = grid.cell(x_start, y_start)
    visited: Set[Cell] = {current}

    size = width * height
    while len(visited) < size:
        d = rng.choose(grid.in_bounds_directions(current))
        nxt = grid.move(current, d)
        if nxt not in visited:
            grid.carve(current, d)
            visited.add(nxt)
            record(grid, history)
        current = nxt

    return grid
