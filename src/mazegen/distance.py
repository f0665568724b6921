# src/mazegen/distance.py
# Breadth-first distance field over the carved passages.

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, Optional

from .grid import Cell, Grid, cell_id


@dataclass
class DistanceField:
    source: str
    distances: Dict[str, int] = field(default_factory=dict)
    # Never 0, so distance / max_distance is always defined.
    max_distance: int = 1

    def distance(self, cell: Cell) -> int:
        return self.distances[cell_id(cell)]

    def intensity(self, cell: Cell) -> float:
        """Distance scaled into [0, 1] for shading."""
        return self.distance(cell) / self.max_distance

    def farthest(self) -> Optional[str]:
        """First cell id in BFS order at the largest real distance."""
        if not self.distances:
            return None
        # max_distance may be the sentinel 1 on a single cell
        top = max(self.distances.values())
        for key, d in self.distances.items():
            if d == top:
                return key
        return None


def compute_distances(source: Cell, grid: Grid) -> DistanceField:
    """
    Hop counts from `source` to every cell through open walls.
    The queue is FIFO, so cells are labelled in non-decreasing distance.
    A maze that leaves cells unreached is not a spanning tree and is refused.
    """
    if not grid.contains(source):
        raise ValueError(f"source ({source.x}, {source.y}) is not a cell of a {grid.columns}x{grid.rows} grid")

    start = grid.cell(source.x, source.y)
    out = DistanceField(source=cell_id(start))
    out.distances[cell_id(start)] = 0
    queue: Deque[Cell] = deque([start])

    while queue:
        current = queue.popleft()
        d = out.distances[cell_id(current)] + 1
        for other in grid.open_neighbors(current):
            key = cell_id(other)
            if key not in out.distances:
                out.distances[key] = d
                queue.append(other)
                out.max_distance = max(out.max_distance, d)

    if len(out.distances) != grid.rows * grid.columns:
        raise RuntimeError(
            f"maze is disconnected: reached {len(out.distances)} of "
            f"{grid.rows * grid.columns} cells from {out.source}"
        )
    return out
