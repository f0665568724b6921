from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

from .directions import CARDINALS, DELTA, OPPOSITE, WALL_ATTR, Direction, exhaust


@dataclass(unsafe_hash=True)
class Cell:
    # Identity is (x, y); walls are True while the passage is closed.
    x: int
    y: int
    north: bool = field(default=True, compare=False)
    south: bool = field(default=True, compare=False)
    east: bool = field(default=True, compare=False)
    west: bool = field(default=True, compare=False)

    def wall(self, direction: Direction) -> bool:
        return getattr(self, WALL_ATTR[direction])


def cell_id(cell: Cell) -> str:
    return f"{cell.x}:{cell.y}"


@dataclass(eq=False)
class Grid:
    rows: int
    columns: int
    cells: List[List[Cell]]

    def __eq__(self, other) -> bool:
        # Cell equality ignores walls, so compare the wall state explicitly.
        if not isinstance(other, Grid):
            return NotImplemented
        return (self.rows, self.columns, self.wall_matrix()) == (other.rows, other.columns, other.wall_matrix())

    @classmethod
    def create(cls, rows: int, columns: int) -> "Grid":
        """Fresh grid with every wall of every cell closed."""
        if rows <= 0 or columns <= 0:
            raise ValueError(f"grid needs rows >= 1 and columns >= 1, got {rows}x{columns}")
        cells = [[Cell(x, y) for x in range(columns)] for y in range(rows)]
        return cls(rows=rows, columns=columns, cells=cells)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.columns and 0 <= y < self.rows

    def cell(self, x: int, y: int) -> Cell:
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside a {self.columns}x{self.rows} grid")
        return self.cells[y][x]

    def contains(self, cell: Cell) -> bool:
        return self.in_bounds(cell.x, cell.y)

    def __iter__(self) -> Iterator[Cell]:
        for row in self.cells:
            yield from row

    def move(self, cell: Cell, direction: Direction) -> Cell:
        """Neighbour in `direction`, ignoring walls. Off-grid is an error."""
        if direction is Direction.NONE:
            return self.cell(cell.x, cell.y)
        elif direction in (Direction.N, Direction.E, Direction.S, Direction.W):
            dx, dy = DELTA[direction]
        else:
            exhaust(direction)
        return self.cell(cell.x + dx, cell.y + dy)

    def carve(self, cell: Cell, direction: Direction) -> None:
        """Open the wall between `cell` and its neighbour in `direction`."""
        if direction is Direction.NONE:
            return
        elif direction in (Direction.N, Direction.E, Direction.S, Direction.W):
            here = self.cell(cell.x, cell.y)
            there = self.move(here, direction)
        else:
            exhaust(direction)
        setattr(here, WALL_ATTR[direction], False)
        setattr(there, WALL_ATTR[OPPOSITE[direction]], False)

    def in_bounds_directions(self, cell: Cell) -> List[Direction]:
        out = []
        for d in CARDINALS:
            dx, dy = DELTA[d]
            if self.in_bounds(cell.x + dx, cell.y + dy):
                out.append(d)
        return out

    def adjacent_cells(self, cell: Cell) -> List[Cell]:
        return [self.move(cell, d) for d in self.in_bounds_directions(cell)]

    def open_neighbors(self, cell: Cell) -> List[Cell]:
        here = self.cell(cell.x, cell.y)
        return [self.move(here, d) for d in self.in_bounds_directions(here) if not here.wall(d)]

    def passage_count(self) -> int:
        # Each passage counted once, from its west/north side.
        n = 0
        for c in self:
            if c.x < self.columns - 1 and not c.east:
                n += 1
            if c.y < self.rows - 1 and not c.south:
                n += 1
        return n

    def wall_matrix(self) -> List[List[Tuple[bool, bool, bool, bool]]]:
        """Row-major (north, east, south, west) flags, for renderers."""
        return [[(c.north, c.east, c.south, c.west) for c in row] for row in self.cells]

    def copy(self) -> "Grid":
        cells = [[Cell(c.x, c.y, c.north, c.south, c.east, c.west) for c in row] for row in self.cells]
        return Grid(rows=self.rows, columns=self.columns, cells=cells)
