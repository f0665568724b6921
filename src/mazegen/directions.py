# Closed direction set used by carve/move dispatch.

from enum import Enum
from typing import Dict, NoReturn, Tuple


class Direction(Enum):
    N = "N"
    E = "E"
    S = "S"
    W = "W"
    NONE = "None"


# Step order for every neighbour query (N, E, S, W).
CARDINALS: Tuple[Direction, ...] = (Direction.N, Direction.E, Direction.S, Direction.W)

# (dx, dy); y grows downward, row 0 is the top edge
DELTA: Dict[Direction, Tuple[int, int]] = {
    Direction.N: (0, -1),
    Direction.E: (1, 0),
    Direction.S: (0, 1),
    Direction.W: (-1, 0),
    Direction.NONE: (0, 0),
}

OPPOSITE: Dict[Direction, Direction] = {
    Direction.N: Direction.S,
    Direction.S: Direction.N,
    Direction.E: Direction.W,
    Direction.W: Direction.E,
    Direction.NONE: Direction.NONE,
}

# Cell attribute holding the wall that faces each direction
WALL_ATTR: Dict[Direction, str] = {
    Direction.N: "north",
    Direction.E: "east",
    Direction.S: "south",
    Direction.W: "west",
}


class UnreachableDirection(RuntimeError):
    pass


def exhaust(direction) -> NoReturn:
    """Fault for a value that slipped past an exhaustive direction dispatch."""
    raise UnreachableDirection(f"Direction dispatch was not exhausted! Got {direction!r}")
