# src/mazegen/mapgen/generator.py
# Single entry point: algorithm name + seed -> carved grid.

from typing import Optional

from ..config import DEMO_DEFAULTS
from ..grid import Grid
from ..rng import PMRandom
from .binary_tree import generate_binary_tree
from .random_walk import generate_random_walk
from .rules import History
from .sidewinder import generate_sidewinder

ALGORITHMS = ("side-winder", "binary", "random-walk")


def generate_grid(
    algorithm: str,
    rows: int,
    columns: int,
    seed: int,
    bias: Optional[float] = None,
    history: History = None,
) -> Grid:
    """Build a fresh PMRandom(seed) and run the named generator with it."""
    if algorithm not in ALGORITHMS:
        raise ValueError(f"unknown algorithm {algorithm!r}; expected one of {', '.join(ALGORITHMS)}")
    if bias is None:
        bias = DEMO_DEFAULTS[algorithm].bias

    rng = PMRandom(seed)
    if algorithm == "side-winder":
        return generate_sidewinder(rows, columns, rng, bias, history=history)
    elif algorithm == "binary":
        return generate_binary_tree(rows, columns, rng, bias, history=history)
    else:
        return generate_random_walk(columns, rows, rng, history=history)


def generate_demo(algorithm: str, history: History = None) -> Grid:
    d = DEMO_DEFAULTS[algorithm]
    return generate_grid(algorithm, d.rows, d.columns, d.seed, d.bias, history=history)
