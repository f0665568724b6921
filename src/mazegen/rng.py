from dataclasses import dataclass
from typing import Protocol, Sequence, TypeVar

T = TypeVar("T")

A = 16807
M = 0x7FFFFFFF  # 2^31-1

def pm_next(state: int) -> int:
    return (state * A) % M


class RandomSource(Protocol):
    """What a generator needs from its random stream."""
    def next_float(self) -> float: ...
    def next_below(self, bound: int) -> int: ...
    def choose(self, options: Sequence[T]) -> T: ...


@dataclass
class PMRandom:
    """
    Park–Miller minimal standard generator (advance-then-return).
    The seed is reduced modulo 2^31-1; a zero state would stick at zero,
    so it is replaced by 1.
    """
    state: int

    def __post_init__(self):
        self.state = (self.state % M) or 1

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def next_float(self) -> float:
        # state is 1..M-1, so this is strictly inside [0, 1)
        return self.next32() / M

    def next_below(self, bound: int) -> int:
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")
        return self.next32() % bound

    def choose(self, options: Sequence[T]) -> T:
        if not options:
            raise ValueError("cannot choose from an empty sequence")
        return options[self.next_below(len(options))]
