# region Imports
from dataclasses import dataclass
from typing import Protocol, Tuple, Union, runtime_checkable
# endregion

# region Contracts
@runtime_checkable
class Point(Protocol):
    """Anything that can report an (x, y) cell coordinate."""

    def get_xy(self) -> Tuple[int, int]: ...


class Map(Protocol):
    """
    Terrain a field is computed over.

    Every method is called once or more per cell per sweep, so keep them O(1).
    Dimensions must not change for the lifetime of a DijkstraMap; build a new
    one if they do. is_passable should tolerate any int, in bounds or not.
    """

    def width(self) -> int: ...

    def height(self) -> int: ...

    def is_passable(self, x: int, y: int) -> bool: ...

    def is_out_of_bounds(self, x: int, y: int) -> bool: ...
# endregion

# region Weighted Sample
@dataclass(frozen=True)
class WeightedPoint:
    x: int
    y: int
    val: int

    def get_xy(self) -> Tuple[int, int]:
        return self.x, self.y
# endregion

# Targets may be Points or bare (x, y) tuples
Target = Union[Point, Tuple[int, int]]


def target_xy(p: Target) -> Tuple[int, int]:
    if isinstance(p, Point):
        x, y = p.get_xy()
    else:
        x, y = p
    return int(x), int(y)
