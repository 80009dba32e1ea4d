# region Imports
from __future__ import annotations
from typing import TYPE_CHECKING, Callable, List, Sequence, Tuple
from .models import WeightedPoint

if TYPE_CHECKING:
    from .dmap import DijkstraMap
# endregion

NeighbourFunc = Callable[["DijkstraMap", int, int], List[WeightedPoint]]

# region Offset Tables
# Enumeration order decides lowest_neighbour ties: E, W, N, S, then SE, NE, SW, NW
STEPS4: Tuple[Tuple[int, int], ...] = ((1, 0), (-1, 0), (0, -1), (0, 1))
STEPS8: Tuple[Tuple[int, int], ...] = STEPS4 + ((1, 1), (1, -1), (-1, 1), (-1, -1))
# endregion

# region Reference Topologies
def manhattan_neighbours(d: DijkstraMap, x: int, y: int) -> List[WeightedPoint]:
    """East, west, north and south of (x, y)."""
    return [d.value_at(x + dx, y + dy) for dx, dy in STEPS4]


def diagonal_neighbours(d: DijkstraMap, x: int, y: int) -> List[WeightedPoint]:
    """The manhattan neighbours followed by SE, NE, SW and NW."""
    return [d.value_at(x + dx, y + dy) for dx, dy in STEPS8]
# endregion

# region Custom Topology Factory
def offset_neighbours(offsets: Sequence[Tuple[int, int]]) -> NeighbourFunc:
    """
    Build a topology from (dx, dy) offsets, sampled in the order given.
    e.g. offset_neighbours([(2, 1), (1, 2)]) for knight-ish moves.
    """
    steps = tuple((int(dx), int(dy)) for dx, dy in offsets)
    if not steps:
        raise ValueError("offsets must not be empty")

    def fn(d: DijkstraMap, x: int, y: int) -> List[WeightedPoint]:
        return [d.value_at(x + dx, y + dy) for dx, dy in steps]

    return fn
# endregion
