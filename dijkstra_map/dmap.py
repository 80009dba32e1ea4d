"""
Brogue-style "Dijkstra" maps.

A DijkstraMap holds one rank per cell of a Map: 0 on targets, otherwise the
number of unit steps to the nearest target through passable cells. An agent
approaches a target by stepping to its lowest-ranked neighbour. Ranks are
found by sweeping the whole grid until nothing changes, not by a
priority-queue search.

    m = grid_from_strings(["....", ".##.", "...."])
    d = blank_dmap(m, manhattan_neighbours)
    d.calc((0, 0))
    d.lowest_neighbour(3, 2)
"""

# region Imports
from __future__ import annotations
import logging
from typing import List, Optional, Tuple
import numpy as np

from .config import RANK_DTYPE, RANK_MAX, RENDER_CELL_WIDTH
from .models import Map, Target, WeightedPoint, target_xy
from .neighbors import NeighbourFunc, manhattan_neighbours
# endregion

logger = logging.getLogger(__name__)


# region Dijkstra Map
class DijkstraMap:
    """
    points:          (H,W) rank array, indexed [y, x]
    m:               the Map the ranks describe
    neighbour_func:  topology, (d, x, y) -> [WeightedPoint, ...]
    reflected:       also relax the point-reflected cell on every step of a
                     sweep; converges in fewer sweeps to the same field
    """

    def __init__(
        self,
        points: np.ndarray,
        m: Map,
        neighbour_func: NeighbourFunc = manhattan_neighbours,
        *,
        reflected: bool = True,
    ):
        self.points = points
        self.m = m
        self.neighbour_func = neighbour_func
        self.reflected = reflected

    # region Shape
    @property
    def width(self) -> int:
        return int(self.points.shape[1])

    @property
    def height(self) -> int:
        return int(self.points.shape[0])

    def _check_shape(self):
        W, H = self.m.width(), self.m.height()
        if (H, W) != self.points.shape:
            raise ValueError(
                f"map is now {W}x{H} but ranks were allocated for "
                f"{self.width}x{self.height}; build a new map with blank_dmap()"
            )
    # endregion

    # region Lookups
    def value_at(self, x: int, y: int) -> WeightedPoint:
        """Rank at (x, y). Out-of-bounds cells rank RANK_MAX."""
        if self.m.is_out_of_bounds(x, y):
            return WeightedPoint(x, y, RANK_MAX)
        return WeightedPoint(x, y, int(self.points[y, x]))

    def lowest_neighbour(self, x: int, y: int) -> WeightedPoint:
        """
        Lowest-ranked neighbour of (x, y) under the topology. Ties go to the
        first one enumerated; if every neighbour is RANK_MAX, the first.
        """
        vals = self.neighbour_func(self, x, y)
        if not vals:
            raise ValueError(f"neighbour function returned no neighbours for ({x}, {y})")
        lv = RANK_MAX
        ret = vals[0]
        for val in vals:
            if val.val < lv:
                lv = val.val
                ret = val
        return ret
    # endregion

    # region Relaxation
    def _relax(self, x: int, y: int) -> bool:
        if not self.m.is_passable(x, y):
            return False
        candidate = self.lowest_neighbour(x, y).val + 1
        if self.points[y, x] > candidate:
            self.points[y, x] = candidate
            return True
        return False

    def _target_cells(self, targets) -> List[Tuple[int, int]]:
        cells = [target_xy(p) for p in targets]
        for x, y in cells:
            if self.m.is_out_of_bounds(x, y):
                raise IndexError(f"target ({x}, {y}) is outside the {self.width}x{self.height} map")
        return cells

    def _settle(self, cells: List[Tuple[int, int]]) -> int:
        for x, y in cells:
            self.points[y, x] = 0

        H, W = self.points.shape
        sweeps = 0
        mutations = 0
        made_mutation = True
        while made_mutation:
            made_mutation = False
            sweeps += 1
            for y in range(H):
                for x in range(W):
                    if self._relax(x, y):
                        made_mutation = True
                        mutations += 1
                    if self.reflected and self._relax(W - 1 - x, H - 1 - y):
                        made_mutation = True
                        mutations += 1

        logger.debug(
            "calc: %d target(s), %d sweep(s), %d mutation(s) on %dx%d",
            len(cells), sweeps, mutations, W, H,
        )
        return sweeps

    def calc(self, *targets: Target) -> int:
        """
        Set every target to 0 and relax until a full sweep changes nothing.
        Returns the number of sweeps taken, counting the final quiet one.

        Other cells are left as they are, so start from a blank map
        (blank_dmap) or use recalc(). Targets are set to 0 whether or not
        they are passable. No targets leaves the field untouched. An
        out-of-bounds target raises IndexError before anything is written.
        """
        return self._settle(self._target_cells(targets))

    def recalc(self, *targets: Target) -> int:
        """blank + calc, reusing the rank array. The map must not have changed size."""
        self._check_shape()
        cells = self._target_cells(targets)
        self.points.fill(RANK_MAX)
        return self._settle(cells)
    # endregion

    # region Output
    def as_array(self) -> np.ndarray:
        return self.points.copy()

    def render(self, cell_width: Optional[int] = None) -> str:
        """One line per row, each cell formatted as "%6d, "."""
        w = RENDER_CELL_WIDTH if cell_width is None else cell_width
        lines: List[str] = []
        for row in self.points:
            lines.append("".join(f"{int(v):{w}d}, " for v in row))
        return "".join(line + "\n" for line in lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"DijkstraMap({self.width}x{self.height}, "
            f"neighbour_func={getattr(self.neighbour_func, '__name__', self.neighbour_func)!r})"
        )
    # endregion
# endregion

# region Construction
def blank_dmap(
    m: Map,
    neighbour_func: NeighbourFunc = manhattan_neighbours,
    *,
    reflected: bool = True,
) -> DijkstraMap:
    """
    Allocate a map sized to `m` with every cell at RANK_MAX. Use recalc() for
    later updates; it doesn't reallocate.
    """
    W, H = int(m.width()), int(m.height())
    if W <= 0 or H <= 0:
        raise ValueError(f"map must be at least 1x1, got {W}x{H}")
    points = np.full((H, W), RANK_MAX, dtype=RANK_DTYPE)
    logger.debug("blank_dmap: allocated %dx%d ranks", W, H)
    return DijkstraMap(points, m, neighbour_func, reflected=reflected)
# endregion
