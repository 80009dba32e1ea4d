# region Imports
from dataclasses import dataclass
from typing import Iterable
import numpy as np
# endregion

# region Mask Grid
@dataclass
class MaskGrid:
    """
    Map backed by a boolean mask.
    blocked: (H,W) bool, True = impassable, indexed [y, x]
    """
    blocked: np.ndarray

    def __post_init__(self):
        self.blocked = np.asarray(self.blocked, dtype=bool)
        if self.blocked.ndim != 2:
            raise ValueError(f"blocked mask must be 2-D, got shape {self.blocked.shape}")

    def width(self) -> int:
        return int(self.blocked.shape[1])

    def height(self) -> int:
        return int(self.blocked.shape[0])

    def is_out_of_bounds(self, x: int, y: int) -> bool:
        H, W = self.blocked.shape
        return not (0 <= x < W and 0 <= y < H)

    def is_passable(self, x: int, y: int) -> bool:
        if self.is_out_of_bounds(x, y):
            return False
        return not self.blocked[y, x]
# endregion

# region Builders
def grid_from_strings(rows: Iterable[str], wall: str = "#") -> MaskGrid:
    """
    Build a MaskGrid from ASCII rows, e.g.

        grid_from_strings(["..#",
                           "...",])

    Any character in `wall` is impassable. Rows must be the same length.
    """
    rows = list(rows)
    if not rows:
        raise ValueError("at least one row required")
    W = len(rows[0])
    for i, row in enumerate(rows):
        if len(row) != W:
            raise ValueError(f"row {i} has length {len(row)}, expected {W}")
    blocked = np.array([[ch in wall for ch in row] for row in rows], dtype=bool)
    return MaskGrid(blocked)


def grid_from_array(passable: np.ndarray) -> MaskGrid:
    """(H,W) truthy = passable."""
    return MaskGrid(~np.asarray(passable, dtype=bool))
# endregion
