from .config import RANK_DTYPE, RANK_MAX
from .models import Map, Point, WeightedPoint
from .grid import MaskGrid, grid_from_array, grid_from_strings
from .neighbors import (
    STEPS4, STEPS8,
    diagonal_neighbours, manhattan_neighbours, offset_neighbours,
)
from .dmap import DijkstraMap, blank_dmap

__all__ = [
    "RANK_DTYPE", "RANK_MAX",
    "Map", "Point", "WeightedPoint",
    "MaskGrid", "grid_from_array", "grid_from_strings",
    "STEPS4", "STEPS8",
    "diagonal_neighbours", "manhattan_neighbours", "offset_neighbours",
    "DijkstraMap", "blank_dmap",
]
