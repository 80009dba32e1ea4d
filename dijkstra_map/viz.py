# region Imports
from typing import Iterable, Optional
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Patch
from matplotlib.lines import Line2D

from .config import HEATMAP_CMAP, HEATMAP_TARGET_COLOR, RANK_MAX
from .dmap import DijkstraMap
from .models import Target, target_xy
# endregion

# region Visualization Function
def show_rank_heatmap(
    dmap: DijkstraMap,
    targets: Optional[Iterable[Target]] = None,
    title: str = "Dijkstra map",
    ax=None,
    show: bool = False,
):
    """
    Render the rank field with blocked and unreached cells masked out.
    Returns (fig, ax); pass show=True to open a window.
    """
    # region Base Image
    ranks = dmap.as_array().astype(np.float32)
    unreached = ranks >= RANK_MAX
    field = np.ma.masked_array(ranks, mask=unreached)
    cmap = plt.get_cmap(HEATMAP_CMAP).copy()
    cmap.set_bad(color="black")
    # endregion

    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 8))
    else:
        fig = ax.figure

    heat = ax.imshow(field, origin="upper", cmap=cmap, interpolation="nearest")
    cbar = fig.colorbar(heat, ax=ax, fraction=0.046, pad=0.04)
    cbar.set_label("rank (steps to nearest target)")

    # region Target Overlay
    pts = [target_xy(p) for p in (targets or [])]
    if pts:
        xs, ys = zip(*pts)
        ax.scatter(xs, ys, s=100, edgecolors="black", facecolors=HEATMAP_TARGET_COLOR,
                   label="Target", zorder=3)
    # endregion

    # region Legend / Layout
    legend_elements = [
        Line2D([0], [0], marker="o", color="w", label="Target",
               markerfacecolor=HEATMAP_TARGET_COLOR, markeredgecolor="black", markersize=9),
        Patch(facecolor="black", label="Blocked / Unreached"),
    ]
    ax.legend(handles=legend_elements, loc="lower right", fontsize=8, framealpha=0.85)
    ax.set_title(title)
    ax.set_axis_off()
    fig.tight_layout()
    if show:
        plt.show()
    # endregion
    return fig, ax
# endregion
