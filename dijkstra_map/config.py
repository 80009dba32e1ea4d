# config.py
import numpy as np

RANK_DTYPE = np.uint16
# Headroom below the dtype max so (rank + 1) never wraps
RANK_MAX = int(np.iinfo(RANK_DTYPE).max) - 10

# Text dump: one "%6d, " cell per column
RENDER_CELL_WIDTH = 6

# Heatmap defaults
HEATMAP_CMAP = "viridis"
HEATMAP_TARGET_COLOR = "yellow"
