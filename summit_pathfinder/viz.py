# region Imports
from typing import Optional
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Patch
from matplotlib.lines import Line2D
from PIL import Image

from summit_pathfinder.config import MAX_ELEVATION
from summit_pathfinder.models import GridMap, SearchResult
# endregion

# region Visualization Function
def show_search_heatmap(
    grid: GridMap,
    result: SearchResult,
    title: str = "Dijkstra exploration",
    out_path: Optional[str] = None,
):
    """
    Render the elevation grid with the expansion order and the route on top.
    Saves to `out_path` when given, otherwise opens a window.
    """
    H, W = grid.height, grid.width
    fig, ax = plt.subplots(figsize=(max(4.0, W / 8), max(3.0, H / 8)))
    ax.imshow(grid.heights, origin="upper", cmap="terrain", alpha=0.9,
              vmin=0, vmax=MAX_ELEVATION)

    # region Expansion Heat Overlay
    if result.expanded_order:
        order_map = np.full((H, W), np.nan, dtype=np.float32)
        for i, (x, y) in enumerate(result.expanded_order):
            order_map[y, x] = i + 1
        order_map /= max(1.0, float(np.nanmax(order_map)))
        heat = ax.imshow(order_map, origin="upper", cmap="viridis", alpha=0.6)
        cbar = fig.colorbar(heat, ax=ax, fraction=0.046, pad=0.04)
        cbar.set_label("expansion (early → late)")
    # endregion

    # region Path Overlay
    if result.path:
        xs, ys = zip(*result.path)
        ax.plot(xs, ys, color="cyan", linewidth=2.0)
    sx, sy = grid.origin
    gx, gy = grid.destination
    ax.scatter(sx, sy, s=80, edgecolors="black", facecolors="white", zorder=3)
    ax.scatter(gx, gy, s=80, edgecolors="black", facecolors="yellow", zorder=3)
    # endregion

    # region Legend / Layout
    legend_elements = [
        Line2D([0], [0], color="cyan", lw=2, label="Route"),
        Line2D([0], [0], marker="o", color="w", label="Start",
               markerfacecolor="white", markeredgecolor="black", markersize=8),
        Line2D([0], [0], marker="o", color="w", label="Goal",
               markerfacecolor="yellow", markeredgecolor="black", markersize=8),
        Patch(facecolor="purple", label="Early expansion"),
        Patch(facecolor="yellow", label="Late expansion"),
    ]
    ax.legend(handles=legend_elements, loc="lower right", fontsize=7, framealpha=0.85)
    ax.set_title(title)
    ax.set_axis_off()
    plt.tight_layout()
    if out_path:
        fig.savefig(out_path)
        plt.close(fig)
    else:
        plt.show()
    return fig
    # endregion
# endregion

# region Elevation PNG
def render_elevation_png(grid: GridMap, out_path: str, path=None, scale: int = 4) -> None:
    gray = (grid.heights.astype(np.float64) / MAX_ELEVATION * 255).astype("uint8")
    rgb = np.repeat(gray[:, :, None], 3, axis=2)
    if path:
        for x, y in path:
            rgb[y, x] = (0, 255, 255)
    sx, sy = grid.origin
    gx, gy = grid.destination
    rgb[sy, sx] = (255, 0, 0)
    rgb[gy, gx] = (255, 255, 0)

    img = Image.fromarray(rgb, "RGB")
    if scale > 1:
        img = img.resize((grid.width * scale, grid.height * scale), Image.Resampling.NEAREST)
    img.save(out_path, "PNG")
# endregion
