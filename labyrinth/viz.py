# region Imports
import matplotlib.pyplot as plt
from matplotlib.colors import ListedColormap
from matplotlib.lines import Line2D
from matplotlib.patches import Patch
from labyrinth.models import MazeSession
# endregion

# region Visualization Function
def plot_maze(session: MazeSession, title="Walked-route maze", ax=None, geo=False):
    """
    Draw the carved grid with entry/exit markers.
    With geo=True the axes are longitude/latitude of the recorded bbox
    and the walked route is overlaid.
    """
    spec, bbox = session.spec, session.bbox
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 8))
    else:
        fig = ax.figure

    extent = None
    if geo:
        extent = (bbox.min_lon, bbox.max_lon, bbox.min_lat, bbox.max_lat)
    cmap = ListedColormap(["black", "white"])
    ax.imshow(session.grid, origin="lower", cmap=cmap, vmin=0, vmax=1,
              interpolation="nearest", extent=extent)

    # region Markers
    if geo:
        ax.plot([p.lon for p in session.path], [p.lat for p in session.path],
                color="blue", linestyle="--", linewidth=1.5, label="Walked route")
        sx, sy = session.entry.lon, session.entry.lat
        gx, gy = session.exit.lon, session.exit.lat
    else:
        (sy, sx), (gy, gx) = session.entry_cell, session.exit_cell

    ax.scatter(sx, sy, s=100, edgecolors="black", facecolors="green", label="Entry", zorder=3)
    ax.scatter(gx, gy, s=100, edgecolors="black", facecolors="red", label="Exit", zorder=3)
    # endregion

    # region Legend / Layout
    legend_elements = [
        Line2D([0], [0], marker="o", color="w", label="Entry",
               markerfacecolor="green", markeredgecolor="black", markersize=9),
        Line2D([0], [0], marker="o", color="w", label="Exit",
               markerfacecolor="red", markeredgecolor="black", markersize=9),
        Patch(facecolor="white", edgecolor="black", label="Passable"),
        Patch(facecolor="black", label="Blocked"),
    ]
    if geo:
        legend_elements.insert(0, Line2D([0], [0], color="blue", lw=1.5,
                                         linestyle="--", label="Walked route"))
    ax.legend(handles=legend_elements, loc="lower right", fontsize=8, framealpha=0.85)
    ax.set_title(f"{title} ({spec.rows}x{spec.cols}, {session.length} cells)")
    if not geo:
        ax.set_axis_off()
    fig.tight_layout()
    # endregion
    return fig, ax


def show_maze(session: MazeSession, **kw):
    plot_maze(session, **kw)
    plt.show()
# endregion
