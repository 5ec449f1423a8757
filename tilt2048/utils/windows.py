"""
Matplotlib view of a 2048 game.

The view only reads the plain-data snapshot of a session (``TwentyFortyEight.snapshot()``) and
forwards key presses; it holds no game rule.
"""
from math import log2
from typing import Any, Callable

from matplotlib import colormaps
from matplotlib import pyplot as plt
from matplotlib.patches import FancyBboxPatch

# ##>: Background of the grid and of empty cells.
GRID_COLOR = "#BBADA0"
EMPTY_COLOR = "#CDC1B4"

# ##>: Tiles up to 2048 (exponent 11) spread over the colormap.
_TILE_CMAP = colormaps["YlOrRd"]
_MAX_EXPONENT = 11


def tile_color(value: int):
    """Colour of a tile, darker for larger values."""
    if value == 0:
        return EMPTY_COLOR
    return _TILE_CMAP(min(log2(value), _MAX_EXPONENT) / _MAX_EXPONENT)


def font_size(value: int) -> float:
    """Shrink the label as the number of digits grows."""
    return {1: 28.0, 2: 26.0, 3: 22.0}.get(len(str(value)), 17.0)


def headline(snapshot: dict[str, Any]) -> str:
    """Score line, announcing a win before a stuck board."""
    text = f"Score: {snapshot['score']}"
    if snapshot["won"]:
        return text + "    You Win!"
    if snapshot["stuck"]:
        return text + "    Game Over"
    return text


class WindowBoard:
    """
    Window drawing the board as rounded tiles on one Matplotlib axis.

    Parameters
    ----------
    title : str
        The title of the window.
    size : int
        The side of the board.
    """

    def __init__(self, title: str, size: int):
        self.size = size
        self.fig, self.axe = plt.subplots(figsize=(5, 5.5))
        self.fig.canvas.manager.set_window_title(title)
        self.fig.patch.set_facecolor(GRID_COLOR)

        self.axe.set_xlim(0, size)
        self.axe.set_ylim(size, 0)
        self.axe.set_aspect("equal")
        self.axe.set_axis_off()

        # ##: One patch and one label per cell, row-major like the snapshot board.
        self._tiles = []
        self._labels = []
        for row in range(size):
            for col in range(size):
                tile = FancyBboxPatch(
                    (col + 0.08, row + 0.08), 0.84, 0.84, boxstyle="round,pad=0,rounding_size=0.08",
                    linewidth=0, facecolor=EMPTY_COLOR,
                )
                self.axe.add_patch(tile)
                self._tiles.append(tile)
                self._labels.append(self.axe.text(col + 0.5, row + 0.5, "", ha="center", va="center", fontweight="bold"))

        self.closed = False
        self.fig.canvas.mpl_connect("close_event", self._on_close)

    def _on_close(self, event=None):
        self.closed = True

    def draw(self, snapshot: dict[str, Any]):
        """
        Redraw the window from a session snapshot.

        Parameters
        ----------
        snapshot : dict
            ``board`` as nested lists of ints, ``score``, ``won`` and ``stuck``.
        """
        values = [value for row in snapshot["board"] for value in row]
        for tile, label, value in zip(self._tiles, self._labels, values):
            tile.set_facecolor(tile_color(value))
            label.set_text(str(value) if value else "")
            label.set_fontsize(font_size(value))
            label.set_color("#776E65" if value in (2, 4) else "#F9F6F2")

        self.fig.suptitle(headline(snapshot), fontweight="bold", color="#776E65")
        self.fig.canvas.draw_idle()

    def on_key(self, handler: Callable[[str], None]):
        """Call ``handler`` with the Matplotlib name of every pressed key."""
        self.fig.canvas.mpl_connect("key_press_event", lambda event: handler(event.key))

    def show(self):
        """Start the blocking Matplotlib event loop."""
        plt.show()

    def close(self):
        plt.close(self.fig)
        self.closed = True
