"""Matplotlib rendering of a survey map as a categorical cell grid."""

from __future__ import annotations

from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
from matplotlib.colors import BoundaryNorm, ListedColormap  # noqa: E402
from matplotlib.image import AxesImage  # noqa: E402
from matplotlib.patches import Patch  # noqa: E402

from subsurvey.config.constants import BLANK_CELL  # noqa: E402
from subsurvey.domain.survey_map import SurveyMap  # noqa: E402

TERRAIN_COLORS: tuple[str, ...] = (
    "#1565C0",
    "#8D6E63",
    "#43A047",
    "#FDD835",
    "#E53935",
    "#8E24AA",
    "#00ACC1",
    "#FB8C00",
)
EMPTY_CELL_COLOR = "#F0F0F0"
GRID_LINE_COLOR = "#CCCCCC"


def _build_terrain_array(survey_map: SurveyMap) -> tuple[np.ndarray, list[str]]:
    """Return (H, W) int array of symbol indices plus the symbol list.

    Index ``len(symbols)`` marks cells no scan has covered.
    """
    chars = survey_map.to_array()
    symbols = sorted({str(c) for c in np.unique(chars)} - {BLANK_CELL})
    index = {symbol: i for i, symbol in enumerate(symbols)}
    empty = len(symbols)
    grid = np.full(chars.shape, empty, dtype=int)
    for (row, col), char in np.ndenumerate(chars):
        grid[row, col] = index.get(str(char), empty)
    return grid, symbols


def _terrain_cmap(n_symbols: int) -> tuple[ListedColormap, BoundaryNorm]:
    """Discrete colormap: one cycled colour per symbol plus the empty cell."""
    colors = [TERRAIN_COLORS[i % len(TERRAIN_COLORS)] for i in range(n_symbols)]
    colors.append(EMPTY_CELL_COLOR)
    cmap = ListedColormap(colors)
    norm = BoundaryNorm([i - 0.5 for i in range(n_symbols + 2)], cmap.N)
    return cmap, norm


def _draw_cell_grid(
    ax: plt.Axes, grid: np.ndarray, cmap: ListedColormap, norm: BoundaryNorm
) -> AxesImage:
    img = ax.imshow(grid, cmap=cmap, norm=norm, origin="upper", aspect="equal")
    h, w = grid.shape
    for x in range(w + 1):
        ax.axvline(x - 0.5, color=GRID_LINE_COLOR, linewidth=0.5)
    for y in range(h + 1):
        ax.axhline(y - 0.5, color=GRID_LINE_COLOR, linewidth=0.5)
    return img


def render_survey_map(
    survey_map: SurveyMap,
    output_path: Path,
    *,
    title: str = "Survey map",
    dpi: int = 150,
) -> Path:
    """Save a PNG of *survey_map*; axis ticks show absolute coordinates.

    Raises :exc:`ValueError` if the map is empty.
    """
    if len(survey_map) == 0:
        raise ValueError("Cannot render an empty survey map")

    grid, symbols = _build_terrain_array(survey_map)
    cmap, norm = _terrain_cmap(len(symbols))
    box = survey_map.bounding_box()

    fig, ax = plt.subplots(figsize=(max(3.0, box.width * 0.4), max(3.0, box.height * 0.4)))
    _draw_cell_grid(ax, grid, cmap, norm)
    ax.set_xticks(range(box.width))
    ax.set_xticklabels([str(box.min_x + i) for i in range(box.width)], fontsize=6)
    ax.set_yticks(range(box.height))
    ax.set_yticklabels([str(box.min_y + i) for i in range(box.height)], fontsize=6)
    ax.set_xlabel("horizontal")
    ax.set_ylabel("depth")
    ax.set_title(title)

    handles = [
        Patch(facecolor=cmap(i), edgecolor="gray", label=repr(symbol))
        for i, symbol in enumerate(symbols)
    ]
    handles.append(Patch(facecolor=EMPTY_CELL_COLOR, edgecolor="gray", label="unscanned"))
    ax.legend(handles=handles, loc="upper left", bbox_to_anchor=(1.02, 1.0), fontsize=7)

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=dpi, bbox_inches="tight")
    plt.close(fig)
    return output_path
