"""Gráfico de la grilla de error de Parkes (matplotlib)."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from parkes_grid.model import GridAnalysis, MeasurementPair

logger = logging.getLogger(__name__)

AXIS_LIMIT = 550

# Region boundary polylines as (x points, y points).
BOUNDARY_LINES: tuple[tuple[tuple[float, ...], tuple[float, ...]], ...] = (
    ((0, 37, 50), (150, 152, 550)),
    ((0, 25, 50, 250 / 3, 120), (100, 100, 125, 215, 550)),
    ((0, 30, 50, 70, 250), (58, 58, 75, 112, 550)),
    ((0, 30, 50, 140, 275, 415), (50, 50, 67.5, 165, 350 + 100 / 3, 550)),
    ((50, 50, 200, 350 + 100 / 3, 550), (0, 35, 150, 300, 450)),
    ((120, 120, 260, 550), (0, 35, 140, 225)),
    ((250, 250, 550), (0, 50, 150)),
)

ZONE_LABELS: tuple[tuple[float, float, str], ...] = (
    (20, 500, "E"),
    (75, 480, "D"),
    (150, 460, "C"),
    (250, 440, "B"),
    (300, 375, "A"),
    (350, 320, "A"),
    (400, 220, "B"),
    (430, 150, "C"),
    (475, 75, "D"),
)


@dataclass(frozen=True)
class PlotConfig:
    """Chart rendering/saving options."""

    save_figure: bool = True
    dpi: int = 300
    size_inches: float = 3.0
    title: str = "Parkes Error Grid Analysis"


def render_grid(pairs: Sequence[MeasurementPair], config: PlotConfig) -> Figure:
    """Draw the grid boundaries and scatter the retained pairs.

    Args:
        pairs: Retained (reference, predicted) pairs.
        config: Chart options.

    Returns:
        The matplotlib figure. Caller owns it and must close it.
    """
    fig, ax = plt.subplots(figsize=(config.size_inches, config.size_inches))
    fig.patch.set_facecolor("white")

    refs = [p.reference for p in pairs]
    preds = [p.predicted for p in pairs]
    ax.plot(
        refs,
        preds,
        "ko",
        markersize=4,
        markerfacecolor="k",
        markeredgecolor="k",
    )
    ax.set_xlabel("Reference Concentration [mg/dl]")
    ax.set_ylabel("Predicted Concentration [mg/dl]")
    ax.set_title(config.title)
    ax.set_xlim(0, AXIS_LIMIT)
    ax.set_ylim(0, AXIS_LIMIT)
    ax.set_aspect("equal", adjustable="box")

    # Identity line
    ax.plot([0, AXIS_LIMIT], [0, AXIS_LIMIT], "k:")
    for xs, ys in BOUNDARY_LINES:
        ax.plot(xs, ys, "k-")
    for x, y, label in ZONE_LABELS:
        ax.text(x, y, label, fontsize=12)
    return fig


def save_grid(
    analysis: GridAnalysis,
    out_path: Path,
    config: PlotConfig,
) -> Path | None:
    """Render the grid for ``analysis`` and write it as PNG.

    Nothing is written when ``config.save_figure`` is False.

    Returns:
        The written path, or None when saving is disabled.
    """
    if not config.save_figure:
        return None
    fig = render_grid(analysis.pairs, config)
    try:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(out_path, dpi=config.dpi, format="png")
        logger.info("Saved Parkes grid chart to %s", out_path)
        return out_path
    finally:
        plt.close(fig)
