"""
plotting.py — factor sweep figure for the chart sheet

WHAT THIS MODULE PROVIDES
-------------------------
• plot_factor_sweep(inputs, factors, path)
    Three stacked panels against the factor X (1/X Ny):
      1) spatial frequency (lp/mm)
      2) TV lines, horizontal and vertical
      3) chart-plane "line pair width" at the test distance
    The selected center/corner factors are marked on every panel.

LEARNING NOTES
--------------
• Frequency and TVL fall as 1/X; the chart widths grow linearly with X,
  so doubling X doubles the bar width printed on the chart.

© 2025 LensCalc Pro — Optical Parameter & Contrast Chart Calculator
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable

import numpy as np
import matplotlib.pyplot as plt

from lenscalc.engine.calculator import LensInputs
from lenscalc.engine.sweep import sweep_factors

logger = logging.getLogger(__name__)


def plot_factor_sweep(
    inputs: LensInputs,
    factors: Iterable[float],
    path: str | Path,
    dpi: int = 150,
) -> Path:
    """
    Plot frequency, TV lines and chart width over a factor sweep and save it.

    Parameters
    ----------
    inputs : LensInputs
        Lens/sensor/chart parameters; center/corner factors are marked.
    factors : iterable of float
        Factors X for the x-axis.
    path : str | Path
        Output image path (parent directories are created).
    dpi : int
        Figure resolution.

    Returns
    -------
    path : Path
        The saved figure path.
    """
    x = np.asarray(list(factors), dtype=np.float64)
    sweep = sweep_factors(inputs, x, keys=("freq_lpmm", "tvl_h", "tvl_v", "object_lp_width"))

    fig, axs = plt.subplots(3, 1, figsize=(7, 9), sharex=True)

    axs[0].plot(x, sweep["freq_lpmm"], marker=".")
    axs[0].set_ylabel("Lp/mm")
    axs[0].set_title("Spatial frequency at 1/X Ny")

    axs[1].plot(x, sweep["tvl_h"], marker=".", label="TVL_H")
    axs[1].plot(x, sweep["tvl_v"], marker=".", label="TVL_V")
    axs[1].set_ylabel("TV lines")
    axs[1].legend()

    axs[2].plot(x, sweep["object_lp_width"], marker=".")
    axs[2].set_ylabel("Line pair width (mm)")
    axs[2].set_xlabel("Factor X (1/X Ny)")
    axs[2].set_title(f"Chart at {inputs.test_distance:g} mm")

    for ax in axs:
        ax.axvline(inputs.center_factor, color="tab:blue", ls="--", alpha=0.6)
        ax.axvline(inputs.corner_factor, color="tab:green", ls="--", alpha=0.6)
        ax.grid(True, alpha=0.3)

    fig.suptitle(f"EFL {inputs.efl:g} mm | pixel {inputs.pixel_size:g} mm | {inputs.res_h:g}x{inputs.res_v:g}")
    fig.tight_layout()

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, dpi=dpi)
    plt.close(fig)

    logger.debug("Saved factor sweep plot to %s", path)
    return path
