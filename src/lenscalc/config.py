"""
Configuration & Defaults
========================
Central registry for default inputs and display constants.

Exports:
    DEFAULT_INPUTS (dict): reference spreadsheet case ("Moto" example).
    NYQUIST_DIVISORS (tuple): columns of the Nyquist reference table.
    DIGITS (dict): decimals shown for each reported quantity.
    DEFAULT_OUTDIR (str): where the CLI writes JSON/PNG outputs.
    DEFAULT_SWEEP_MAX (float): largest factor in the CLI factor sweep.
    MAX_SWEEP_FACTOR (float): upper bound accepted for --sweep_max.
"""
from typing import Dict

# Reference case: 2.12 mm lens on a 2560x1938 sensor with 2 µm pixels,
# center at 1/3 Ny, corner at 1/4 Ny, chart at 500 mm.
DEFAULT_INPUTS: Dict[str, float] = {
    "efl": 2.12,
    "res_h": 2560,
    "res_v": 1938,
    "pixel_size": 0.002,
    "center_factor": 3,
    "corner_factor": 4,
    "test_distance": 500,
}

NYQUIST_DIVISORS = (1, 2, 3, 4)

DIGITS: Dict[str, int] = {
    "lpmm": 1,
    "cycle_pixel": 2,
    "line_width": 3,
    "half_fov": 3,
    "object_width": 2,
    "tvl": 1,
}

DEFAULT_OUTDIR: str = "outputs"
DEFAULT_SWEEP_MAX: float = 8.0
# 0.25 steps up to here keep the sweep at a few thousand points
MAX_SWEEP_FACTOR: float = 1000.0
