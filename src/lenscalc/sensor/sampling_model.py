"""
sampling_model.py — sensor sampling relations for the lens calculator

WHAT THIS MODULE DOES
---------------------
Closed-form relations between pixel pitch, Nyquist frequency and the
coarser "1/X Ny" frequencies used on a prefocus contrast chart:
  1) Nyquist frequency [lp/mm] from pixel pitch [mm]
  2) Frequency at 1/X Ny, in lp/mm and in cycles/pixel
  3) Width of one cycle (line pair) and one line (half cycle) on the sensor
  4) TV lines across a sensor dimension at 1/X Ny
  5) The Ny, 1/2 Ny, 1/3 Ny, 1/4 Ny reference table

LEARNING NOTES
--------------
• A sensor with pitch p samples at 1/p pixels/mm, so the finest resolvable
  pattern has one line per pixel: Ny = 1 / (2p) lp/mm = 0.5 cycles/pixel.
• "1/3 Ny" means dividing Ny by the factor X = 3; TV lines count both the
  line and the space, hence res / (2X).

REFERENCES (short list)
-----------------------
• Holst, G. C. (2011). CMOS/CCD Sensors and Camera Systems (2e). SPIE Press.
  (Sampling, Nyquist frequency, TV-line conventions)
• ISO 12233:2017. Electronic still picture imaging — SFR/Resolution.
  (Cycles/pixel vs lp/mm conventions)

© 2025 LensCalc Pro — Optical Parameter & Contrast Chart Calculator
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Iterable, List

# Nyquist in cycles/pixel is independent of the pixel pitch
NY_CYCLE_PIXEL = 0.5


@dataclass(frozen=True)
class FrequencyRow:
    """
    One column of the Nyquist reference table.

    divisor : X in "1/X Ny" (1 = Nyquist itself)
    lpmm : frequency in line pairs per millimeter
    cycle_pixel : frequency in cycles per pixel
    """
    divisor: float
    lpmm: float
    cycle_pixel: float


def nyquist_lpmm(pixel_size):
    """
    Nyquist frequency in lp/mm for a pixel pitch in mm:

        Ny = 1 / (2 * pixel_size)

    Non-positive (or NaN) pitches return 0 instead of ±inf.
    """
    return 1.0 / (2.0 * pixel_size) if pixel_size > 0 else 0.0


def frequency_lpmm(ny_lpmm, factor):
    """Frequency at 1/X Ny in lp/mm (caller guarantees factor > 0)."""
    return ny_lpmm / factor


def frequency_cp(factor):
    """Frequency at 1/X Ny in cycles/pixel (caller guarantees factor > 0)."""
    return NY_CYCLE_PIXEL / factor


def cycle_width(freq_lpmm):
    """
    Width of one full cycle (line pair) on the sensor, in mm.

    A zero frequency maps to +inf rather than raising, matching IEEE
    division.
    """
    if freq_lpmm == 0:
        return math.inf
    return 1.0 / freq_lpmm


def line_width(cycle_width_mm):
    """Width of one line (half cycle) on the sensor, in mm."""
    return cycle_width_mm / 2.0


def tv_lines(resolution, factor):
    """
    TV lines across a sensor dimension at 1/X Ny:

        TVL = resolution / (2 * X)

    e.g. 2560 px at 1/3 Ny → 426.7 TVL.
    """
    return resolution / (factor * 2)


def frequency_table(ny_lpmm: float, divisors: Iterable[float] = (1, 2, 3, 4)) -> List[FrequencyRow]:
    """
    Build the Nyquist reference table (Ny, 1/2 Ny, 1/3 Ny, 1/4 Ny by default).

    Parameters
    ----------
    ny_lpmm : float
        Nyquist frequency in lp/mm (see nyquist_lpmm).
    divisors : iterable of float
        Positive divisors X, one row per entry, in the given order.

    Returns
    -------
    rows : list of FrequencyRow

    Raises
    ------
    ValueError
        If no divisors are given or any divisor is not positive.
    """
    divs = [float(d) for d in divisors]
    if not divs:
        raise ValueError("frequency_table needs at least one divisor.")
    bad = [d for d in divs if not d > 0]
    if bad:
        raise ValueError(f"Divisors must be positive, got {bad!r}.")

    return [
        FrequencyRow(divisor=d, lpmm=ny_lpmm / d, cycle_pixel=NY_CYCLE_PIXEL / d)
        for d in divs
    ]
