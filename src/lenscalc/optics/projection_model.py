"""
projection_model.py — thin-lens angular and object-plane projections

WHAT THIS MODULE DOES
---------------------
Maps a feature of known width on the sensor back through the lens:
  • Half field-of-view angle subtended by the feature at the EFL
  • Inverse magnification for a chart at a given test distance
  • Projection of the sensor line (half cycle) onto the chart plane

LEGACY CHART LABELS
-------------------
The prefocus chart values follow the reference spreadsheet: the projected
*half cycle* is reported as the "line pair width" and half of it as the
"line width". The labels do not match the literal line/line-pair geometry
used on the sensor side; consumers compare against that spreadsheet, so
the mapping is kept as is.

REFERENCES (short list)
-----------------------
• Smith, W. J. (2007). Modern Optical Engineering (4th ed.).
  (Thin-lens magnification, angular subtense)
• Hecht, E. (2016). Optics (5th ed.). (Paraxial imaging)

© 2025 LensCalc Pro — Optical Parameter & Contrast Chart Calculator
"""

from __future__ import annotations
import math
from typing import Tuple


def half_fov_deg(line_width_mm: float, efl_mm: float) -> float:
    """
    Angle subtended by a sensor feature at the EFL, in degrees:

        θ = atan(line_width / efl) * 180 / π

    Caller guarantees efl_mm > 0.
    """
    return math.atan(line_width_mm / efl_mm) * 180.0 / math.pi


def magnification_inverse(test_distance_mm: float, efl_mm: float) -> float:
    """
    Object-to-image size ratio for a chart at test_distance_mm:

        1/M = test_distance / efl

    A zero distance gives 0, which zeroes every projected width.
    """
    return test_distance_mm / efl_mm


def project_half_cycle(
    line_width_mm: float,
    test_distance_mm: float,
    efl_mm: float,
) -> Tuple[float, float]:
    """
    Project the sensor line (half cycle) onto the chart plane.

    Returns
    -------
    object_lp_width : float
        The projected half cycle, labelled "line pair width" on the chart.
    object_line_width : float
        Half of the projected half cycle, labelled "line width".
    """
    projected = line_width_mm * magnification_inverse(test_distance_mm, efl_mm)
    return projected, projected / 2
