"""
lenscalc — optical parameter & prefocus contrast chart calculator
=================================================================
Converts lens and sensor parameters into the numbers needed to set up a
prefocus contrast chart, organized as:
    sensor (sampling) → optics (projection) → engine → utils (sheet, plots)

Quick start:
    >>> from lenscalc import LensInputs, compute_analysis
    >>> a = compute_analysis(LensInputs(2.12, 2560, 1938, 0.002, 3, 4, 500))
    >>> round(a.center.tvl_h, 1)
    426.7

© 2025 LensCalc Pro — Optical Parameter & Contrast Chart Calculator
"""

from lenscalc.engine.calculator import (
    LensInputs,
    PointAnalysis,
    SpatialAnalysis,
    compute_analysis,
    compute_point,
)

__version__ = "0.1.0"

__all__ = [
    "LensInputs",
    "PointAnalysis",
    "SpatialAnalysis",
    "compute_analysis",
    "compute_point",
]
