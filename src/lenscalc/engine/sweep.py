"""
sweep.py — evaluate the chart metrics over a range of factors

Runs compute_point() for each factor X and stacks the results into numpy
arrays, one per PointAnalysis field. Used for the factor sweep plot and
for quick what-if tables (e.g. "which X puts the chart line at 1 mm?").

© 2025 LensCalc Pro — Optical Parameter & Contrast Chart Calculator
"""

from __future__ import annotations
import math
from dataclasses import fields
from typing import Dict, Iterable, Sequence

import numpy as np

from lenscalc.engine.calculator import LensInputs, PointAnalysis, compute_point

POINT_FIELDS = tuple(f.name for f in fields(PointAnalysis))


def sweep_factors(
    inputs: LensInputs,
    factors: Iterable[float],
    keys: Sequence[str] | None = None,
) -> Dict[str, np.ndarray]:
    """
    Evaluate one chart position for every factor in `factors`.

    Parameters
    ----------
    inputs : LensInputs
        Lens/sensor/chart parameters; the center/corner factors are ignored.
    factors : iterable of float
        Factors X to evaluate, in order.
    keys : sequence of str | None
        PointAnalysis field names to return. None returns all of them.

    Returns
    -------
    sweep : dict[str, ndarray]
        float64 array per requested field, same length as `factors`.

    Raises
    ------
    ValueError
        If a requested field is not a PointAnalysis field.
    """
    wanted = tuple(keys) if keys is not None else POINT_FIELDS
    unknown = [name for name in wanted if name not in POINT_FIELDS]
    if unknown:
        raise ValueError(f"Unknown PointAnalysis field(s): {unknown!r}. Valid: {POINT_FIELDS}")

    points = [compute_point(inputs, float(f)) for f in factors]
    return {
        name: np.array([getattr(p, name) for p in points], dtype=np.float64)
        for name in wanted
    }


def factor_grid(max_factor: float, step: float = 0.25, min_factor: float = 1.0) -> np.ndarray:
    """
    Evenly spaced factors from min_factor to max_factor (inclusive).

    Raises ValueError for a non-positive step, a non-finite bound or an
    empty range.
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step!r}.")
    if not (math.isfinite(max_factor) and math.isfinite(min_factor)):
        raise ValueError(f"factor bounds must be finite, got {min_factor!r}..{max_factor!r}.")
    if max_factor < min_factor:
        raise ValueError(f"max_factor ({max_factor}) is below min_factor ({min_factor}).")
    n = int(np.floor((max_factor - min_factor) / step + 1e-9)) + 1
    return min_factor + step * np.arange(n, dtype=np.float64)
