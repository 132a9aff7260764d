"""
calculator.py — lens/sensor spatial-frequency analysis engine

WHAT THIS MODULE DOES
---------------------
Turns one set of lens and sensor parameters into the numbers shown on a
prefocus contrast chart sheet:
  1) Nyquist frequency of the sensor (lp/mm and cycles/pixel)
  2) For the center and corner factors X ("1/X Ny"):
       frequency → sensor cycle/line width → half FOV
       → chart-plane widths at the test distance → TV lines

The engine is a pure function of its inputs: no I/O, no state, no
exceptions. Degenerate inputs (factor, pixel size or EFL not positive)
give an all-zero point result that still carries the requested factor.
Results may contain inf/NaN for pathological floats; rendering those is
left to the caller (see utils.formatting).

NAMING
------
Python fields are snake_case; to_dict() emits the camelCase keys the chart
sheet consumers already use (freqLpmm, objectLpWidth, tvlH, ...).

© 2025 LensCalc Pro — Optical Parameter & Contrast Chart Calculator
"""

from __future__ import annotations
from dataclasses import dataclass, fields
from typing import Any, Dict

from lenscalc.optics.projection_model import half_fov_deg, project_half_cycle
from lenscalc.sensor.sampling_model import (
    NY_CYCLE_PIXEL,
    cycle_width,
    frequency_cp,
    frequency_lpmm,
    line_width,
    nyquist_lpmm,
    tv_lines,
)

_CAMEL = {
    "res_h": "resH",
    "res_v": "resV",
    "pixel_size": "pixelSize",
    "center_factor": "centerFactor",
    "corner_factor": "cornerFactor",
    "test_distance": "testDistance",
    "freq_cp": "freqCp",
    "freq_lpmm": "freqLpmm",
    "sensor_cycle_width": "sensorCycleWidth",
    "sensor_line_width": "sensorLineWidth",
    "half_fov": "halfFov",
    "object_lp_width": "objectLpWidth",
    "object_line_width": "objectLineWidth",
    "tvl_h": "tvlH",
    "tvl_v": "tvlV",
    "ny_lpmm": "nyLpmm",
    "ny_cycle_pixel": "nyCyclePixel",
}


def _camel(name: str) -> str:
    return _CAMEL.get(name, name)


# -----------------------------------------------------------------------------
# Value objects
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class LensInputs:
    """
    Lens, sensor and chart parameters for one evaluation.

    Lens
    ----
    efl : effective focal length (mm)

    Sensor
    ------
    res_h, res_v : resolution (pixels)
    pixel_size : pixel pitch (mm)

    Chart frequencies
    -----------------
    center_factor, corner_factor : X in "1/X Ny" (e.g. 3 → 1/3 Nyquist)

    Chart placement
    ---------------
    test_distance : lens to chart distance (mm)
    """
    efl: float
    res_h: float
    res_v: float
    pixel_size: float
    center_factor: float
    corner_factor: float
    test_distance: float

    def to_dict(self) -> Dict[str, float]:
        return {_camel(f.name): getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class PointAnalysis:
    """
    Derived metrics at one chart position (center or corner).

    factor : X in "1/X Ny", copied from the input
    freq_cp, freq_lpmm : spatial frequency (cycles/pixel, lp/mm)
    sensor_cycle_width, sensor_line_width : full / half cycle on sensor (mm)
    half_fov : angle subtended by the sensor line width (degrees)
    object_lp_width, object_line_width : chart-plane widths (mm), legacy labels
    tvl_h, tvl_v : TV lines horizontally / vertically
    """
    factor: float
    freq_cp: float = 0.0
    freq_lpmm: float = 0.0
    sensor_cycle_width: float = 0.0
    sensor_line_width: float = 0.0
    half_fov: float = 0.0
    object_lp_width: float = 0.0
    object_line_width: float = 0.0
    tvl_h: float = 0.0
    tvl_v: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        return {_camel(f.name): getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class SpatialAnalysis:
    """Nyquist frequency of the sensor plus the center and corner results."""
    ny_lpmm: float
    ny_cycle_pixel: float
    center: PointAnalysis
    corner: PointAnalysis

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nyLpmm": self.ny_lpmm,
            "nyCyclePixel": self.ny_cycle_pixel,
            "center": self.center.to_dict(),
            "corner": self.corner.to_dict(),
        }


# -----------------------------------------------------------------------------
# Engine
# -----------------------------------------------------------------------------
def compute_point(inputs: LensInputs, factor: float) -> PointAnalysis:
    """
    Evaluate one chart position at 1/factor of Nyquist.

    Steps
    -----
    0) Guard: factor, pixel size or EFL not positive → zeroed result
    1) Frequency: Ny / X (lp/mm) and 0.5 / X (cycles/pixel)
    2) Sensor geometry: cycle = 1 / freq, line = cycle / 2
    3) Half FOV: atan(line / EFL) in degrees
    4) Chart plane: line * (distance / EFL) → "line pair width", half → "line width"
    5) TV lines: res / (2X)
    """
    efl = inputs.efl
    pixel_size = inputs.pixel_size

    # 0) Degenerate inputs
    if factor <= 0 or pixel_size <= 0 or efl <= 0:
        return PointAnalysis(factor=factor)

    # 1) Frequency
    freq_lpmm = frequency_lpmm(nyquist_lpmm(pixel_size), factor)
    freq_cp = frequency_cp(factor)

    # 2) Sensor geometry (inf if freq underflowed or a NaN pitch slipped past the guard)
    sensor_cycle_width = cycle_width(freq_lpmm)
    sensor_line_width = line_width(sensor_cycle_width)

    # 3) Half FOV
    half_fov = half_fov_deg(sensor_line_width, efl)

    # 4) Chart plane
    object_lp_width, object_line_width = project_half_cycle(
        sensor_line_width, inputs.test_distance, efl
    )

    # 5) TV lines
    tvl_h = tv_lines(inputs.res_h, factor)
    tvl_v = tv_lines(inputs.res_v, factor)

    return PointAnalysis(
        factor=factor,
        freq_cp=freq_cp,
        freq_lpmm=freq_lpmm,
        sensor_cycle_width=sensor_cycle_width,
        sensor_line_width=sensor_line_width,
        half_fov=half_fov,
        object_lp_width=object_lp_width,
        object_line_width=object_line_width,
        tvl_h=tvl_h,
        tvl_v=tvl_v,
    )


def compute_analysis(inputs: LensInputs) -> SpatialAnalysis:
    """
    Full analysis for one parameter set: Nyquist plus center and corner points.

    Pure and stateless; re-run it whenever any input changes.
    """
    return SpatialAnalysis(
        ny_lpmm=nyquist_lpmm(inputs.pixel_size),
        ny_cycle_pixel=NY_CYCLE_PIXEL,
        center=compute_point(inputs, inputs.center_factor),
        corner=compute_point(inputs, inputs.corner_factor),
    )
