"""
report.py — plain-text chart sheet for one analysis

Sections mirror the calculator sheet:
  Input Information | Spatial Frequency Analysis | Selected Frequencies
  | Sensor Geometry | Prefocus Contrast Chart

© 2025 LensCalc Pro — Optical Parameter & Contrast Chart Calculator
"""

from __future__ import annotations
from typing import List, Sequence

from lenscalc.config import DIGITS, NYQUIST_DIVISORS
from lenscalc.engine.calculator import LensInputs, SpatialAnalysis
from lenscalc.sensor.sampling_model import frequency_table
from lenscalc.utils.formatting import fmt, fmt_fixed

_RULE = "-" * 60


def _divisor_label(d: float) -> str:
    return "Ny" if d == 1 else f"1/{fmt(d, 2)} Ny"


def _table(header: Sequence[str], rows: Sequence[Sequence[str]]) -> List[str]:
    widths = [max(len(r[i]) for r in [header, *rows]) for i in range(len(header))]

    def line(cells: Sequence[str]) -> str:
        # first column left-aligned, numbers right-aligned
        return "  ".join(
            c.ljust(w) if i == 0 else c.rjust(w) for i, (c, w) in enumerate(zip(cells, widths))
        )

    return [line(header), *(line(r) for r in rows)]


def render_report(
    inputs: LensInputs,
    analysis: SpatialAnalysis,
    divisors: Sequence[float] = NYQUIST_DIVISORS,
) -> str:
    """
    Render the analysis as a multi-line text sheet.

    Parameters
    ----------
    inputs : LensInputs
        Values echoed in the input and geometry sections.
    analysis : SpatialAnalysis
        Result of compute_analysis(inputs).
    divisors : sequence of float
        Columns of the Nyquist reference table.

    Returns
    -------
    report : str
        Newline-joined text; non-finite numbers appear as "-".
    """
    d = DIGITS
    center, corner = analysis.center, analysis.corner
    out: List[str] = []

    out += ["Input Information", _RULE]
    out += _table(
        ["Parameter", "Value"],
        [
            ["Lens EFL (mm)", fmt(inputs.efl, 4)],
            ["Resolution H (px)", fmt(inputs.res_h, 4)],
            ["Resolution V (px)", fmt(inputs.res_v, 4)],
            ["Pixel Size (mm)", fmt(inputs.pixel_size, 6)],
        ],
    )

    rows = frequency_table(analysis.ny_lpmm, divisors)
    out += ["", "Spatial Frequency Analysis", _RULE]
    out += _table(
        ["Metric", *(_divisor_label(r.divisor) for r in rows)],
        [
            ["Lp/mm", *(fmt(r.lpmm, d["lpmm"]) for r in rows)],
            ["Cycle/Pixel", *(fmt(r.cycle_pixel, d["cycle_pixel"]) for r in rows)],
        ],
    )

    out += ["", "Selected Frequencies (factor X in 1/X Ny)", _RULE]
    out += _table(
        ["Point", "Factor", "Cycle/Pixel", "Lp/mm"],
        [
            [label, fmt(p.factor, 4), fmt_fixed(p.freq_cp, d["cycle_pixel"]), fmt_fixed(p.freq_lpmm, d["lpmm"])]
            for label, p in (("Center", center), ("Corner", corner))
        ],
    )

    out += ["", "Sensor Geometry", _RULE]
    out += _table(
        ["Metric", "Center", "Corner"],
        [
            ["Distance (EFL)", f"{fmt(inputs.efl, 4)} mm", f"{fmt(inputs.efl, 4)} mm"],
            [
                "Image Width (Line)",
                f"{fmt(center.sensor_line_width, d['line_width'])} mm",
                f"{fmt(corner.sensor_line_width, d['line_width'])} mm",
            ],
            [
                "Half FOV",
                f"{fmt(center.half_fov, d['half_fov'])} deg",
                f"{fmt(corner.half_fov, d['half_fov'])} deg",
            ],
        ],
    )

    out += ["", f"Prefocus Contrast Chart @ {fmt(inputs.test_distance, 4)} mm", _RULE]
    out += _table(
        ["Metric", "Center", "Corner"],
        [
            [
                "Line Pair Width (mm)",
                fmt(center.object_lp_width, d["object_width"]),
                fmt(corner.object_lp_width, d["object_width"]),
            ],
            [
                "Line Width (mm)",
                fmt(center.object_line_width, d["object_width"]),
                fmt(corner.object_line_width, d["object_width"]),
            ],
            ["TVL_H", fmt(center.tvl_h, d["tvl"]), fmt(corner.tvl_h, d["tvl"])],
            ["TVL_V", fmt(center.tvl_v, d["tvl"]), fmt(corner.tvl_v, d["tvl"])],
        ],
    )
    return "\n".join(out)
