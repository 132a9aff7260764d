"""
main.py — command-line chart sheet for the lens calculator

WHAT THIS FILE DOES
-------------------
1) Reads lens/sensor/chart parameters as text (unparseable → 0)
2) Runs the analysis engine once
3) Prints the chart sheet (or JSON with --json)
4) Optionally saves analysis.json and a factor sweep plot to --outdir

USAGE
-----
  python -m lenscalc
  python -m lenscalc --efl 4.2 --pixel_size 0.0014 --center 2 --corner 3
  python -m lenscalc --distance 300 --outdir outputs --plot
  python -m lenscalc --json

© 2025 LensCalc Pro — Optical Parameter & Contrast Chart Calculator
"""

from __future__ import annotations
import argparse
import json
import logging
import math
from pathlib import Path
from typing import Any, Sequence

from lenscalc.config import DEFAULT_INPUTS, DEFAULT_OUTDIR, DEFAULT_SWEEP_MAX, MAX_SWEEP_FACTOR
from lenscalc.engine.calculator import compute_analysis
from lenscalc.engine.sweep import factor_grid
from lenscalc.logging_config import setup_logging
from lenscalc.utils.formatting import inputs_from_text, parse_number
from lenscalc.utils.plotting import plot_factor_sweep
from lenscalc.utils.report import render_report

logger = logging.getLogger(__name__)

# CLI option → LensInputs field
_OPTION_FIELDS = {
    "efl": "efl",
    "res_h": "res_h",
    "res_v": "res_v",
    "pixel_size": "pixel_size",
    "center": "center_factor",
    "corner": "corner_factor",
    "distance": "test_distance",
}


def _json_safe(value: Any) -> Any:
    """Replace inf/NaN with None so the payload is strict JSON."""
    if isinstance(value, dict):
        return {k: _json_safe(v) for k, v in value.items()}
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def _dumps(payload: dict) -> str:
    return json.dumps(_json_safe(payload), indent=2, allow_nan=False)


def _sweep_max(text: str) -> float:
    """Largest sweep factor from --sweep_max; out-of-range values fall back to the default."""
    value = parse_number(text)
    if not (math.isfinite(value) and 1.0 <= value <= MAX_SWEEP_FACTOR):
        logger.warning(
            "--sweep_max %r is outside [1, %s]; using %s.", text, MAX_SWEEP_FACTOR, DEFAULT_SWEEP_MAX
        )
        return DEFAULT_SWEEP_MAX
    return value


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """CLI for the chart sheet; numeric options are kept as raw text."""
    d = DEFAULT_INPUTS
    p = argparse.ArgumentParser(description="Lens calculator: Nyquist, chart frequencies, FOV and TV lines")
    p.add_argument("--efl", default=str(d["efl"]), help="lens effective focal length (mm)")
    p.add_argument("--res_h", default=str(d["res_h"]), help="horizontal resolution (px)")
    p.add_argument("--res_v", default=str(d["res_v"]), help="vertical resolution (px)")
    p.add_argument("--pixel_size", default=str(d["pixel_size"]), help="pixel pitch (mm)")
    p.add_argument("--center", default=str(d["center_factor"]), help="center factor X in 1/X Ny")
    p.add_argument("--corner", default=str(d["corner_factor"]), help="corner factor X in 1/X Ny")
    p.add_argument("--distance", default=str(d["test_distance"]), help="test chart distance (mm)")
    p.add_argument("--json", action="store_true", help="print the analysis as JSON instead of the sheet")
    p.add_argument("--outdir", default=None,
                   help=f"save analysis.json (and the sweep plot with --plot) here, e.g. {DEFAULT_OUTDIR}")
    p.add_argument("--plot", action="store_true", help="render the factor sweep plot (needs --outdir)")
    p.add_argument("--sweep_max", default=str(DEFAULT_SWEEP_MAX), help="largest factor in the sweep plot")
    p.add_argument("--log_level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                   help="logging verbosity")
    p.add_argument("--log_file", default=None, help="also write logs to this file")
    return p.parse_args(argv)


def run(args: argparse.Namespace) -> int:
    """Evaluate once, print, and save outputs; returns the process exit code."""
    inputs = inputs_from_text({field: getattr(args, opt) for opt, field in _OPTION_FIELDS.items()})
    logger.info("Inputs: %s", inputs)

    analysis = compute_analysis(inputs)
    payload = {"inputs": inputs.to_dict(), "analysis": analysis.to_dict()}

    if args.json:
        print(_dumps(payload))
    else:
        print(render_report(inputs, analysis))

    if args.plot and not args.outdir:
        logger.warning("--plot given without --outdir; skipping the sweep plot.")

    if args.outdir:
        outdir = Path(args.outdir)
        outdir.mkdir(parents=True, exist_ok=True)
        (outdir / "analysis.json").write_text(_dumps(payload), encoding="utf-8")

        if args.plot:
            plot_factor_sweep(inputs, factor_grid(_sweep_max(args.sweep_max)), outdir / "factor_sweep.png")

        logger.info("Saved outputs to %s", outdir.resolve())
        if not args.json:
            print(f"[OK] Saved outputs to: {outdir.resolve()}")

    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)
    return run(args)


if __name__ == "__main__":
    raise SystemExit(main())
