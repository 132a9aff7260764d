"""
formatting.py — text ↔ number helpers at the presentation boundary

WHAT THIS MODULE PROVIDES
-------------------------
• parse_number(text)
    Lenient float parse of user input. Anything unparseable becomes 0.0,
    so the engine always receives numbers (degenerate zeros are handled
    there). A leading numeric prefix is accepted: "2.5 mm" → 2.5.

• inputs_from_text(values)
    Build LensInputs from raw text values, falling back to the defaults
    for missing keys.

• fmt(x, digits) / fmt_fixed(x, digits)
    Display formatting. Rounding is half-away-from-zero on the exact
    binary value (0.125 → "0.13"), matching the chart sheet. Non-finite
    values render as "-".

© 2025 LensCalc Pro — Optical Parameter & Contrast Chart Calculator
"""

from __future__ import annotations
import logging
import math
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Mapping

from lenscalc.config import DEFAULT_INPUTS
from lenscalc.engine.calculator import LensInputs

logger = logging.getLogger(__name__)

PLACEHOLDER = "-"

_NUMBER_PREFIX = re.compile(r"^[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


# -----------------------------------------------------------------------------
# Parsing
# -----------------------------------------------------------------------------
def parse_number(text: Any) -> float:
    """
    Parse a user-entered value into a float; unparseable input gives 0.0.

    Numbers pass through as floats. Strings are stripped and their longest
    leading numeric prefix is used ("1e3px" → 1000.0, "abc" → 0.0);
    "Infinity" and "-Infinity" are accepted as prefixes too.
    """
    if text is None or isinstance(text, bool):
        return 0.0
    if isinstance(text, (int, float)):
        value = float(text)
        return 0.0 if math.isnan(value) else value

    m = _NUMBER_PREFIX.match(str(text).strip())
    if not m:
        return 0.0
    return float(m.group(0))


def inputs_from_text(values: Mapping[str, Any]) -> LensInputs:
    """
    Build LensInputs from raw (usually string) values keyed by field name.

    Missing keys take the DEFAULT_INPUTS value; present but unparseable
    values become 0 and are logged as a warning.
    """
    parsed = {}
    for name, default in DEFAULT_INPUTS.items():
        if name not in values:
            parsed[name] = float(default)
            continue
        raw = values[name]
        value = parse_number(raw)
        if value == 0.0 and _NUMBER_PREFIX.match(str(raw).strip()) is None:
            logger.warning("Could not parse %s=%r; using 0.", name, raw)
        parsed[name] = value
    return LensInputs(**parsed)


# -----------------------------------------------------------------------------
# Display
# -----------------------------------------------------------------------------
def _round_half_up(x: float, digits: int) -> Decimal:
    return Decimal(x).quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)


def fmt_fixed(x: float, digits: int = 2) -> str:
    """Fixed-decimal display, e.g. fmt_fixed(83.333, 1) → "83.3"."""
    if not math.isfinite(x):
        return PLACEHOLDER
    return f"{_round_half_up(x, digits):.{digits}f}"


def fmt(x: float, digits: int = 2) -> str:
    """
    Rounded display with trailing zeros stripped, e.g. fmt(250.0, 1) → "250",
    fmt(426.6667, 1) → "426.7".
    """
    if not math.isfinite(x):
        return PLACEHOLDER
    text = fmt_fixed(x, digits)
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text
