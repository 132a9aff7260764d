"""Tests for input parsing and display formatting."""

from __future__ import annotations

import logging
import math

import pytest

from lenscalc.config import DEFAULT_INPUTS
from lenscalc.utils.formatting import PLACEHOLDER, fmt, fmt_fixed, inputs_from_text, parse_number


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2.12", 2.12),
        ("  500 ", 500.0),
        ("-1", -1.0),
        (".5", 0.5),
        ("1e3", 1000.0),
        ("2.5mm", 2.5),
        ("", 0.0),
        ("abc", 0.0),
        ("mm2", 0.0),
        (None, 0.0),
        (3, 3.0),
        (float("nan"), 0.0),
        ("Infinity", math.inf),
        ("-Infinity", -math.inf),
        ("+Infinity px", math.inf),
        ("infinity", 0.0),
    ],
)
def test_parse_number(text, expected) -> None:
    """Leading numeric prefixes are parsed; anything else becomes 0."""

    assert parse_number(text) == expected


def test_inputs_from_text_fills_defaults() -> None:
    """Missing keys come from DEFAULT_INPUTS."""

    inputs = inputs_from_text({"efl": "4.2"})
    assert inputs.efl == 4.2
    assert inputs.res_h == DEFAULT_INPUTS["res_h"]
    assert inputs.test_distance == DEFAULT_INPUTS["test_distance"]


def test_inputs_from_text_substitutes_zero_and_warns(caplog) -> None:
    """Unparseable text becomes 0 with a warning."""

    with caplog.at_level(logging.WARNING, logger="lenscalc"):
        inputs = inputs_from_text({"pixel_size": "n/a", "center_factor": "0"})

    assert inputs.pixel_size == 0.0
    assert inputs.center_factor == 0.0
    assert "pixel_size" in caplog.text
    assert "center_factor" not in caplog.text


@pytest.mark.parametrize(
    "value, digits, expected",
    [
        (250.0, 1, "250"),
        (83.3333, 1, "83.3"),
        (426.6667, 1, "426.7"),
        (0.125, 2, "0.13"),
        (242.25, 1, "242.3"),
        (0.006, 3, "0.006"),
        (1.4150943, 2, "1.42"),
        (-0.0001, 2, "0"),
        (0.0, 2, "0"),
    ],
)
def test_fmt_rounds_and_strips(value, digits, expected) -> None:
    """fmt rounds half away from zero and strips trailing zeros."""

    assert fmt(value, digits) == expected


@pytest.mark.parametrize(
    "value, digits, expected",
    [
        (0.16666, 2, "0.17"),
        (62.5, 1, "62.5"),
        (0.5, 2, "0.50"),
        (0.125, 2, "0.13"),
        (1.005, 2, "1.00"),
        (250.0, 0, "250"),
    ],
)
def test_fmt_fixed(value, digits, expected) -> None:
    """fmt_fixed keeps a fixed number of decimals."""

    assert fmt_fixed(value, digits) == expected


@pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
def test_non_finite_values_render_placeholder(value) -> None:
    """inf and NaN render as the placeholder."""

    assert fmt(value) == PLACEHOLDER
    assert fmt_fixed(value) == PLACEHOLDER


def test_inputs_from_text_accepts_infinity_without_warning(caplog) -> None:
    """An Infinity prefix parses like a number, so no zero substitution is logged."""

    with caplog.at_level(logging.WARNING, logger="lenscalc"):
        inputs = inputs_from_text({"test_distance": "Infinity"})

    assert inputs.test_distance == math.inf
    assert "Could not parse" not in caplog.text
