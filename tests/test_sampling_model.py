"""Unit tests for the sensor sampling relations."""

from __future__ import annotations

import math

import numpy as np
import pytest

from lenscalc.sensor.sampling_model import (
    NY_CYCLE_PIXEL,
    FrequencyRow,
    cycle_width,
    frequency_cp,
    frequency_lpmm,
    frequency_table,
    line_width,
    nyquist_lpmm,
    tv_lines,
)


def test_nyquist_lpmm_for_two_micron_pixels() -> None:
    """A 0.002 mm pitch samples up to 250 lp/mm."""

    assert nyquist_lpmm(0.002) == pytest.approx(250.0)


@pytest.mark.parametrize("pixel_size", [0.0, -0.002, float("nan")])
def test_nyquist_lpmm_is_zero_for_degenerate_pitch(pixel_size: float) -> None:
    """Non-positive or NaN pitches give 0 rather than inf."""

    assert nyquist_lpmm(pixel_size) == 0.0


def test_frequency_at_one_third_nyquist() -> None:
    """1/3 Ny of 250 lp/mm is 83.33 lp/mm and 0.1667 cycles/pixel."""

    assert frequency_lpmm(250.0, 3) == pytest.approx(83.3333, rel=1e-5)
    assert frequency_cp(3) == pytest.approx(0.166667, rel=1e-5)
    assert NY_CYCLE_PIXEL == 0.5


def test_cycle_and_line_width() -> None:
    """62.5 lp/mm has a 0.016 mm cycle and a 0.008 mm line."""

    cycle = cycle_width(62.5)
    assert cycle == pytest.approx(0.016)
    assert line_width(cycle) == pytest.approx(0.008)


def test_cycle_width_of_zero_frequency_is_inf() -> None:
    """Zero frequency maps to inf without raising."""

    assert math.isinf(cycle_width(0.0))
    assert math.isinf(cycle_width(-0.0))
    assert cycle_width(50.0) == pytest.approx(0.02)


def test_tv_lines() -> None:
    """TVL = res / (2X)."""

    assert tv_lines(2560, 3) == pytest.approx(426.6667, rel=1e-5)
    assert tv_lines(2560, 4) == 320


def test_frequency_table_reference_columns() -> None:
    """Default table covers Ny, 1/2, 1/3 and 1/4 Ny."""

    rows = frequency_table(250.0)
    assert [r.divisor for r in rows] == [1.0, 2.0, 3.0, 4.0]
    np.testing.assert_allclose([r.lpmm for r in rows], [250.0, 125.0, 250.0 / 3, 62.5])
    np.testing.assert_allclose([r.cycle_pixel for r in rows], [0.5, 0.25, 0.5 / 3, 0.125])
    assert rows[0] == FrequencyRow(divisor=1.0, lpmm=250.0, cycle_pixel=0.5)


def test_frequency_table_custom_divisors_keep_order() -> None:
    """Rows follow the order of the given divisors."""

    rows = frequency_table(100.0, divisors=(8, 2))
    assert [r.lpmm for r in rows] == [12.5, 50.0]


@pytest.mark.parametrize("divisors", [(), (1, 0), (2, -1)])
def test_frequency_table_rejects_bad_divisors(divisors) -> None:
    """Empty or non-positive divisor lists are programmer errors."""

    with pytest.raises(ValueError):
        frequency_table(250.0, divisors=divisors)
