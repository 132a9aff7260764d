"""Unit tests for the half FOV and chart-plane projections."""

from __future__ import annotations

import math

import pytest

from lenscalc.optics.projection_model import (
    half_fov_deg,
    magnification_inverse,
    project_half_cycle,
)


def test_half_fov_deg_matches_arctangent() -> None:
    """Half FOV is atan(line / efl) in degrees."""

    expected = math.degrees(math.atan(0.006 / 2.12))
    assert half_fov_deg(0.006, 2.12) == pytest.approx(expected)
    assert half_fov_deg(0.006, 2.12) == pytest.approx(0.16216, abs=1e-5)


def test_half_fov_deg_of_infinite_width_is_ninety() -> None:
    """An infinite line width saturates at 90 degrees."""

    assert half_fov_deg(float("inf"), 2.12) == pytest.approx(90.0)


def test_magnification_inverse() -> None:
    """1/M = distance / efl."""

    assert magnification_inverse(500, 2.0) == 250.0
    assert magnification_inverse(0, 2.0) == 0.0


def test_project_half_cycle_uses_legacy_labels() -> None:
    """The projected half cycle is the "line pair width"; half of it the "line width"."""

    lp_width, line = project_half_cycle(0.006, 500, 2.12)
    assert lp_width == pytest.approx(0.006 * 500 / 2.12)
    assert line == pytest.approx(lp_width / 2)


def test_project_half_cycle_at_zero_distance() -> None:
    """A chart at 0 mm projects to zero widths."""

    assert project_half_cycle(0.006, 0, 2.12) == (0.0, 0.0)
