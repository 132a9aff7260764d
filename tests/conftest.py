"""Shared fixtures for the lenscalc test suite."""

from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import pytest  # noqa: E402

from lenscalc.engine.calculator import LensInputs  # noqa: E402


@pytest.fixture
def reference_inputs() -> LensInputs:
    """Reference spreadsheet case: 2.12 mm lens, 2560x1938, 2 µm pixels, 1/3 and 1/4 Ny at 500 mm."""

    return LensInputs(
        efl=2.12,
        res_h=2560,
        res_v=1938,
        pixel_size=0.002,
        center_factor=3,
        corner_factor=4,
        test_distance=500,
    )
