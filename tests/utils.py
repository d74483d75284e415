"""
Test utility functions and helpers for tank calibration tests.

Usage:
    from tests.utils import assert_curves_equal, assert_monotonic, make_curve

    def test_resample():
        curve = make_curve([(0, 0), (100, 1000)])
        assert_monotonic([p.chart_volume for p in resample(curve, 10)])
"""

from typing import Sequence

from tank_calibration.core.models import CalibrationPoint


def make_curve(pairs: Sequence[tuple[float, float]]) -> list[CalibrationPoint]:
    """Build a curve from (height, volume) pairs."""
    return [CalibrationPoint(height=float(h), chart_volume=float(v)) for h, v in pairs]


def assert_curves_equal(
    curve1: Sequence[float],
    curve2: Sequence[float],
    tolerance: float = 0.001,
    msg: str | None = None,
) -> None:
    """Assert two curves are equal within tolerance.

    Raises:
        AssertionError: If curves differ beyond tolerance.
    """
    prefix = f"{msg}: " if msg else ""

    assert len(curve1) == len(curve2), (
        f"{prefix}Curve lengths differ: {len(curve1)} vs {len(curve2)}"
    )

    for i, (v1, v2) in enumerate(zip(curve1, curve2)):
        diff = abs(v1 - v2)
        assert diff < tolerance, (
            f"{prefix}Curves differ at index {i}: {v1:.6f} vs {v2:.6f} "
            f"(diff={diff:.6f}, tolerance={tolerance})"
        )


def assert_monotonic(
    values: Sequence[float],
    increasing: bool = True,
    allow_tolerance: float = 0.0,
) -> None:
    """Assert values are monotonically (non-strictly) increasing or decreasing.

    Raises:
        AssertionError: If monotonicity is violated.
    """
    direction = "increasing" if increasing else "decreasing"
    for i in range(1, len(values)):
        diff = values[i] - values[i - 1]
        valid = diff >= -allow_tolerance if increasing else diff <= allow_tolerance
        assert valid, (
            f"Not monotonically {direction} at index {i}: "
            f"{values[i-1]:.6f} -> {values[i]:.6f} (diff={diff:.6f})"
        )
