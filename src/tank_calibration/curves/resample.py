"""
Strapping chart generation.

Resamples a calibration curve onto an evenly spaced height grid so tables
and charts have a fixed number of rows regardless of sample density.
"""

from typing import Optional, Sequence

import numpy as np

from tank_calibration.config import get_settings
from tank_calibration.core.models import CalibrationPoint
from tank_calibration.curves.interpolation import CurveInterpolator


def resample(curve: Sequence[CalibrationPoint], n: int = 300) -> list[CalibrationPoint]:
    """
    Resample a curve to ``n`` evenly spaced heights.

    Args:
        curve: Calibration points, in any order.
        n: Number of output points, spanning min to max height inclusive.

    Returns:
        ``n`` calibration points, ascending by height. A curve with fewer
        than two distinct heights is returned unchanged (as a list).

    Raises:
        ValueError: If ``n`` is less than 2.
    """
    if n < 2:
        raise ValueError(f"Resampling needs at least 2 points, got {n}")

    if len(curve) < 2:
        return list(curve)
    interpolator = CurveInterpolator(curve)
    if interpolator.knot_count < 2:
        return list(curve)

    # linspace pins the last height to max_height exactly
    heights = np.linspace(interpolator.min_height, interpolator.max_height, n)
    volumes = interpolator.many(heights)

    return [
        CalibrationPoint(height=float(h), chart_volume=float(v))
        for h, v in zip(heights, volumes)
    ]


def generate_strapping_chart(
    curve: Sequence[CalibrationPoint],
    points: Optional[int] = None,
) -> list[CalibrationPoint]:
    """Resample with the configured strapping chart size."""
    if points is None:
        points = get_settings().strapping.num_points
    return resample(curve, points)
