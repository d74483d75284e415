"""
Piecewise-linear interpolation over a calibration curve.

Heights outside the curve's range do NOT extrapolate: they return the
volume of the lowest-height point, on either side of the range. Clamp
inputs to ``[min_height, max_height]`` beforehand when that matters.
"""

from typing import Iterable, Sequence

import numpy as np

from tank_calibration.core.exceptions import EmptyCurveError
from tank_calibration.core.models import CalibrationPoint
from tank_calibration.core.types import ChartVolume


class CurveInterpolator:
    """
    Interpolator over a sorted, de-duplicated copy of a curve.

    Points are stably sorted by height. Where several points share a
    height, the first one supplied wins and the rest are ignored.

    Args:
        curve: Calibration points in any order. Not modified.

    Raises:
        EmptyCurveError: If the curve has no points.
    """

    def __init__(self, curve: Sequence[CalibrationPoint]):
        if len(curve) == 0:
            raise EmptyCurveError(operation="interpolate")

        heights = np.array([p.height for p in curve], dtype=float)
        volumes = np.array([p.chart_volume for p in curve], dtype=float)

        order = np.argsort(heights, kind="stable")
        heights, volumes = heights[order], volumes[order]

        # np.unique returns the first index of each run in a sorted array
        _, first = np.unique(heights, return_index=True)
        self.heights = heights[first]
        self.volumes = volumes[first]

    @property
    def min_height(self) -> float:
        return float(self.heights[0])

    @property
    def max_height(self) -> float:
        return float(self.heights[-1])

    @property
    def knot_count(self) -> int:
        """Number of distinct heights."""
        return len(self.heights)

    def __call__(self, height: float) -> ChartVolume:
        """Chart volume at ``height``."""
        return ChartVolume(float(self.many([height])[0]))

    def many(self, heights: Iterable[float]) -> np.ndarray:
        """Vectorized interpolation; returns an array of chart volumes."""
        targets = np.asarray(list(heights), dtype=float)
        n = len(self.heights)

        upper = np.searchsorted(self.heights, targets, side="left")
        lower = np.searchsorted(self.heights, targets, side="right") - 1

        out_of_range = (upper >= n) | (lower < 0)
        upper_c = np.clip(upper, 0, n - 1)
        lower_c = np.clip(lower, 0, n - 1)

        h0, h1 = self.heights[lower_c], self.heights[upper_c]
        v0, v1 = self.volumes[lower_c], self.volumes[upper_c]

        span = h1 - h0
        exact = span == 0
        with np.errstate(divide="ignore", invalid="ignore"):
            interpolated = v0 + (v1 - v0) / np.where(exact, 1.0, span) * (targets - h0)

        result = np.where(exact, v1, interpolated)
        return np.where(out_of_range, self.volumes[0], result)


def interpolate(height: float, curve: Sequence[CalibrationPoint]) -> ChartVolume:
    """
    Chart volume at ``height`` on ``curve``.

    Args:
        height: Target dip height.
        curve: Calibration points, in any order.

    Returns:
        Interpolated chart volume. Outside the curve's height range this is
        the volume of the lowest-height point.

    Raises:
        EmptyCurveError: If the curve has no points.
    """
    return CurveInterpolator(curve)(height)
