"""
Calibration curve interpolation and resampling.
"""

from tank_calibration.curves.interpolation import CurveInterpolator, interpolate
from tank_calibration.curves.resample import generate_strapping_chart, resample

__all__ = [
    "CurveInterpolator",
    "interpolate",
    "generate_strapping_chart",
    "resample",
]
