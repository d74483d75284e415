"""
Point and delivery validation with deviation statistics.
"""

from tank_calibration.validation.engine import (
    ValidationEngine,
    delivery_validation,
    validate_deliveries,
    validate_points,
)
from tank_calibration.validation.statistics import (
    aggregate,
    stats_for_deliveries,
    stats_for_records,
)

__all__ = [
    "ValidationEngine",
    "delivery_validation",
    "validate_deliveries",
    "validate_points",
    "aggregate",
    "stats_for_deliveries",
    "stats_for_records",
]
