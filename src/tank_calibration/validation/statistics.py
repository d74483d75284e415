"""
Deviation statistics.
"""

from typing import Sequence

import numpy as np

from tank_calibration.core.models import (
    DeliveryRecord,
    DeviationPoint,
    ProcessedRecord,
    ValidationStats,
)


def aggregate(deviations: Sequence[DeviationPoint]) -> ValidationStats:
    """
    Reduce deviations to summary statistics.

    Non-finite values are skipped. Extremes keep the earliest deviation in
    iteration order when several share the same value. Input with no finite
    deviation yields ``ValidationStats.empty()``.

    Args:
        deviations: Deviation values with the height they occurred at.

    Returns:
        ValidationStats over the finite deviations.
    """
    deviations = [d for d in deviations if np.isfinite(d.value)]
    if not deviations:
        return ValidationStats.empty()

    values = np.array([d.value for d in deviations], dtype=float)
    # argmax/argmin return the first occurrence of the extreme
    i_max = int(np.argmax(values))
    i_min = int(np.argmin(values))

    return ValidationStats(
        total_measurements=len(values),
        average_deviation=float(np.mean(values)),
        max_deviation=DeviationPoint(height=deviations[i_max].height, value=values[i_max]),
        min_deviation=DeviationPoint(height=deviations[i_min].height, value=values[i_min]),
    )


def stats_for_records(records: Sequence[ProcessedRecord]) -> ValidationStats:
    """Stats over the records that carry a deviation, located by height."""
    return aggregate(
        [
            DeviationPoint(height=r.height, value=r.deviation)
            for r in records
            if r.deviation is not None
        ]
    )


def stats_for_deliveries(records: Sequence[DeliveryRecord]) -> ValidationStats:
    """Stats over delivery deviations, located at the post-delivery height."""
    return aggregate([DeviationPoint(height=r.height_after, value=r.deviation) for r in records])
