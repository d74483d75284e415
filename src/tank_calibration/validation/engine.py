"""
Validation of a calibration curve against field data.

Two modes share one interpolator:

- Point validation compares field-measured volumes with chart volumes at
  the same dip heights.
- Delivery validation compares each reported delivery with the chart
  volume change between the dips taken before and after it.
"""

from typing import Sequence

from tank_calibration.core.exceptions import InsufficientDeliveryPointsError
from tank_calibration.core.models import (
    CalibrationPoint,
    DeliveryReading,
    DeliveryRecord,
    DeliveryValidationResult,
    FieldMeasurement,
    PointValidationResult,
    ProcessedRecord,
)
from tank_calibration.core.types import ChartVolume, FieldVolume
from tank_calibration.curves.interpolation import CurveInterpolator
from tank_calibration.validation.statistics import stats_for_deliveries, stats_for_records


class ValidationEngine:
    """
    Validates field data against one calibration curve.

    Args:
        curve: Calibration points, in any order. Not modified.

    Raises:
        EmptyCurveError: If the curve has no points.
    """

    def __init__(self, curve: Sequence[CalibrationPoint]):
        self.interpolator = CurveInterpolator(curve)

    def validate_points(self, measurements: Sequence[FieldMeasurement]) -> list[ProcessedRecord]:
        """
        Compare field volumes with the chart.

        Returns:
            One record per measurement, in input order.
        """
        chart_volumes = self.interpolator.many(m.height for m in measurements)
        return [
            ProcessedRecord.from_measurement(
                m.height, ChartVolume(float(chart)), FieldVolume(m.field_volume)
            )
            for m, chart in zip(measurements, chart_volumes)
        ]

    def validate_deliveries(self, readings: Sequence[DeliveryReading]) -> list[DeliveryRecord]:
        """
        Compare reported deliveries with chart-implied volume changes.

        Each consecutive pair of readings yields one record, unless the later
        reading reports zero delivery (a baseline dip, not a delivery event).

        Raises:
            InsufficientDeliveryPointsError: If fewer than two readings are given.
        """
        if len(readings) < 2:
            raise InsufficientDeliveryPointsError(
                operation="validate_deliveries", count=len(readings)
            )

        records = []
        for before, after in zip(readings, readings[1:]):
            if after.delivery == 0:
                continue

            volume_before = self.interpolator(before.height)
            volume_after = self.interpolator(after.height)
            chart_delivery = volume_after - volume_before

            records.append(
                DeliveryRecord(
                    height_before=before.height,
                    height_after=after.height,
                    reported_delivery=after.delivery,
                    chart_calculated_delivery=chart_delivery,
                    deviation=after.delivery - chart_delivery,
                )
            )
        return records

    def point_validation(self, measurements: Sequence[FieldMeasurement]) -> PointValidationResult:
        """Point validation records with their stats."""
        records = self.validate_points(measurements)
        return PointValidationResult(records=records, stats=stats_for_records(records))

    def delivery_validation(self, readings: Sequence[DeliveryReading]) -> DeliveryValidationResult:
        """Delivery validation records with their stats."""
        records = self.validate_deliveries(readings)
        return DeliveryValidationResult(records=records, stats=stats_for_deliveries(records))


def validate_points(
    measurements: Sequence[FieldMeasurement],
    curve: Sequence[CalibrationPoint],
) -> list[ProcessedRecord]:
    """Point validation against ``curve``; see ValidationEngine.validate_points."""
    return ValidationEngine(curve).validate_points(measurements)


def _delivery_engine(
    readings: Sequence[DeliveryReading],
    curve: Sequence[CalibrationPoint],
) -> ValidationEngine:
    # Reading count is reported ahead of an empty curve
    if len(readings) < 2:
        raise InsufficientDeliveryPointsError(operation="validate_deliveries", count=len(readings))
    return ValidationEngine(curve)


def validate_deliveries(
    readings: Sequence[DeliveryReading],
    curve: Sequence[CalibrationPoint],
) -> list[DeliveryRecord]:
    """Delivery validation against ``curve``; see ValidationEngine.validate_deliveries."""
    return _delivery_engine(readings, curve).validate_deliveries(readings)


def delivery_validation(
    readings: Sequence[DeliveryReading],
    curve: Sequence[CalibrationPoint],
) -> DeliveryValidationResult:
    """Delivery validation records with their stats against ``curve``."""
    return _delivery_engine(readings, curve).delivery_validation(readings)
