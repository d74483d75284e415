"""
End-to-end processing of calibration and validation files.

Ties the parser, header mapper, normalizer and validation engine together
for callers holding raw file text. Each call is independent and stateless.
"""

from typing import Sequence, Union

from tank_calibration.config import get_settings
from tank_calibration.core.exceptions import UnresolvableColumnsError
from tank_calibration.core.logging import get_logger, log_operation
from tank_calibration.core.models import (
    CalibrationPoint,
    ChartAnalysis,
    DeliveryReading,
    DeliveryValidationResult,
    PointValidationResult,
    ReportConfig,
)
from tank_calibration.tables.headers import map_headers
from tank_calibration.tables.normalizer import RecordNormalizer
from tank_calibration.tables.parser import parse_table
from tank_calibration.validation.engine import ValidationEngine, delivery_validation
from tank_calibration.validation.statistics import stats_for_records

logger = get_logger(__name__)

ValidationResult = Union[PointValidationResult, DeliveryValidationResult]


def process_chart_text(text: str) -> ChartAnalysis:
    """
    Parse and normalize a calibration chart file.

    Args:
        text: Raw file content.

    Returns:
        ChartAnalysis with the chart records in file order. Stats are
        included only when the chart also carries a field-volume column.

    Raises:
        CalibrationDataError: If the text cannot be parsed, no height and
            volume columns are found, or no row is numeric.
    """
    with log_operation(logger, "process_chart"):
        table = parse_table(text)
        mapping = map_headers(table.headers)
        if mapping is None or mapping.volume_header is None:
            raise UnresolvableColumnsError(headers=table.headers, operation="process_chart")

        records = RecordNormalizer(table, mapping).to_processed_records()
        # A field column that doubles as the chart column yields no deviations
        field_idx = mapping.column_index(mapping.field_volume_header)
        volume_idx = mapping.column_index(mapping.volume_header)
        has_field = field_idx is not None and field_idx != volume_idx
        stats = stats_for_records(records) if has_field else None

        report = get_settings().report
        report_config = ReportConfig(
            height_header=mapping.height_header,
            volume_header=mapping.volume_header,
            column_order=report.column_order,
            decimal_places=report.decimal_places,
        )

        return ChartAnalysis(
            dialect=table.dialect,
            mapping=mapping,
            records=records,
            stats=stats,
            report_config=report_config,
        )


def process_validation_text(
    text: str,
    curve: Sequence[CalibrationPoint],
) -> ValidationResult:
    """
    Validate a calibration curve against a field data file.

    A delivery column selects delivery validation; otherwise a volume
    column selects point validation.

    Args:
        text: Raw validation file content.
        curve: The calibration curve being validated.

    Returns:
        PointValidationResult or DeliveryValidationResult.

    Raises:
        UnresolvableColumnsError: If neither mode can be determined.
        InsufficientDeliveryPointsError: If a delivery file has fewer than
            two usable readings.
    """
    with log_operation(logger, "process_validation"):
        table = parse_table(text)
        mapping = map_headers(table.headers)
        if mapping is None:
            raise UnresolvableColumnsError(
                "Could not determine validation file type. Please ensure headers "
                "like 'Volume' or 'Fuel Delivery' are present.",
                headers=table.headers,
                operation="process_validation",
            )

        normalizer = RecordNormalizer(table, mapping)
        if mapping.delivery_header is not None:
            readings = normalizer.to_delivery_readings()
            logger.debug(f"Delivery validation with {len(readings)} readings")
            return delivery_validation(readings, curve)

        measurements = normalizer.to_field_measurements()
        logger.debug(f"Point validation with {len(measurements)} measurements")
        return ValidationEngine(curve).point_validation(measurements)


def process_delivery_readings(
    readings: Sequence[DeliveryReading],
    curve: Sequence[CalibrationPoint],
) -> DeliveryValidationResult:
    """
    Delivery validation for manually entered readings.

    Raises:
        InsufficientDeliveryPointsError: If fewer than two readings are given.
    """
    with log_operation(logger, "process_delivery_readings"):
        return delivery_validation(readings, curve)
