"""
Core data models, types and exceptions for the tank calibration engine.
"""

from tank_calibration.core.exceptions import (
    CalibrationDataError,
    EmptyCurveError,
    EmptyInputError,
    InsufficientDeliveryPointsError,
    MalformedDialectError,
    NoDataRowsError,
    UnresolvableColumnsError,
)
from tank_calibration.core.models import (
    CalibrationPoint,
    ChartAnalysis,
    DeliveryReading,
    DeliveryRecord,
    DeliveryValidationResult,
    DeviationPoint,
    FieldMeasurement,
    HeaderMapping,
    PointValidationResult,
    ProcessedRecord,
    ReportConfig,
    ValidationStats,
)
from tank_calibration.core.types import (
    ChartVolume,
    ColumnOrder,
    FieldVolume,
    HeaderCategory,
    TableDialect,
    ValidationMode,
    compute_deviation,
)

__all__ = [
    # Models
    "CalibrationPoint",
    "ChartAnalysis",
    "DeliveryReading",
    "DeliveryRecord",
    "DeliveryValidationResult",
    "DeviationPoint",
    "FieldMeasurement",
    "HeaderMapping",
    "PointValidationResult",
    "ProcessedRecord",
    "ReportConfig",
    "ValidationStats",
    # Types
    "ChartVolume",
    "ColumnOrder",
    "FieldVolume",
    "HeaderCategory",
    "TableDialect",
    "ValidationMode",
    "compute_deviation",
    # Exceptions
    "CalibrationDataError",
    "EmptyCurveError",
    "EmptyInputError",
    "InsufficientDeliveryPointsError",
    "MalformedDialectError",
    "NoDataRowsError",
    "UnresolvableColumnsError",
]
