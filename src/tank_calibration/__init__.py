"""
Tank Calibration - dip chart ingestion and validation engine.

This package turns loosely structured tank calibration tables into a
canonical height-to-volume curve and checks that curve against field data:

- Dialect detection for delimited, headerless and tagged ATG tank tables
- Semantic header mapping (height, chart volume, field volume, delivery)
- Piecewise-linear interpolation and strapping chart resampling
- Point and delivery validation with deviation statistics
"""

__version__ = "1.0.0"

# Core models
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
from tank_calibration.core.exceptions import (
    CalibrationDataError,
    EmptyCurveError,
    EmptyInputError,
    InsufficientDeliveryPointsError,
    MalformedDialectError,
    NoDataRowsError,
    UnresolvableColumnsError,
)
from tank_calibration.core.types import (
    ColumnOrder,
    TableDialect,
    ValidationMode,
)

# Configuration
from tank_calibration.config import (
    Settings,
    configure,
    get_settings,
)

# Engine
from tank_calibration.tables import (
    HeaderMapper,
    RecordNormalizer,
    TableParser,
    map_headers,
    parse_table,
)
from tank_calibration.curves import (
    CurveInterpolator,
    generate_strapping_chart,
    interpolate,
    resample,
)
from tank_calibration.validation import (
    ValidationEngine,
    aggregate,
    delivery_validation,
    validate_deliveries,
    validate_points,
)
from tank_calibration.pipeline import (
    process_chart_text,
    process_delivery_readings,
    process_validation_text,
)

__all__ = [
    # Version
    "__version__",
    # Core models
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
    # Exceptions
    "CalibrationDataError",
    "EmptyCurveError",
    "EmptyInputError",
    "InsufficientDeliveryPointsError",
    "MalformedDialectError",
    "NoDataRowsError",
    "UnresolvableColumnsError",
    # Types
    "ColumnOrder",
    "TableDialect",
    "ValidationMode",
    # Config
    "Settings",
    "configure",
    "get_settings",
    # Tables
    "HeaderMapper",
    "RecordNormalizer",
    "TableParser",
    "map_headers",
    "parse_table",
    # Curves
    "CurveInterpolator",
    "generate_strapping_chart",
    "interpolate",
    "resample",
    # Validation
    "ValidationEngine",
    "aggregate",
    "delivery_validation",
    "validate_deliveries",
    "validate_points",
    # Pipeline
    "process_chart_text",
    "process_delivery_readings",
    "process_validation_text",
]
