"""
Core data models for the tank calibration engine.

All models use Pydantic for validation and serialization. They are frozen
value objects: built once by a pipeline stage and only read afterwards.
"""

import math
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from tank_calibration.core.types import (
    ChartVolume,
    ColumnOrder,
    FieldVolume,
    TableDialect,
    ValidationMode,
    compute_deviation,
)

_FROZEN = ConfigDict(frozen=True)


class CalibrationPoint(BaseModel):
    """One row of the authoritative calibration curve."""

    model_config = _FROZEN

    height: float = Field(..., description="Dip height")
    chart_volume: float = Field(..., description="Chart volume at this height")


class FieldMeasurement(BaseModel):
    """An independently measured volume at a dip height."""

    model_config = _FROZEN

    height: float
    field_volume: float


class DeliveryReading(BaseModel):
    """A dip reading in a delivery sequence.

    ``delivery`` is the quantity reported as delivered since the previous
    reading; zero marks a baseline dip.
    """

    model_config = _FROZEN

    height: float
    delivery: float


class ProcessedRecord(BaseModel):
    """Calibration point, optionally paired with a field measurement.

    Without ``field_volume`` this is a bare calibration point and
    ``deviation`` is absent (never zero-by-default).
    """

    model_config = _FROZEN

    height: float
    chart_volume: float
    field_volume: Optional[float] = Field(default=None)
    deviation: Optional[float] = Field(default=None)

    @model_validator(mode="after")
    def validate_deviation(self) -> "ProcessedRecord":
        """Ensure deviation is present exactly when a field volume is, and agrees with it."""
        if self.field_volume is None:
            if self.deviation is not None:
                raise ValueError("deviation requires a field_volume")
        elif self.deviation is None:
            raise ValueError("field_volume requires a deviation")
        else:
            expected = self.field_volume - self.chart_volume
            # NaN volumes carry a NaN deviation; statistics skip it
            agrees = math.isclose(self.deviation, expected, rel_tol=1e-9, abs_tol=1e-9) or (
                math.isnan(self.deviation) and math.isnan(expected)
            )
            if not agrees:
                raise ValueError("deviation must equal field_volume - chart_volume")
        return self

    @classmethod
    def from_measurement(
        cls,
        height: float,
        chart_volume: ChartVolume,
        field_volume: Optional[FieldVolume] = None,
    ) -> "ProcessedRecord":
        """Build a record, deriving the deviation from the two volumes."""
        deviation = None
        if field_volume is not None:
            deviation = compute_deviation(field_volume, chart_volume)
        return cls(
            height=height,
            chart_volume=chart_volume,
            field_volume=field_volume,
            deviation=deviation,
        )

    def to_calibration_point(self) -> CalibrationPoint:
        """Drop the field data and return the bare calibration point."""
        return CalibrationPoint(height=self.height, chart_volume=self.chart_volume)


class DeliveryRecord(BaseModel):
    """Chart-implied volume change between two dips vs. the reported delivery."""

    model_config = _FROZEN

    height_before: float
    height_after: float
    reported_delivery: float
    chart_calculated_delivery: float
    deviation: float


class DeviationPoint(BaseModel):
    """A deviation value and the height at which it occurred."""

    model_config = _FROZEN

    height: float = 0.0
    value: float = 0.0


class ValidationStats(BaseModel):
    """Summary statistics over a set of deviations."""

    model_config = _FROZEN

    total_measurements: int = Field(default=0, ge=0)
    average_deviation: float = 0.0
    max_deviation: DeviationPoint = Field(default_factory=DeviationPoint)
    min_deviation: DeviationPoint = Field(default_factory=DeviationPoint)

    @classmethod
    def empty(cls) -> "ValidationStats":
        """Zero-value stats for when there is no validation data yet."""
        return cls()

    def summary(self) -> str:
        """Generate a summary string."""
        return (
            f"Measurements: {self.total_measurements}, "
            f"Average: {self.average_deviation:+.2f}, "
            f"Max: {self.max_deviation.value:+.2f} @ {self.max_deviation.height:g}, "
            f"Min: {self.min_deviation.value:+.2f} @ {self.min_deviation.height:g}"
        )


class HeaderMapping(BaseModel):
    """Semantic labeling of a raw header row."""

    model_config = _FROZEN

    headers: tuple[str, ...] = Field(..., description="Raw header row")
    height_header: str
    volume_header: Optional[str] = None
    field_volume_header: Optional[str] = None
    delivery_header: Optional[str] = None

    def column_index(self, header: Optional[str]) -> Optional[int]:
        """Index of the first column carrying ``header``, or None."""
        if header is None:
            return None
        try:
            return self.headers.index(header)
        except ValueError:
            return None


class ReportConfig(BaseModel):
    """Display configuration handed to external renderers.

    Opaque to the engine: it never affects computation.
    """

    model_config = _FROZEN

    client_name: str = ""
    tank_code: str = ""
    tank_diameter: str = ""
    tank_height: str = ""
    tank_length: str = ""
    tank_capacity: str = ""
    calibration_date: str = ""
    calibration_company: str = ""
    height_header: str = "Height"
    volume_header: str = "Volume"
    column_order: ColumnOrder = Field(default=ColumnOrder.HEIGHT_VOLUME)
    decimal_places: int = Field(default=2, ge=0, le=10)


class ChartAnalysis(BaseModel):
    """Result of processing a calibration chart file."""

    model_config = _FROZEN

    dialect: TableDialect
    mapping: HeaderMapping
    records: list[ProcessedRecord]
    stats: Optional[ValidationStats] = None
    report_config: ReportConfig

    @property
    def curve(self) -> list[CalibrationPoint]:
        """The chart as bare calibration points, in file order."""
        return [r.to_calibration_point() for r in self.records]


class PointValidationResult(BaseModel):
    """Records and stats from a point validation."""

    model_config = _FROZEN

    mode: ValidationMode = ValidationMode.POINT
    records: list[ProcessedRecord]
    stats: ValidationStats


class DeliveryValidationResult(BaseModel):
    """Records and stats from a delivery validation."""

    model_config = _FROZEN

    mode: ValidationMode = ValidationMode.DELIVERY
    records: list[DeliveryRecord]
    stats: ValidationStats
