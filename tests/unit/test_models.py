"""
Tests for core data models.
"""

import pytest
from pydantic import ValidationError

from tank_calibration.core.exceptions import (
    CalibrationDataError,
    EmptyInputError,
    InsufficientDeliveryPointsError,
    UnresolvableColumnsError,
)
from tank_calibration.core.models import (
    CalibrationPoint,
    DeviationPoint,
    HeaderMapping,
    ProcessedRecord,
    ReportConfig,
    ValidationStats,
)
from tank_calibration.core.types import ChartVolume, ColumnOrder, FieldVolume, compute_deviation


class TestProcessedRecord:
    """Tests for ProcessedRecord."""

    def test_bare_calibration_point(self):
        """Test a record without field data has no deviation."""
        record = ProcessedRecord(height=10.0, chart_volume=100.0)

        assert record.field_volume is None
        assert record.deviation is None

    def test_from_measurement(self):
        """Test deviation is field minus chart."""
        record = ProcessedRecord.from_measurement(10.0, ChartVolume(100.0), FieldVolume(97.5))

        assert record.deviation == pytest.approx(-2.5)

    def test_from_measurement_without_field(self):
        """Test no deviation is invented when the field volume is absent."""
        record = ProcessedRecord.from_measurement(10.0, ChartVolume(100.0))

        assert record.deviation is None

    def test_deviation_requires_field_volume(self):
        """Test inconsistent records are rejected."""
        with pytest.raises(ValidationError):
            ProcessedRecord(height=1.0, chart_volume=1.0, deviation=0.0)
        with pytest.raises(ValidationError):
            ProcessedRecord(height=1.0, chart_volume=1.0, field_volume=2.0)
        with pytest.raises(ValidationError):
            ProcessedRecord(height=0.0, chart_volume=100.0, field_volume=120.0, deviation=999.0)

    def test_consistent_deviation_accepted(self):
        """Test a deviation equal to field minus chart is accepted."""
        record = ProcessedRecord(height=0.0, chart_volume=100.0, field_volume=120.0, deviation=20.0)

        assert record.deviation == 20.0

    def test_to_calibration_point(self):
        """Test field data is dropped when converting to a curve point."""
        record = ProcessedRecord.from_measurement(5.0, ChartVolume(50.0), FieldVolume(55.0))

        assert record.to_calibration_point() == CalibrationPoint(height=5.0, chart_volume=50.0)

    def test_frozen(self):
        """Test records cannot be mutated."""
        record = ProcessedRecord(height=1.0, chart_volume=1.0)

        with pytest.raises(ValidationError):
            record.height = 2.0

    def test_serialization(self):
        """Test records serialize for external renderers."""
        record = ProcessedRecord.from_measurement(1.0, ChartVolume(2.0), FieldVolume(3.0))

        assert record.model_dump() == {
            "height": 1.0,
            "chart_volume": 2.0,
            "field_volume": 3.0,
            "deviation": 1.0,
        }


class TestValidationStats:
    """Tests for ValidationStats."""

    def test_empty(self):
        """Test zero-value stats."""
        stats = ValidationStats.empty()

        assert stats.total_measurements == 0
        assert stats.max_deviation == DeviationPoint()

    def test_summary(self):
        """Test summary generation."""
        stats = ValidationStats(
            total_measurements=2,
            average_deviation=1.5,
            max_deviation=DeviationPoint(height=100.0, value=3.0),
            min_deviation=DeviationPoint(height=50.0, value=0.0),
        )

        summary = stats.summary()

        assert "Measurements: 2" in summary
        assert "+3.00 @ 100" in summary


class TestReportConfig:
    """Tests for ReportConfig."""

    def test_defaults(self):
        """Test presentation defaults."""
        config = ReportConfig()

        assert config.column_order == ColumnOrder.HEIGHT_VOLUME
        assert config.decimal_places == 2

    def test_decimal_places_bounds(self):
        """Test decimal places are range-checked."""
        with pytest.raises(ValidationError):
            ReportConfig(decimal_places=11)


class TestHeaderMapping:
    """Tests for HeaderMapping."""

    def test_duplicate_headers_first_index(self):
        """Test the first of duplicated headers is used."""
        mapping = HeaderMapping(headers=("Height", "Volume", "Volume"), height_header="Height")

        assert mapping.column_index("Volume") == 1


class TestTypes:
    """Tests for domain types."""

    def test_compute_deviation(self):
        """Test deviation combines field and chart volumes."""
        assert compute_deviation(FieldVolume(105.0), ChartVolume(100.0)) == 5.0


class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_hierarchy(self):
        """Test all engine errors share a ValueError base."""
        assert issubclass(EmptyInputError, CalibrationDataError)
        assert issubclass(CalibrationDataError, ValueError)

    def test_default_message_and_context(self):
        """Test default messages and context rendering."""
        error = InsufficientDeliveryPointsError(operation="validate", count=1)

        text = str(error)
        assert "at least two data points" in text
        assert "Operation: validate" in text
        assert "readings=1" in text

    def test_custom_message(self):
        """Test a custom message replaces the default."""
        error = UnresolvableColumnsError("custom", headers=("A",))

        assert str(error).startswith("custom")
        assert error.details == {"headers": ["A"]}
