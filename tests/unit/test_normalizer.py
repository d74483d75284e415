"""
Tests for row normalization into typed records.
"""

import pytest

from tank_calibration.core.exceptions import NoDataRowsError, UnresolvableColumnsError
from tank_calibration.core.models import CalibrationPoint, HeaderMapping
from tank_calibration.tables.headers import map_headers
from tank_calibration.tables.normalizer import RecordNormalizer, coerce_float
from tank_calibration.tables.parser import parse_table


def _normalizer(text: str) -> RecordNormalizer:
    table = parse_table(text)
    return RecordNormalizer(table, map_headers(table.headers))


class TestCoerceFloat:
    """Tests for cell coercion."""

    def test_numbers_and_numeric_text(self):
        """Test floats pass through and numeric text is parsed."""
        assert coerce_float(3.5) == 3.5
        assert coerce_float(" 12 ") == 12.0

    @pytest.mark.parametrize("cell", [None, "", "n/a", float("nan")])
    def test_non_numeric(self, cell):
        """Test missing and non-numeric cells coerce to None."""
        assert coerce_float(cell) is None


class TestToCurve:
    """Tests for calibration curve projection."""

    def test_projects_by_column_index(self):
        """Test columns are read by header position, not order."""
        curve = _normalizer("Volume,Note,Height\n100,a,1\n200,b,2").to_curve()

        assert curve == [
            CalibrationPoint(height=1.0, chart_volume=100.0),
            CalibrationPoint(height=2.0, chart_volume=200.0),
        ]

    def test_drops_malformed_rows(self):
        """Test rows with non-numeric or missing fields are dropped."""
        text = "Height,Volume\n1,100\nx,200\n3,\n4\n5,500"
        curve = _normalizer(text).to_curve()

        assert [p.height for p in curve] == [1.0, 5.0]

    def test_no_usable_rows(self):
        """Test failure when every row is dropped."""
        with pytest.raises(NoDataRowsError):
            _normalizer("Height,Volume\na,b\nc,d").to_curve()

    def test_missing_volume_column(self):
        """Test a delivery-only mapping cannot produce a curve."""
        with pytest.raises(UnresolvableColumnsError):
            _normalizer("Height,Delivery\n1,0\n2,10").to_curve()

    def test_headerless_table(self):
        """Test synthesized headers map onto a curve."""
        curve = _normalizer("0;0\n10;95.5").to_curve()

        assert curve[1] == CalibrationPoint(height=10.0, chart_volume=95.5)


class TestToProcessedRecords:
    """Tests for chart rows with optional field volumes."""

    def test_field_volume_attached(self, chart_csv):
        """Test deviation is computed when the field volume is numeric."""
        records = _normalizer(chart_csv).to_processed_records()

        assert len(records) == 4
        assert records[1].field_volume == 520.0
        assert records[1].deviation == pytest.approx(20.0)

    def test_missing_field_volume_leaves_deviation_absent(self, chart_csv):
        """Test a blank field cell keeps the row without a deviation."""
        records = _normalizer(chart_csv).to_processed_records()

        assert records[3].field_volume is None
        assert records[3].deviation is None

    def test_without_field_column(self):
        """Test plain charts produce bare records."""
        records = _normalizer("Height,Volume\n1,100").to_processed_records()

        assert records[0].field_volume is None
        assert records[0].deviation is None

    def test_lone_field_column_is_chart_volume(self):
        """Test a field column doubling as the volume column is not compared with itself."""
        records = _normalizer("Height,Measured Volume\n1,100").to_processed_records()

        assert records[0].chart_volume == 100.0
        assert records[0].deviation is None


class TestValidationInputs:
    """Tests for field measurement and delivery projections."""

    def test_field_measurements_prefer_field_column(self):
        """Test the field-volume column is used when labeled."""
        text = "Height,Chart Volume,Field Volume\n10,100,104"
        measurements = _normalizer(text).to_field_measurements()

        assert measurements[0].field_volume == 104.0

    def test_field_measurements_from_volume_column(self):
        """Test a plain volume column holds the field readings."""
        measurements = _normalizer("Height,Volume\n10,104\n20,x").to_field_measurements()

        assert len(measurements) == 1
        assert measurements[0].height == 10.0

    def test_delivery_readings_keep_order(self):
        """Test delivery readings are kept in file order."""
        text = "Dip,Fuel Delivery\n300,0\n100,500\n200,0"
        readings = _normalizer(text).to_delivery_readings()

        assert [r.height for r in readings] == [300.0, 100.0, 200.0]
        assert [r.delivery for r in readings] == [0.0, 500.0, 0.0]

    def test_delivery_column_required(self):
        """Test a volume-only mapping cannot produce delivery readings."""
        with pytest.raises(UnresolvableColumnsError) as exc_info:
            _normalizer("Height,Volume\n1,2").to_delivery_readings()

        assert exc_info.value.details["headers"] == ["Height", "Volume"]

    def test_mapping_with_unknown_header(self):
        """Test a mapping whose header is not in the table fails cleanly."""
        table = parse_table("Height,Volume\n1,2")
        mapping = HeaderMapping(headers=table.headers, height_header="Height", volume_header="Vol")

        with pytest.raises(UnresolvableColumnsError):
            RecordNormalizer(table, mapping).to_curve()
