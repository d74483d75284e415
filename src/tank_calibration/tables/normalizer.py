"""
Normalization of parsed table rows into typed records.

Rows whose required fields are missing or non-numeric are dropped
silently; a call fails only when no row survives.
"""

from typing import Callable, Optional, Sequence, TypeVar

from tank_calibration.core.exceptions import NoDataRowsError, UnresolvableColumnsError
from tank_calibration.core.logging import get_logger
from tank_calibration.core.models import (
    CalibrationPoint,
    DeliveryReading,
    FieldMeasurement,
    HeaderMapping,
    ProcessedRecord,
)
from tank_calibration.core.types import Cell, ChartVolume, FieldVolume
from tank_calibration.tables.parser import ParsedTable, parse_number

logger = get_logger(__name__)

T = TypeVar("T")


def coerce_float(cell: Optional[Cell]) -> Optional[float]:
    """Coerce a cell to float, or None when it is not numeric."""
    if cell is None:
        return None
    if isinstance(cell, (int, float)):
        value = float(cell)
        return value if value == value else None  # NaN
    return parse_number(cell)


class RecordNormalizer:
    """
    Projects labeled table rows onto typed records.

    Args:
        table: Parsed table.
        mapping: Header mapping resolved for ``table.headers``.
    """

    def __init__(self, table: ParsedTable, mapping: HeaderMapping):
        self.table = table
        self.mapping = mapping

    def _index(self, header: Optional[str], role: str) -> int:
        index = self.mapping.column_index(header)
        if index is None:
            raise UnresolvableColumnsError(
                f"No {role} column found in the table headers.",
                headers=self.mapping.headers,
                operation="normalize",
            )
        return index

    @staticmethod
    def _cell(row: Sequence[Cell], index: int) -> Optional[float]:
        return coerce_float(row[index]) if index < len(row) else None

    def _project(
        self,
        indices: Sequence[int],
        build: Callable[..., T],
        what: str,
    ) -> list[T]:
        records = []
        for row in self.table.rows:
            values = [self._cell(row, i) for i in indices]
            if any(v is None for v in values):
                continue
            records.append(build(*values))

        dropped = len(self.table.rows) - len(records)
        if dropped:
            logger.debug(f"Dropped {dropped} of {len(self.table.rows)} rows without numeric {what}")
        if not records:
            raise NoDataRowsError(operation="normalize", details={"rows": len(self.table.rows)})
        return records

    def to_curve(self) -> list[CalibrationPoint]:
        """Height and chart volume pairs."""
        indices = (
            self._index(self.mapping.height_header, "height"),
            self._index(self.mapping.volume_header, "volume"),
        )
        return self._project(
            indices,
            lambda h, v: CalibrationPoint(height=h, chart_volume=v),
            "height/volume",
        )

    def to_processed_records(self) -> list[ProcessedRecord]:
        """
        Chart rows with an optional field-volume measurement.

        Height and chart volume are required; a field volume is attached
        when the mapping has a field-volume column and the cell is numeric.
        """
        height_idx = self._index(self.mapping.height_header, "height")
        volume_idx = self._index(self.mapping.volume_header, "volume")
        field_idx = self.mapping.column_index(self.mapping.field_volume_header)
        if field_idx == volume_idx:
            field_idx = None

        def build(row: Sequence[Cell]) -> Optional[ProcessedRecord]:
            height = self._cell(row, height_idx)
            chart = self._cell(row, volume_idx)
            if height is None or chart is None:
                return None
            field = self._cell(row, field_idx) if field_idx is not None else None
            return ProcessedRecord.from_measurement(
                height,
                ChartVolume(chart),
                FieldVolume(field) if field is not None else None,
            )

        records = [r for r in map(build, self.table.rows) if r is not None]
        dropped = len(self.table.rows) - len(records)
        if dropped:
            logger.debug(f"Dropped {dropped} of {len(self.table.rows)} chart rows")
        if not records:
            raise NoDataRowsError(operation="normalize", details={"rows": len(self.table.rows)})
        return records

    def to_field_measurements(self) -> list[FieldMeasurement]:
        """Height and field volume pairs for point validation.

        Uses the field-volume column when one is labeled, otherwise the
        plain volume column.
        """
        volume_header = self.mapping.field_volume_header or self.mapping.volume_header
        indices = (
            self._index(self.mapping.height_header, "height"),
            self._index(volume_header, "volume"),
        )
        return self._project(
            indices,
            lambda h, v: FieldMeasurement(height=h, field_volume=v),
            "height/field volume",
        )

    def to_delivery_readings(self) -> list[DeliveryReading]:
        """Height and reported delivery pairs, in file order."""
        indices = (
            self._index(self.mapping.height_header, "height"),
            self._index(self.mapping.delivery_header, "delivery"),
        )
        return self._project(
            indices,
            lambda h, d: DeliveryReading(height=h, delivery=d),
            "height/delivery",
        )
