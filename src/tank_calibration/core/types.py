"""
Domain-specific types and enumerations for tank calibration.
"""

from enum import Enum
from typing import NewType, Union

# Volume read off the calibration chart for a dip height
ChartVolume = NewType("ChartVolume", float)

# Volume measured independently in the field at a dip height
FieldVolume = NewType("FieldVolume", float)

# A single parsed table cell: numeric literal or trimmed text
Cell = Union[float, str]


class TableDialect(str, Enum):
    """Textual layouts recognized by the table parser."""

    HEADERED = "headered"
    HEADERLESS = "headerless"
    TAGGED = "tagged"


class HeaderCategory(str, Enum):
    """Semantic column categories detected from header text."""

    HEIGHT = "height"
    VOLUME = "volume"
    FIELD = "field"
    DELIVERY = "delivery"


class ColumnOrder(str, Enum):
    """Column order used by tabular renderings."""

    HEIGHT_VOLUME = "height-volume"
    VOLUME_HEIGHT = "volume-height"


class ValidationMode(str, Enum):
    """Kinds of field validation."""

    POINT = "point_validation"
    DELIVERY = "delivery_validation"


def compute_deviation(field_volume: FieldVolume, chart_volume: ChartVolume) -> float:
    """Deviation of a field measurement from the chart (field minus chart)."""
    return float(field_volume) - float(chart_volume)
