"""
Table parsing, header mapping and row normalization.
"""

from tank_calibration.tables.headers import HEADER_PATTERNS, HeaderMapper, map_headers
from tank_calibration.tables.normalizer import RecordNormalizer, coerce_float
from tank_calibration.tables.parser import (
    HeaderedTable,
    HeaderlessTable,
    ParsedTable,
    TableParser,
    TaggedTable,
    parse_number,
    parse_table,
)

__all__ = [
    # Parser
    "HeaderedTable",
    "HeaderlessTable",
    "ParsedTable",
    "TableParser",
    "TaggedTable",
    "parse_number",
    "parse_table",
    # Headers
    "HEADER_PATTERNS",
    "HeaderMapper",
    "map_headers",
    # Normalizer
    "RecordNormalizer",
    "coerce_float",
]
