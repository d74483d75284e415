"""
Semantic header detection.

Column roles are recognized by case-insensitive pattern matching. The
patterns live in an ordered table so categories can be extended without
touching the matching logic.
"""

import re
from typing import Optional, Sequence

from tank_calibration.core.models import HeaderMapping
from tank_calibration.core.types import HeaderCategory

HEADER_PATTERNS: tuple[tuple[HeaderCategory, re.Pattern[str]], ...] = (
    (HeaderCategory.HEIGHT, re.compile(r"height|depth|level|dip", re.IGNORECASE)),
    (HeaderCategory.VOLUME, re.compile(r"volume|capacity|liters|gallons|ltrs", re.IGNORECASE)),
    (HeaderCategory.FIELD, re.compile(r"field|actual|measured|site", re.IGNORECASE)),
    (HeaderCategory.DELIVERY, re.compile(r"delivery|delivered|fuel delivery", re.IGNORECASE)),
)


class HeaderMapper:
    """Labels raw headers as height, chart volume, field volume or delivery."""

    def __init__(
        self,
        patterns: Sequence[tuple[HeaderCategory, re.Pattern[str]]] = HEADER_PATTERNS,
    ):
        self.patterns = tuple(patterns)

    def categories(self, header: str) -> set[HeaderCategory]:
        """All categories whose pattern matches ``header``."""
        return {category for category, pattern in self.patterns if pattern.search(header)}

    def map_headers(self, headers: Sequence[str]) -> Optional[HeaderMapping]:
        """
        Resolve the semantic role of each header.

        Args:
            headers: Raw header row.

        Returns:
            HeaderMapping, or None when there is no height column or no
            volume/delivery column to pair it with.
        """
        labeled = [(h, self.categories(h)) for h in headers]

        def first(predicate) -> Optional[str]:
            return next((h for h, cats in labeled if predicate(cats)), None)

        height = first(lambda c: HeaderCategory.HEIGHT in c)
        field_volume = first(lambda c: {HeaderCategory.VOLUME, HeaderCategory.FIELD} <= c)
        volume = first(
            lambda c: HeaderCategory.VOLUME in c and HeaderCategory.FIELD not in c
        ) or first(lambda c: HeaderCategory.VOLUME in c)
        delivery = first(lambda c: HeaderCategory.DELIVERY in c)

        if height is None or (volume is None and delivery is None):
            return None

        return HeaderMapping(
            headers=tuple(headers),
            height_header=height,
            volume_header=volume,
            field_volume_header=field_volume,
            delivery_header=delivery,
        )


def map_headers(headers: Sequence[str]) -> Optional[HeaderMapping]:
    """Map headers with the default pattern table."""
    return HeaderMapper().map_headers(headers)
