"""
Exceptions for the tank calibration engine.

Provides a hierarchy of exceptions for calibration data errors:
- CalibrationDataError (base)
  - EmptyInputError
  - MalformedDialectError
  - NoDataRowsError
  - UnresolvableColumnsError
  - InsufficientDeliveryPointsError
  - EmptyCurveError

Every error is terminal to the call that raised it and carries a
human-readable message suitable for showing to the operator.
"""

from typing import Any


class CalibrationDataError(ValueError):
    """Base exception for calibration data errors.

    Attributes:
        operation: Operation that failed.
        details: Additional error details.
    """

    default_message = "Calibration data could not be processed"

    def __init__(
        self,
        message: str | None = None,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        """Initialize calibration data error.

        Args:
            message: Human-readable error message.
            operation: Operation that was being performed.
            details: Additional context as key-value pairs.
        """
        super().__init__(message or self.default_message)
        self.operation = operation
        self.details = details or {}

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.operation:
            parts.append(f"Operation: {self.operation}")
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            parts.append(f"Details: {details_str}")
        return " | ".join(parts)


class EmptyInputError(CalibrationDataError):
    """Raw text is empty or whitespace only."""

    default_message = "File content is empty."


class MalformedDialectError(CalibrationDataError):
    """Tagged table is missing its header or data lines."""

    default_message = "Tagged tank table must have a header and at least one data row."


class NoDataRowsError(CalibrationDataError):
    """No data rows were found, or none survived numeric coercion.

    Raised when:
    - A header row is present but no lines follow it
    - A headerless file yields zero rows
    - Every row is dropped because a required field is not numeric
    """

    default_message = "No valid numeric data found."


class UnresolvableColumnsError(CalibrationDataError):
    """Header row lacks a height column plus a volume or delivery column."""

    default_message = (
        'Could not automatically detect "Height" and "Volume" columns. '
        "Please check the file headers or ensure the format is correct."
    )

    def __init__(
        self,
        message: str | None = None,
        headers: list[str] | tuple[str, ...] | None = None,
        **kwargs: Any,
    ):
        details = kwargs.pop("details", {})
        if headers is not None:
            details["headers"] = list(headers)
        super().__init__(message, details=details, **kwargs)


class InsufficientDeliveryPointsError(CalibrationDataError):
    """Fewer than two dip readings supplied for delivery validation."""

    default_message = (
        "Delivery validation requires at least two data points "
        "(e.g., before and after delivery)."
    )

    def __init__(self, message: str | None = None, count: int | None = None, **kwargs: Any):
        details = kwargs.pop("details", {})
        if count is not None:
            details["readings"] = count
        super().__init__(message, details=details, **kwargs)


class EmptyCurveError(CalibrationDataError):
    """Interpolation was requested against a curve with no points."""

    default_message = "Calibration curve must contain at least one point."
