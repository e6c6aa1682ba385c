"""
Data models and schemas for the working day calculator.
"""

from working_day_calculator.data.schemas import (
    MAX_SUPPORTED_DATE,
    MIN_SUPPORTED_DATE,
    CalculationResult,
    Config,
    Country,
    Holiday,
    ValidationFailure,
    ValidationOutcome,
    ValidationSuccess,
    WorkingDayError,
)

__all__ = [
    "CalculationResult",
    "Config",
    "Country",
    "Holiday",
    "MAX_SUPPORTED_DATE",
    "MIN_SUPPORTED_DATE",
    "ValidationFailure",
    "ValidationOutcome",
    "ValidationSuccess",
    "WorkingDayError",
]
