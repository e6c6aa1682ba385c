"""
Request validation for working day calculations.
"""

import logging
from datetime import date
from typing import Optional

from working_day_calculator.core.interfaces import CountryDirectory
from working_day_calculator.data.schemas import (
    MAX_SUPPORTED_DATE,
    MIN_SUPPORTED_DATE,
    ValidationFailure,
    ValidationOutcome,
    ValidationSuccess,
    WorkingDayError,
)

logger = logging.getLogger(__name__)


class RequestValidator:
    """Validates a (start, end, country code) request before calculation."""

    def __init__(self, country_directory: CountryDirectory):
        """
        Initialize the request validator.

        Args:
            country_directory: Directory used to resolve country codes.
        """
        self.country_directory = country_directory

    def validate(
        self, start: date, end: date, country_code: Optional[str]
    ) -> ValidationOutcome:
        """
        Validate a working day calculation request.

        Rules are checked in order and the first failure is returned:
        1. start must not be after end
        2. both dates must lie within the supported range
        3. the country code must resolve to a known country

        Args:
            start: Start date of the period.
            end: End date of the period.
            country_code: Country code as submitted.

        Returns:
            ValidationSuccess with the resolved country, or ValidationFailure
            with the error kind.
        """
        if start > end:
            return self._fail(WorkingDayError.INVALID_DATE_RANGE, start, end, country_code)

        if start < MIN_SUPPORTED_DATE or end > MAX_SUPPORTED_DATE:
            return self._fail(WorkingDayError.DATE_BEFORE_MINIMUM, start, end, country_code)

        country = self.country_directory.find_by_code(country_code)
        if country is None:
            return self._fail(WorkingDayError.INVALID_COUNTRY, start, end, country_code)

        return ValidationSuccess(country=country)

    def _fail(
        self,
        error: WorkingDayError,
        start: date,
        end: date,
        country_code: Optional[str],
    ) -> ValidationFailure:
        logger.info(
            f"Rejected request {start.isoformat()}..{end.isoformat()} "
            f"country={country_code!r}: {error.code}"
        )
        return ValidationFailure(error=error)
