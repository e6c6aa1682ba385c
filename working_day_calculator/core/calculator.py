"""
Main working day calculator logic.
"""

import logging
from datetime import date, timedelta

from working_day_calculator.core.interfaces import HolidayOracle

logger = logging.getLogger(__name__)

SATURDAY = 5
SUNDAY = 6


class WorkingDayCalculator:
    """Counts working days, excluding weekends and public holidays."""

    def __init__(self, holiday_oracle: HolidayOracle):
        """
        Initialize the working day calculator.

        Args:
            holiday_oracle: Source of public holiday information.
        """
        self.holiday_oracle = holiday_oracle

    def calculate(self, start: date, end: date, country_code: str) -> int:
        """
        Calculate working days between two dates, both inclusive.

        Args:
            start: Start date of the period.
            end: End date of the period.
            country_code: Country whose public holidays are excluded.

        Returns:
            Number of working days, or 0 if start is after end.

        Raises:
            UnsupportedCountryError: If the holiday oracle has no calendar
                for the country code.
        """
        if start > end:
            return 0

        code = country_code.strip().upper()
        calendar_days = (end - start).days + 1

        working_days = 0
        for offset in range(calendar_days):
            current = start + timedelta(days=offset)
            if self.is_working_day(current, code):
                working_days += 1

        logger.debug(
            f"{start.isoformat()}..{end.isoformat()} ({code}): "
            f"{working_days} of {calendar_days} days are working days"
        )
        return working_days

    def is_working_day(self, check_date: date, country_code: str) -> bool:
        """Return True if the date is neither a weekend day nor a holiday."""
        if check_date.weekday() in (SATURDAY, SUNDAY):
            return False
        return not self.holiday_oracle.is_holiday(check_date, country_code)
