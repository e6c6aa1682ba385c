"""
Holiday provider using the holidays library for national public holidays.
"""

import logging
import threading
from datetime import date
from typing import Dict, List, Optional

import holidays

from working_day_calculator.data.schemas import Holiday
from working_day_calculator.exceptions import UnsupportedCountryError

logger = logging.getLogger(__name__)


class HolidayProvider:
    """Provides public holiday information per country code."""

    def __init__(self, language: Optional[str] = None):
        """
        Initialize the holiday provider.

        Args:
            language: Language for holiday names (e.g., 'en', 'de').
                Uses each country's default language if not provided.
        """
        self.language = language
        self._calendars: Dict[str, holidays.HolidayBase] = {}
        # Calendars expand their year set lazily on lookup, so reads mutate too.
        self._lock = threading.Lock()

    def is_holiday(self, check_date: date, country_code: str) -> bool:
        """
        Check if a specific date is a public holiday.

        Args:
            check_date: Date to check.
            country_code: Country code (e.g., 'DE', 'FR').

        Returns:
            True if the date is a holiday, False otherwise.

        Raises:
            UnsupportedCountryError: If no calendar exists for the country.
        """
        with self._lock:
            calendar = self._get_calendar(country_code)
            return check_date in calendar

    def get_holidays_for_year(self, year: int, country_code: str) -> List[Holiday]:
        """
        Get all holidays for a specific year.

        Args:
            year: Year to get holidays for.
            country_code: Country code (e.g., 'DE', 'FR').

        Returns:
            List of Holiday objects for the year, sorted by date.

        Raises:
            UnsupportedCountryError: If no calendar exists for the country.
        """
        code = self._normalize(country_code)
        try:
            year_holidays = holidays.country_holidays(
                code, years=year, language=self.language
            )
        except NotImplementedError as e:
            raise UnsupportedCountryError(code) from e

        return [
            Holiday(holiday_date=holiday_date, name=name)
            for holiday_date, name in sorted(year_holidays.items())
        ]

    def clear_cache(self) -> None:
        """Drop all memoized country calendars."""
        with self._lock:
            self._calendars.clear()

    def _get_calendar(self, country_code: str) -> holidays.HolidayBase:
        """Return the memoized calendar for a country, creating it on first use."""
        code = self._normalize(country_code)
        calendar = self._calendars.get(code)
        if calendar is None:
            try:
                calendar = holidays.country_holidays(code, language=self.language)
            except NotImplementedError as e:
                logger.warning(f"No holiday calendar for country code {code!r}")
                raise UnsupportedCountryError(code) from e
            logger.debug(f"Created holiday calendar for {code}")
            self._calendars[code] = calendar
        return calendar

    @staticmethod
    def _normalize(country_code: str) -> str:
        return (country_code or "").strip().upper()
