"""
Shared fixtures and in-memory collaborators for the test suite.
"""

from datetime import date
from typing import Dict, List, Optional, Set

import pytest

from working_day_calculator.core.calculator import WorkingDayCalculator
from working_day_calculator.core.service import WorkingDayService
from working_day_calculator.core.validator import RequestValidator
from working_day_calculator.data.schemas import Country
from working_day_calculator.exceptions import UnsupportedCountryError


class FakeHolidayOracle:
    """Holiday oracle backed by a fixed {country_code: {dates}} mapping."""

    def __init__(self, holidays: Dict[str, Set[date]]):
        self.holidays = holidays
        self.calls: List[tuple] = []

    def is_holiday(self, check_date: date, country_code: str) -> bool:
        self.calls.append((check_date, country_code))
        if country_code not in self.holidays:
            raise UnsupportedCountryError(country_code)
        return check_date in self.holidays[country_code]


class FakeCountryDirectory:
    """Country directory over an in-memory list."""

    def __init__(self, countries: List[Country]):
        self.countries = countries

    def find_by_code(self, code: Optional[str]) -> Optional[Country]:
        if not code:
            return None
        for country in self.countries:
            if country.code == code.strip().upper():
                return country
        return None

    def list_all(self) -> List[Country]:
        return list(self.countries)


GERMANY = Country(code="DE", name="Germany")
FRANCE = Country(code="FR", name="France")


@pytest.fixture
def oracle():
    """Oracle where only German Unity Day 2023 is a holiday."""
    return FakeHolidayOracle({"DE": {date(2023, 10, 3)}, "FR": set()})


@pytest.fixture
def directory():
    """Directory knowing France and Germany."""
    return FakeCountryDirectory([FRANCE, GERMANY])


@pytest.fixture
def calculator(oracle):
    """Create a WorkingDayCalculator over the fake oracle."""
    return WorkingDayCalculator(oracle)


@pytest.fixture
def validator(directory):
    """Create a RequestValidator over the fake directory."""
    return RequestValidator(directory)


@pytest.fixture
def service(validator, calculator, directory):
    """Create a WorkingDayService wired with fakes."""
    return WorkingDayService(
        validator=validator,
        calculator=calculator,
        country_directory=directory,
    )
