"""
Core business logic for working day calculation.
"""

from working_day_calculator.core.assembler import ResultAssembler
from working_day_calculator.core.calculator import WorkingDayCalculator
from working_day_calculator.core.country_directory import CountryService
from working_day_calculator.core.holiday_provider import HolidayProvider
from working_day_calculator.core.interfaces import CountryDirectory, HolidayOracle
from working_day_calculator.core.service import WorkingDayService, build_service
from working_day_calculator.core.validator import RequestValidator

__all__ = [
    "CountryDirectory",
    "CountryService",
    "HolidayOracle",
    "HolidayProvider",
    "RequestValidator",
    "ResultAssembler",
    "WorkingDayCalculator",
    "WorkingDayService",
    "build_service",
]
