"""
Application service orchestrating validation, calculation and result assembly.
"""

import logging
from datetime import date
from typing import List, Optional, Union

from working_day_calculator.core.assembler import ResultAssembler
from working_day_calculator.core.calculator import WorkingDayCalculator
from working_day_calculator.core.country_directory import CountryService
from working_day_calculator.core.holiday_provider import HolidayProvider
from working_day_calculator.core.interfaces import CountryDirectory
from working_day_calculator.core.validator import RequestValidator
from working_day_calculator.data.schemas import (
    CalculationResult,
    Config,
    Country,
    Holiday,
    ValidationFailure,
    ValidationOutcome,
)

logger = logging.getLogger(__name__)


class WorkingDayService:
    """Facade used by the CLI, the REST API and the MCP server."""

    def __init__(
        self,
        validator: RequestValidator,
        calculator: WorkingDayCalculator,
        country_directory: CountryDirectory,
        holiday_provider: Optional[HolidayProvider] = None,
        assembler: Optional[ResultAssembler] = None,
    ):
        """
        Initialize the service.

        Args:
            validator: Request validator.
            calculator: Working day calculator.
            country_directory: Directory of supported countries.
            holiday_provider: Provider used for holiday listings.
            assembler: Result assembler (created if not provided).
        """
        self.validator = validator
        self.calculator = calculator
        self.country_directory = country_directory
        self.holiday_provider = holiday_provider
        self.assembler = assembler or ResultAssembler()

    def validate_request(
        self, start: date, end: date, country_code: Optional[str]
    ) -> ValidationOutcome:
        """Validate a working day calculation request."""
        return self.validator.validate(start, end, country_code)

    def calculate_working_days(
        self, start: date, end: date, country_code: str, country: Country
    ) -> CalculationResult:
        """
        Calculate working days for an already validated request.

        Args:
            start: Start date (inclusive).
            end: End date (inclusive).
            country_code: Country code as submitted.
            country: Country resolved by validation.

        Returns:
            CalculationResult with the count and echoed request data.
        """
        working_days = self.calculator.calculate(start, end, country.code)
        logger.debug(f"Calculated {working_days} working days for {country.code}")
        return self.assembler.assemble(
            working_days,
            start,
            end,
            country,
            self.country_directory.list_all(),
            country_code,
        )

    def process(
        self, start: date, end: date, country_code: Optional[str]
    ) -> Union[CalculationResult, ValidationFailure]:
        """
        Validate and, if valid, calculate.

        Returns:
            CalculationResult on success, otherwise the ValidationFailure.
            The calculator is not invoked for invalid requests.
        """
        outcome = self.validate_request(start, end, country_code)
        if isinstance(outcome, ValidationFailure):
            return outcome
        return self.calculate_working_days(start, end, country_code, outcome.country)

    def get_all_countries(self) -> List[Country]:
        """Return all supported countries in catalog order."""
        return self.country_directory.list_all()

    def get_holidays_for_year(self, year: int, country_code: str) -> List[Holiday]:
        """
        List a year's public holidays for a country.

        Raises:
            RuntimeError: If the service was built without a holiday provider.
            UnsupportedCountryError: If no calendar exists for the country.
        """
        if self.holiday_provider is None:
            raise RuntimeError("No holiday provider configured")
        return self.holiday_provider.get_holidays_for_year(year, country_code)


def build_service(config: Optional[Config] = None) -> WorkingDayService:
    """
    Wire the default collaborators into a WorkingDayService.

    Args:
        config: Configuration to use (defaults if not provided).

    Returns:
        Ready-to-use WorkingDayService.

    Raises:
        CountryCatalogError: If the country catalog cannot be loaded.
    """
    config = config or Config()
    country_service = CountryService(config.country_catalog_path)
    holiday_provider = HolidayProvider(language=config.holiday_language)
    return WorkingDayService(
        validator=RequestValidator(country_service),
        calculator=WorkingDayCalculator(holiday_provider),
        country_directory=country_service,
        holiday_provider=holiday_provider,
    )
