"""
Collaborator contracts consumed by the validator and the calculator.
"""

from datetime import date
from typing import List, Optional, Protocol, runtime_checkable

from working_day_calculator.data.schemas import Country


@runtime_checkable
class HolidayOracle(Protocol):
    """Answers whether a date is a public holiday in a country."""

    def is_holiday(self, check_date: date, country_code: str) -> bool:
        ...


@runtime_checkable
class CountryDirectory(Protocol):
    """Resolves and enumerates supported countries."""

    def find_by_code(self, code: Optional[str]) -> Optional[Country]:
        ...

    def list_all(self) -> List[Country]:
        ...
