"""
Packages a working day count with the request data for presentation.
"""

from datetime import date
from typing import Sequence

from working_day_calculator.data.schemas import CalculationResult, Country


class ResultAssembler:
    """Builds CalculationResult objects."""

    def assemble(
        self,
        count: int,
        start: date,
        end: date,
        country: Country,
        all_countries: Sequence[Country],
        selected_code: str,
    ) -> CalculationResult:
        return CalculationResult(
            working_days=count,
            start_date=start,
            end_date=end,
            country=country,
            all_countries=tuple(all_countries),
            selected_country_code=selected_code,
        )
