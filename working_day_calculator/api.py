"""
FastAPI REST API for the working day calculator.
"""

import logging
from datetime import date
from typing import List

from fastapi import Depends, FastAPI, HTTPException, Query
from pydantic import BaseModel, Field

from working_day_calculator.config.manager import ConfigManager
from working_day_calculator.core.service import WorkingDayService, build_service
from working_day_calculator.data.schemas import (
    MAX_SUPPORTED_DATE,
    MIN_SUPPORTED_DATE,
    Country,
    ValidationFailure,
)
from working_day_calculator.exceptions import WorkingDayException

logger = logging.getLogger(__name__)

# Load configuration and wire components
config = ConfigManager().load_config()
service = build_service(config)


def get_service() -> WorkingDayService:
    """Dependency returning the shared, read-only service."""
    return service


# API Models
class CountryInfo(BaseModel):
    """Information about a country."""

    code: str
    name: str


class CalculateResponse(BaseModel):
    """Response model for working day calculation."""

    working_days: int
    start_date: date
    end_date: date
    country: CountryInfo
    selected_country_code: str
    countries: List[CountryInfo] = Field(default_factory=list)


class HolidayResponse(BaseModel):
    """Response model for a single holiday."""

    date: date
    name: str


def _country_info(country: Country) -> CountryInfo:
    return CountryInfo(code=country.code, name=country.name)


# FastAPI app
app = FastAPI(
    title="Working Day Calculator API",
    description="Calculate working days excluding weekends and national public holidays",
    version="0.1.0",
)


@app.get("/")
async def root():
    """API root endpoint with basic info."""
    return {
        "name": "Working Day Calculator API",
        "version": "0.1.0",
        "endpoints": {
            "GET /calculate": "Calculate working days (start, end, country)",
            "GET /countries": "List supported countries",
            "GET /holidays/{year}/{country}": "Get holidays for a year",
        },
    }


@app.get("/calculate", response_model=CalculateResponse)
def calculate_working_days(
    start: date = Query(..., description="Start date (YYYY-MM-DD), inclusive"),
    end: date = Query(..., description="End date (YYYY-MM-DD), inclusive"),
    country: str = Query(..., description="Country code (e.g., DE, FR)"),
    service: WorkingDayService = Depends(get_service),
):
    """
    Calculate working days between two dates for a country.

    Validation failures return 400 with an error code and message.
    """
    outcome = service.validate_request(start, end, country)
    if isinstance(outcome, ValidationFailure):
        raise HTTPException(
            status_code=400,
            detail={"code": outcome.error.code, "message": outcome.error.message},
        )

    try:
        result = service.calculate_working_days(start, end, country, outcome.country)
    except WorkingDayException as e:
        logger.error(f"Calculation failed for {country!r}: {e}")
        raise HTTPException(status_code=500, detail=f"Calculation error: {e}")

    return CalculateResponse(
        working_days=result.working_days,
        start_date=result.start_date,
        end_date=result.end_date,
        country=_country_info(result.country),
        selected_country_code=result.selected_country_code,
        countries=[_country_info(c) for c in result.all_countries],
    )


@app.get("/countries", response_model=List[CountryInfo])
def list_countries(service: WorkingDayService = Depends(get_service)):
    """List all supported countries in catalog order."""
    return [_country_info(c) for c in service.get_all_countries()]


@app.get("/holidays/{year}/{country}", response_model=List[HolidayResponse])
def get_holidays(
    year: int,
    country: str,
    service: WorkingDayService = Depends(get_service),
):
    """
    Get all holidays for a specific year and country.

    Args:
        year: Year (e.g., 2024, 2025)
        country: Country code (e.g., DE, FR)
    """
    resolved = service.country_directory.find_by_code(country)
    if resolved is None:
        raise HTTPException(status_code=400, detail=f"Invalid country code: {country}")

    if not MIN_SUPPORTED_DATE.year <= year <= MAX_SUPPORTED_DATE.year:
        raise HTTPException(
            status_code=400,
            detail=f"Year must be between {MIN_SUPPORTED_DATE.year} and {MAX_SUPPORTED_DATE.year}",
        )

    try:
        holidays = service.get_holidays_for_year(year, resolved.code)
    except WorkingDayException as e:
        logger.error(f"Holiday lookup failed for {resolved.code}: {e}")
        raise HTTPException(status_code=500, detail=f"Error fetching holidays: {e}")

    return [HolidayResponse(date=h.holiday_date, name=h.name) for h in holidays]


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": "0.1.0"}
