"""
Data models for the working day calculator using Pydantic.
"""

from datetime import date, datetime
from enum import Enum
from typing import Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


MIN_SUPPORTED_DATE = date(1900, 1, 1)
MAX_SUPPORTED_DATE = date(2100, 12, 31)

OUTPUT_FORMATS = ("console", "json", "csv", "both")


class WorkingDayError(str, Enum):
    """Validation error kinds, valued by their stable error code."""

    INVALID_DATE_RANGE = "DATE_001"
    # Covers both the lower and the upper boundary.
    DATE_BEFORE_MINIMUM = "DATE_002"
    INVALID_COUNTRY = "COUNTRY_001"

    @property
    def code(self) -> str:
        return self.value

    @property
    def message(self) -> str:
        """Default user-facing message for this error."""
        return ERROR_MESSAGES[self]


ERROR_MESSAGES = {
    WorkingDayError.INVALID_DATE_RANGE: "Start date cannot be after end date",
    WorkingDayError.DATE_BEFORE_MINIMUM: (
        f"Date range must be between {MIN_SUPPORTED_DATE.isoformat()} "
        f"and {MAX_SUPPORTED_DATE.isoformat()}"
    ),
    WorkingDayError.INVALID_COUNTRY: "Invalid country selected",
}


class Country(BaseModel):
    """A supported country from the country catalog."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., min_length=1, description="Country code (e.g., DE, FR)")
    name: str = Field(..., min_length=1, description="Display name of the country")


class Holiday(BaseModel):
    """Represents a public holiday."""

    model_config = ConfigDict(frozen=True)

    holiday_date: date = Field(..., description="Date of the holiday")
    name: str = Field(..., description="Name of the holiday")


class ValidationSuccess(BaseModel):
    """Validation passed; carries the resolved country."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["success"] = "success"
    country: Country

    @property
    def is_valid(self) -> bool:
        return True


class ValidationFailure(BaseModel):
    """Validation failed; carries the first failing error kind."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["failure"] = "failure"
    error: WorkingDayError

    @property
    def is_valid(self) -> bool:
        return False


ValidationOutcome = Union[ValidationSuccess, ValidationFailure]


class CalculationResult(BaseModel):
    """Working day count plus the request data echoed back for presentation."""

    model_config = ConfigDict(frozen=True)

    working_days: int = Field(..., ge=0, description="Calculated working days")
    start_date: date = Field(..., description="Start date of the period")
    end_date: date = Field(..., description="End date of the period")
    country: Country = Field(..., description="Resolved country")
    all_countries: Tuple[Country, ...] = Field(
        default_factory=tuple, description="All known countries, in catalog order"
    )
    selected_country_code: str = Field(..., description="Country code as submitted")
    calculation_timestamp: datetime = Field(
        default_factory=datetime.now, description="When the calculation was performed"
    )


class Config(BaseModel):
    """Configuration for the working day calculator."""

    country_catalog_path: Optional[str] = Field(
        default=None, description="Path to a JSON country catalog (bundled EU list if unset)"
    )
    default_country: Optional[str] = Field(
        default=None, description="Default country code if none is given"
    )
    holiday_language: Optional[str] = Field(
        default=None, description="Language for holiday names (library default if unset)"
    )
    output_format: str = Field(
        default="console", description="Default output format: console, json, csv or both"
    )
    output_directory: str = Field(default="results", description="Directory for output files")
    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(default=8000, ge=1, le=65535, description="API server port")
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("default_country")
    @classmethod
    def normalize_default_country(cls, v: Optional[str]) -> Optional[str]:
        """Store the default country code in canonical uppercase."""
        if v is None:
            return v
        v = v.strip().upper()
        return v or None

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v: str) -> str:
        """Restrict output format to the supported outputs."""
        v = v.lower().strip()
        if v not in OUTPUT_FORMATS:
            raise ValueError(f"output_format must be one of: {', '.join(OUTPUT_FORMATS)}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate logging level name."""
        level = v.upper().strip()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level
