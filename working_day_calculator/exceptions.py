"""
Exceptions raised by the working day calculator collaborators.

Expected validation problems are not exceptions; they are returned as
``ValidationFailure`` outcomes by the request validator.
"""


class WorkingDayException(Exception):
    """Base class for working day calculator errors."""


class CountryCatalogError(WorkingDayException):
    """The country catalog could not be found or parsed."""


class UnsupportedCountryError(WorkingDayException):
    """No holiday calendar is available for a country code."""

    def __init__(self, country_code: str):
        self.country_code = country_code
        super().__init__(f"No holiday calendar available for country code: {country_code!r}")
