"""
Tests for the request validator.
"""

from datetime import date

import pytest

from working_day_calculator.data.schemas import (
    ValidationFailure,
    ValidationSuccess,
    WorkingDayError,
)


class TestRequestValidator:
    """Tests for RequestValidator."""

    def test_valid_request(self, validator):
        outcome = validator.validate(date(2023, 10, 2), date(2023, 10, 6), "DE")

        assert isinstance(outcome, ValidationSuccess)
        assert outcome.is_valid
        assert outcome.country.code == "DE"
        assert outcome.country.name == "Germany"

    def test_start_after_end(self, validator):
        outcome = validator.validate(date(2023, 10, 10), date(2023, 10, 5), "DE")

        assert isinstance(outcome, ValidationFailure)
        assert not outcome.is_valid
        assert outcome.error == WorkingDayError.INVALID_DATE_RANGE

    def test_start_before_minimum(self, validator):
        outcome = validator.validate(date(1899, 12, 31), date(2023, 10, 5), "DE")
        assert outcome.error == WorkingDayError.DATE_BEFORE_MINIMUM

    def test_end_after_maximum(self, validator):
        outcome = validator.validate(date(2023, 10, 5), date(2101, 1, 1), "DE")
        assert outcome.error == WorkingDayError.DATE_BEFORE_MINIMUM

    def test_boundaries_are_inclusive(self, validator):
        assert validator.validate(date(1900, 1, 1), date(1900, 1, 2), "FR").is_valid
        assert validator.validate(date(2100, 12, 30), date(2100, 12, 31), "FR").is_valid

    def test_unknown_country(self, validator):
        outcome = validator.validate(date(2023, 10, 2), date(2023, 10, 6), "XX")
        assert outcome.error == WorkingDayError.INVALID_COUNTRY

    @pytest.mark.parametrize("code", ["", None])
    def test_missing_country(self, validator, code):
        outcome = validator.validate(date(2023, 10, 2), date(2023, 10, 6), code)
        assert outcome.error == WorkingDayError.INVALID_COUNTRY

    def test_lowercase_country_resolves(self, validator):
        outcome = validator.validate(date(2023, 10, 2), date(2023, 10, 6), "fr")
        assert outcome.country.code == "FR"

    def test_out_of_order_wins_over_out_of_bounds(self, validator):
        """The ordering rule short-circuits the boundary rule."""
        outcome = validator.validate(date(2200, 1, 1), date(1800, 1, 1), "XX")
        assert outcome.error == WorkingDayError.INVALID_DATE_RANGE

    def test_bounds_win_over_unknown_country(self, validator):
        outcome = validator.validate(date(1899, 1, 1), date(1900, 6, 1), "XX")
        assert outcome.error == WorkingDayError.DATE_BEFORE_MINIMUM


class TestWorkingDayError:
    """Tests for the error taxonomy."""

    def test_codes_and_messages(self):
        assert WorkingDayError.INVALID_DATE_RANGE.code == "DATE_001"
        assert WorkingDayError.INVALID_DATE_RANGE.message == "Start date cannot be after end date"
        assert WorkingDayError.DATE_BEFORE_MINIMUM.code == "DATE_002"
        assert (
            WorkingDayError.DATE_BEFORE_MINIMUM.message
            == "Date range must be between 1900-01-01 and 2100-12-31"
        )
        assert WorkingDayError.INVALID_COUNTRY.code == "COUNTRY_001"
        assert WorkingDayError.INVALID_COUNTRY.message == "Invalid country selected"
