"""
Tests for the holidays-backed oracle and the JSON country directory.
"""

import json
import threading
from datetime import date

import pytest

from working_day_calculator.core.country_directory import CountryService
from working_day_calculator.core.holiday_provider import HolidayProvider
from working_day_calculator.core.interfaces import CountryDirectory, HolidayOracle
from working_day_calculator.exceptions import CountryCatalogError, UnsupportedCountryError


@pytest.fixture
def holiday_provider():
    """Create a HolidayProvider instance."""
    return HolidayProvider()


@pytest.fixture
def country_service():
    """Create a CountryService over the bundled catalog."""
    return CountryService()


class TestHolidayProvider:
    """Tests for HolidayProvider."""

    def test_implements_oracle_contract(self, holiday_provider):
        assert isinstance(holiday_provider, HolidayOracle)

    def test_is_holiday(self, holiday_provider):
        assert holiday_provider.is_holiday(date(2023, 10, 3), "DE") is True
        assert holiday_provider.is_holiday(date(2023, 10, 4), "DE") is False

    def test_country_specific(self, holiday_provider):
        """Bastille Day is French, not German."""
        assert holiday_provider.is_holiday(date(2023, 7, 14), "FR") is True
        assert holiday_provider.is_holiday(date(2023, 7, 14), "DE") is False

    def test_lowercase_code(self, holiday_provider):
        assert holiday_provider.is_holiday(date(2023, 10, 3), "de") is True

    def test_lookups_across_years(self, holiday_provider):
        assert holiday_provider.is_holiday(date(1950, 1, 1), "FR") is True
        assert holiday_provider.is_holiday(date(2099, 12, 25), "FR") is True

    def test_unsupported_country(self, holiday_provider):
        with pytest.raises(UnsupportedCountryError) as exc_info:
            holiday_provider.is_holiday(date(2023, 10, 3), "XX")
        assert exc_info.value.country_code == "XX"

    def test_get_holidays_for_year(self, holiday_provider):
        holidays = holiday_provider.get_holidays_for_year(2023, "DE")
        dates = [h.holiday_date for h in holidays]

        assert date(2023, 1, 1) in dates
        assert date(2023, 10, 3) in dates
        assert dates == sorted(dates)
        assert all(d.year == 2023 for d in dates)

    def test_get_holidays_for_year_unsupported(self, holiday_provider):
        with pytest.raises(UnsupportedCountryError):
            holiday_provider.get_holidays_for_year(2023, "XX")

    def test_concurrent_first_use_creates_one_calendar(self, holiday_provider):
        """Threads racing on a cold provider all succeed and share one calendar."""
        thread_count = 32
        barrier = threading.Barrier(thread_count)
        results = []
        errors = []

        def lookup():
            barrier.wait()
            try:
                results.append(holiday_provider.is_holiday(date(2023, 10, 3), "DE"))
            except Exception as e:
                errors.append(e)

        threads = [threading.Thread(target=lookup) for _ in range(thread_count)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert errors == []
        assert results == [True] * thread_count
        assert len(holiday_provider._calendars) == 1

    def test_clear_cache(self, holiday_provider):
        holiday_provider.is_holiday(date(2023, 10, 3), "DE")
        assert "DE" in holiday_provider._calendars

        holiday_provider.clear_cache()
        assert holiday_provider._calendars == {}


class TestCountryService:
    """Tests for CountryService."""

    def test_implements_directory_contract(self, country_service):
        assert isinstance(country_service, CountryDirectory)

    def test_loads_all_eu_countries(self, country_service):
        countries = country_service.list_all()
        assert len(countries) == 27

    def test_find_germany(self, country_service):
        country = country_service.find_by_code("DE")
        assert country.code == "DE"
        assert country.name == "Germany"

    def test_find_france(self, country_service):
        country = country_service.find_by_code("FR")
        assert country.name == "France"

    def test_find_is_case_insensitive(self, country_service):
        assert country_service.find_by_code(" de ").code == "DE"

    @pytest.mark.parametrize("code", ["XX", "", None])
    def test_unknown_code(self, country_service, code):
        assert country_service.find_by_code(code) is None

    def test_list_all_returns_copy_in_file_order(self, tmp_path):
        catalog = tmp_path / "countries.json"
        catalog.write_text(json.dumps([
            {"code": "SE", "name": "Sweden"},
            {"code": "AT", "name": "Austria"},
        ]))
        service = CountryService(str(catalog))

        countries = service.list_all()
        assert [c.code for c in countries] == ["SE", "AT"]

        countries.clear()
        assert len(service.list_all()) == 2

    def test_every_catalog_country_has_holiday_calendar(self, country_service, holiday_provider):
        for country in country_service.list_all():
            holiday_provider.is_holiday(date(2023, 1, 1), country.code)

    def test_missing_catalog(self, tmp_path):
        with pytest.raises(CountryCatalogError, match="not found"):
            CountryService(str(tmp_path / "missing.json"))

    def test_invalid_json(self, tmp_path):
        catalog = tmp_path / "countries.json"
        catalog.write_text("{not json")
        with pytest.raises(CountryCatalogError):
            CountryService(str(catalog))

    def test_catalog_must_be_list(self, tmp_path):
        catalog = tmp_path / "countries.json"
        catalog.write_text(json.dumps({"code": "DE", "name": "Germany"}))
        with pytest.raises(CountryCatalogError, match="JSON array"):
            CountryService(str(catalog))

    def test_invalid_entry(self, tmp_path):
        catalog = tmp_path / "countries.json"
        catalog.write_text(json.dumps([{"code": "DE"}]))
        with pytest.raises(CountryCatalogError, match="Invalid country entry"):
            CountryService(str(catalog))
