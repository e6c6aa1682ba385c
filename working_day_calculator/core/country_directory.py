"""
Country directory backed by a JSON country catalog.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from working_day_calculator.data.schemas import Country
from working_day_calculator.exceptions import CountryCatalogError

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).parent.parent / "data" / "eu_countries.json"


class CountryService:
    """Looks up supported countries from a catalog file."""

    def __init__(self, catalog_path: Optional[str] = None):
        """
        Initialize the country service and load the catalog.

        Args:
            catalog_path: Path to a JSON array of {"code", "name"} objects.
                Uses the bundled EU country list if not provided.

        Raises:
            CountryCatalogError: If the catalog is missing or malformed.
        """
        self.catalog_path = Path(catalog_path) if catalog_path else DEFAULT_CATALOG_PATH
        self._countries: List[Country] = self._load_countries()

    def _load_countries(self) -> List[Country]:
        """Load and validate the catalog file."""
        if not self.catalog_path.exists():
            raise CountryCatalogError(f"Country catalog not found: {self.catalog_path}")

        try:
            with open(self.catalog_path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise CountryCatalogError(f"Failed to load country catalog: {e}") from e

        if not isinstance(raw, list):
            raise CountryCatalogError("Country catalog must be a JSON array")

        try:
            countries = [Country(**entry) for entry in raw]
        except (TypeError, ValidationError) as e:
            raise CountryCatalogError(f"Invalid country entry in catalog: {e}") from e

        logger.info(f"Loaded {len(countries)} countries from {self.catalog_path}")
        return countries

    def list_all(self) -> List[Country]:
        """Return all countries in catalog order."""
        return list(self._countries)

    def find_by_code(self, code: Optional[str]) -> Optional[Country]:
        """
        Find a country by its code.

        Args:
            code: Country code, matched case-insensitively.

        Returns:
            The Country, or None if the code is empty or unknown.
        """
        if not code:
            return None
        normalized = code.strip().upper()
        for country in self._countries:
            if country.code.upper() == normalized:
                return country
        return None
