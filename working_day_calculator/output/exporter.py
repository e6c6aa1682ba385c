"""
Export functionality for working day calculation results.
"""

import csv
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple

from working_day_calculator.data.schemas import CalculationResult

logger = logging.getLogger(__name__)


class ResultExporter:
    """Exports working day calculation results to JSON and CSV."""

    def __init__(
        self,
        output_directory: str = "results",
        timestamp_format: str = "%Y%m%d_%H%M%S",
    ):
        """
        Initialize the result exporter.

        Args:
            output_directory: Directory for output files.
            timestamp_format: Format string for timestamps in filenames.
        """
        self.output_directory = output_directory
        self.timestamp_format = timestamp_format

    def _resolve_path(self, output_path: Optional[str], extension: str) -> Path:
        """Use the explicit path, or a timestamped file in the output directory."""
        if output_path:
            file_path = Path(output_path)
        else:
            timestamp = datetime.now().strftime(self.timestamp_format)
            file_path = Path(self.output_directory) / f"working_days_{timestamp}.{extension}"
        file_path.parent.mkdir(parents=True, exist_ok=True)
        return file_path

    def export_json(
        self, result: CalculationResult, output_path: Optional[str] = None
    ) -> str:
        """
        Export result to JSON file.

        Args:
            result: CalculationResult to export.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path(output_path, "json")

        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(self.result_to_dict(result), f, indent=2, ensure_ascii=False)

        logger.info(f"Exported result to {file_path}")
        return str(file_path)

    def export_csv(
        self, result: CalculationResult, output_path: Optional[str] = None
    ) -> str:
        """
        Export result to a single-row CSV file.

        Args:
            result: CalculationResult to export.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path(output_path, "csv")

        with open(file_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow([
                "Start Date",
                "End Date",
                "Country Code",
                "Country Name",
                "Working Days",
            ])
            writer.writerow([
                result.start_date.isoformat(),
                result.end_date.isoformat(),
                result.country.code,
                result.country.name,
                result.working_days,
            ])

        logger.info(f"Exported result to {file_path}")
        return str(file_path)

    def export_both(self, result: CalculationResult) -> Tuple[str, str]:
        """Export result to both JSON and CSV; returns (json_path, csv_path)."""
        return self.export_json(result), self.export_csv(result)

    @staticmethod
    def result_to_dict(result: CalculationResult) -> dict:
        """Convert CalculationResult to a JSON-serializable dictionary."""
        return {
            "request": {
                "start_date": result.start_date.isoformat(),
                "end_date": result.end_date.isoformat(),
                "selected_country_code": result.selected_country_code,
            },
            "country": {
                "code": result.country.code,
                "name": result.country.name,
            },
            "calculation": {
                "calendar_days": (result.end_date - result.start_date).days + 1,
                "working_days": result.working_days,
            },
            "metadata": {
                "calculation_timestamp": result.calculation_timestamp.isoformat(),
            },
        }
