"""
Output formatting and export functionality.
"""

from working_day_calculator.output.formatter import ConsoleFormatter
from working_day_calculator.output.exporter import ResultExporter

__all__ = ["ConsoleFormatter", "ResultExporter"]
