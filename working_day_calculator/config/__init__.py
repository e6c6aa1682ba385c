"""
Configuration loading for the working day calculator.
"""

from working_day_calculator.config.manager import ConfigManager

__all__ = ["ConfigManager"]
