"""
Working Day Calculator - count working days excluding weekends and public holidays.
"""

__version__ = "0.1.0"
