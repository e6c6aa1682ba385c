"""
MCP Server for the Working Day Calculator.

This module provides an MCP (Model Context Protocol) server that exposes
the working day calculator to Claude Desktop and other MCP clients.

Supports two transport modes:
- stdio: For local Claude Desktop integration
- sse: For HTTP-based integration (Docker, remote servers)
"""

import argparse
import logging
import os
from datetime import date
from typing import Optional

from mcp.server.fastmcp import FastMCP

from working_day_calculator.config.manager import ConfigManager
from working_day_calculator.core.service import WorkingDayService, build_service
from working_day_calculator.data.schemas import (
    MAX_SUPPORTED_DATE,
    MIN_SUPPORTED_DATE,
    ValidationFailure,
)
from working_day_calculator.exceptions import WorkingDayException

logger = logging.getLogger(__name__)

# Global service instance
_service: Optional[WorkingDayService] = None


def get_service() -> WorkingDayService:
    """Get or initialize the working day service."""
    global _service

    if _service is None:
        config = ConfigManager().load_config()
        _service = build_service(config)
        logger.info("Initialized working day service")

    return _service


def calculate_working_days(start_date: str, end_date: str, country: str) -> dict:
    """
    Calculate working days between two dates for a country.

    Working days exclude Saturdays, Sundays and the country's national public
    holidays. Both dates are inclusive.

    Args:
        start_date: Start date in format YYYY-MM-DD (e.g., "2023-10-02")
        end_date: End date in format YYYY-MM-DD (e.g., "2023-10-06")
        country: Country code (e.g., "DE" for Germany, "FR" for France)

    Returns:
        Dictionary with working_days, start_date, end_date, country_code and
        country_name, or error and code on failure.

    Examples:
        >>> calculate_working_days("2023-10-02", "2023-10-06", "DE")
    """
    try:
        start = date.fromisoformat(start_date)
        end = date.fromisoformat(end_date)
    except ValueError as e:
        return {"error": f"Invalid date format. Use YYYY-MM-DD. Details: {e}", "code": "DATE_FORMAT"}

    service = get_service()
    try:
        outcome = service.process(start, end, country)
    except WorkingDayException as e:
        logger.error(f"Calculation failed for {country!r}: {e}")
        return {"error": f"Calculation error: {e}", "code": "INTERNAL"}

    if isinstance(outcome, ValidationFailure):
        return {"error": outcome.error.message, "code": outcome.error.code}

    return {
        "working_days": outcome.working_days,
        "start_date": outcome.start_date.isoformat(),
        "end_date": outcome.end_date.isoformat(),
        "country_code": outcome.country.code,
        "country_name": outcome.country.name,
    }


def list_countries() -> dict:
    """
    List all supported countries with their codes.

    Returns:
        Dictionary with count and a list of {code, name} entries.
    """
    countries = get_service().get_all_countries()
    return {
        "count": len(countries),
        "countries": [{"code": c.code, "name": c.name} for c in countries],
    }


def get_holidays(year: int, country: str) -> dict:
    """
    Get all public holidays for a specific year and country.

    Args:
        year: Year to get holidays for (e.g., 2024)
        country: Country code (e.g., "DE", "FR")

    Returns:
        Dictionary with year, country_code, country_name, holiday_count and
        holidays (date and name), or error on failure.
    """
    service = get_service()
    resolved = service.country_directory.find_by_code(country)
    if resolved is None:
        return {"error": f"Invalid country code: {country}", "code": "COUNTRY_001"}

    if not MIN_SUPPORTED_DATE.year <= year <= MAX_SUPPORTED_DATE.year:
        return {
            "error": f"Year must be between {MIN_SUPPORTED_DATE.year} and {MAX_SUPPORTED_DATE.year}",
            "code": "DATE_002",
        }

    try:
        holidays = service.get_holidays_for_year(year, resolved.code)
    except WorkingDayException as e:
        logger.error(f"Holiday lookup failed for {resolved.code}: {e}")
        return {"error": f"Error fetching holidays: {e}", "code": "INTERNAL"}

    return {
        "year": year,
        "country_code": resolved.code,
        "country_name": resolved.name,
        "holiday_count": len(holidays),
        "holidays": [
            {"date": h.holiday_date.isoformat(), "name": h.name}
            for h in holidays
        ],
    }


def create_mcp_server(host: str = "127.0.0.1", port: int = 8000) -> FastMCP:
    """Create and configure the MCP server with tools."""
    mcp = FastMCP("Working Day Calculator", host=host, port=port)

    mcp.tool()(calculate_working_days)
    mcp.tool()(list_countries)
    mcp.tool()(get_holidays)

    return mcp


def main():
    """Run the MCP server with configurable transport.

    Transport can be set via:
    - Command line: --transport sse --port 8080
    - Environment: MCP_TRANSPORT=sse MCP_PORT=8080 MCP_HOST=0.0.0.0
    """
    parser = argparse.ArgumentParser(description="Working Day Calculator MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default=os.environ.get("MCP_TRANSPORT", "stdio"),
        help="Transport mode: stdio (default) or sse for HTTP",
    )
    parser.add_argument(
        "--host",
        default=os.environ.get("MCP_HOST", os.environ.get("FASTMCP_HOST", "0.0.0.0")),
        help="Host to bind to (SSE mode only, default: 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.environ.get("MCP_PORT", os.environ.get("FASTMCP_PORT", "8080"))),
        help="Port to listen on (SSE mode only, default: 8080)",
    )

    args = parser.parse_args()

    mcp = create_mcp_server(host=args.host, port=args.port)
    mcp.run(transport=args.transport)


if __name__ == "__main__":
    main()
