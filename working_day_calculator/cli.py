"""
CLI interface for the working day calculator.
"""

import logging
import sys
from datetime import date, datetime
from typing import Optional

import click

from working_day_calculator.config.manager import ConfigManager
from working_day_calculator.core.service import build_service
from working_day_calculator.data.schemas import (
    MAX_SUPPORTED_DATE,
    MIN_SUPPORTED_DATE,
    OUTPUT_FORMATS,
    Config,
    ValidationFailure,
)
from working_day_calculator.exceptions import WorkingDayException
from working_day_calculator.output.exporter import ResultExporter
from working_day_calculator.output.formatter import ConsoleFormatter

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def parse_date(date_str: str) -> date:
    """Parse date string in various formats."""
    formats = ["%Y-%m-%d", "%d.%m.%Y", "%d/%m/%Y"]
    for fmt in formats:
        try:
            return datetime.strptime(date_str, fmt).date()
        except ValueError:
            continue
    raise ValueError(
        f"Invalid date format: {date_str}. Use YYYY-MM-DD, DD.MM.YYYY, or DD/MM/YYYY"
    )


def load_config(config_path: Optional[str], verbose: bool) -> Config:
    """Load configuration and apply its log level unless --verbose is set."""
    cfg = ConfigManager(config_path).load_config()
    if not verbose:
        logging.getLogger().setLevel(cfg.log_level)
    return cfg


@click.group()
@click.version_option(version="0.1.0", prog_name="working-days")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, verbose: bool):
    """Working Day Calculator - Count working days excluding weekends and public holidays."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


@main.command()
@click.option(
    "--start", "-s",
    required=True,
    help="Start date (YYYY-MM-DD, DD.MM.YYYY, or DD/MM/YYYY)",
)
@click.option(
    "--end", "-e",
    required=True,
    help="End date (YYYY-MM-DD, DD.MM.YYYY, or DD/MM/YYYY)",
)
@click.option(
    "--country", "-c",
    help="Country code (e.g., DE, FR); defaults to the configured country",
)
@click.option(
    "--output", "-o",
    type=click.Path(),
    help="Output file path (optional)",
)
@click.option(
    "--format", "-f",
    type=click.Choice(list(OUTPUT_FORMATS)),
    default=None,
    help="Output format (default: output.format from config, console)",
)
@click.option(
    "--config",
    type=click.Path(exists=True),
    help="Path to config file (optional)",
)
@click.pass_context
def calculate(ctx, start, end, country, output, format, config):
    """Calculate working days between two dates (both inclusive)."""
    formatter = ConsoleFormatter()

    try:
        start_date = parse_date(start)
        end_date = parse_date(end)

        cfg = load_config(config, ctx.obj["verbose"])
        format = format or cfg.output_format

        country_code = country or cfg.default_country
        if not country_code:
            formatter.print_error("Please provide a country: --country or a configured default_country")
            sys.exit(1)

        service = build_service(cfg)
        outcome = service.process(start_date, end_date, country_code)

        if isinstance(outcome, ValidationFailure):
            formatter.print_error(outcome.error.message)
            sys.exit(1)

        if format in ("console", "both"):
            formatter.print_result(outcome)

        if format in ("json", "csv", "both"):
            exporter = ResultExporter(output_directory=cfg.output_directory)

            if format == "json":
                path = exporter.export_json(outcome, output)
                formatter.print_success(f"Result saved to {path}")
            elif format == "csv":
                path = exporter.export_csv(outcome, output)
                formatter.print_success(f"Result saved to {path}")
            else:  # both
                json_path, csv_path = exporter.export_both(outcome)
                formatter.print_success(f"Results saved to:\n  - {json_path}\n  - {csv_path}")

    except (ValueError, WorkingDayException) as e:
        formatter.print_error(str(e))
        sys.exit(1)


@main.command()
@click.option(
    "--config",
    type=click.Path(exists=True),
    help="Path to config file (optional)",
)
@click.pass_context
def countries(ctx, config):
    """List all supported countries with their codes."""
    formatter = ConsoleFormatter()

    try:
        cfg = load_config(config, ctx.obj["verbose"])
        service = build_service(cfg)
        formatter.print_countries(service.get_all_countries())
    except (ValueError, WorkingDayException) as e:
        formatter.print_error(str(e))
        sys.exit(1)


@main.command()
@click.option(
    "--year", "-y",
    type=int,
    default=None,
    help="Year to show holidays for (default: current year)",
)
@click.option(
    "--country", "-c",
    required=True,
    help="Country code (e.g., DE, FR)",
)
@click.option(
    "--config",
    type=click.Path(exists=True),
    help="Path to config file (optional)",
)
@click.pass_context
def holidays(ctx, year, country, config):
    """List public holidays for a year and country."""
    formatter = ConsoleFormatter()

    try:
        if year is None:
            year = date.today().year

        if not MIN_SUPPORTED_DATE.year <= year <= MAX_SUPPORTED_DATE.year:
            formatter.print_error(
                f"Year must be between {MIN_SUPPORTED_DATE.year} and {MAX_SUPPORTED_DATE.year}"
            )
            sys.exit(1)

        cfg = load_config(config, ctx.obj["verbose"])
        service = build_service(cfg)

        resolved = service.country_directory.find_by_code(country)
        if resolved is None:
            formatter.print_error(f"Unknown country code: {country}")
            sys.exit(1)

        holiday_list = service.get_holidays_for_year(year, resolved.code)
        formatter.print_holidays_for_year(year, resolved, holiday_list)

    except (ValueError, WorkingDayException) as e:
        formatter.print_error(str(e))
        sys.exit(1)


@main.command()
@click.option(
    "--host", "-h",
    default=None,
    help="Host to bind to (default: from config or 0.0.0.0)",
)
@click.option(
    "--port", "-p",
    type=int,
    default=None,
    help="Port to bind to (default: from config or 8000)",
)
@click.option(
    "--config",
    type=click.Path(exists=True),
    help="Path to config file (optional)",
)
@click.pass_context
def serve(ctx, host, port, config):
    """Start the FastAPI server."""
    formatter = ConsoleFormatter()

    try:
        import uvicorn
    except ImportError:
        formatter.print_error("uvicorn is required for the API server. Install it with: pip install uvicorn")
        sys.exit(1)

    try:
        cfg = load_config(config, ctx.obj["verbose"])
    except ValueError as e:
        formatter.print_error(str(e))
        sys.exit(1)

    api_host = host or cfg.api_host
    api_port = port or cfg.api_port

    formatter.console.print(f"Starting API server at http://{api_host}:{api_port}")
    formatter.console.print("Press Ctrl+C to stop")
    formatter.console.print()

    uvicorn.run(
        "working_day_calculator.api:app",
        host=api_host,
        port=api_port,
        reload=False,
    )


if __name__ == "__main__":
    main()
