"""
Console output formatting using Rich.
"""

from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from working_day_calculator.data.schemas import CalculationResult, Country, Holiday

WEEKDAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


class ConsoleFormatter:
    """Formats output for console display using Rich."""

    def __init__(self, console: Optional[Console] = None):
        """Initialize the console formatter."""
        self.console = console or Console()

    def print_result(self, result: CalculationResult) -> None:
        """
        Print a working day calculation result.

        Args:
            result: CalculationResult to display.
        """
        self.console.print()
        self.console.rule("[bold blue]Working Day Calculation Result[/bold blue]")
        self.console.print()

        table = Table(show_header=False, box=None)
        table.add_column("Label", style="cyan", width=20)
        table.add_column("Value", style="white")

        table.add_row(
            "Period:",
            f"{result.start_date.isoformat()} - {result.end_date.isoformat()}",
        )
        table.add_row("Country:", f"{result.country.name} ({result.country.code})")
        table.add_row("Calendar Days:", str((result.end_date - result.start_date).days + 1))
        table.add_row(
            Text("Working Days:", style="bold green"),
            Text(str(result.working_days), style="bold green"),
        )

        self.console.print(Panel(table, title="[bold]Calculation[/bold]"))
        self.console.print()

    def print_holidays(self, holidays: List[Holiday]) -> None:
        """
        Print a table of holidays.

        Args:
            holidays: List of holidays to display.
        """
        holiday_table = Table(title="[bold]Public Holidays[/bold]")
        holiday_table.add_column("Date", style="cyan", width=12)
        holiday_table.add_column("Day", style="dim", width=12)
        holiday_table.add_column("Name", style="white")

        for holiday in holidays:
            holiday_table.add_row(
                holiday.holiday_date.isoformat(),
                WEEKDAY_NAMES[holiday.holiday_date.weekday()],
                holiday.name,
            )

        self.console.print(holiday_table)

    def print_holidays_for_year(self, year: int, country: Country, holidays: List[Holiday]) -> None:
        """Print all holidays for a year and country."""
        self.console.print()
        self.console.rule(f"[bold blue]Holidays {year} - {country.name}[/bold blue]")
        self.console.print()

        if holidays:
            self.print_holidays(holidays)
        else:
            self.console.print("[dim]No holidays found for this year.[/dim]")

        self.console.print()

    def print_countries(self, countries: List[Country]) -> None:
        """Print a table of supported countries."""
        self.console.print()
        self.console.rule("[bold blue]Supported Countries[/bold blue]")
        self.console.print()

        table = Table()
        table.add_column("Code", style="cyan", width=6)
        table.add_column("Name", style="white")

        for country in countries:
            table.add_row(country.code, country.name)

        self.console.print(table)
        self.console.print()

    def print_error(self, message: str) -> None:
        """
        Print an error message.

        Args:
            message: Error message to display.
        """
        self.console.print(f"[bold red]Error:[/bold red] {message}")

    def print_success(self, message: str) -> None:
        self.console.print(f"[bold green]Success:[/bold green] {message}")
