"""
CLI command to list the supported digest algorithms.
"""
import click
import logging
from rich.console import Console
from rich.table import Table
from services.digest_factory import digest_size, registered_algorithms
from utils.cli_helpers import get_settings

logger = logging.getLogger(__name__)

@click.command("list-algorithms", help="List supported algorithms and their digest widths.")
@click.pass_context
def list_algorithms(ctx: click.Context) -> None:
    """
    Print a table of every registered algorithm, strongest and most common first.

    The configured default algorithm is marked.
    """
    default = get_settings(ctx).algorithm
    console = Console()

    table = Table(title="Supported Algorithms")
    table.add_column("Name", style="cyan")
    table.add_column("Bits", justify="right")
    table.add_column("Hex chars", justify="right")
    table.add_column("Default", justify="center", style="green")

    for algorithm in registered_algorithms():
        size = digest_size(algorithm)
        table.add_row(algorithm.value, str(size * 8), str(size * 2), "✓" if algorithm == default else "")

    console.print(table)
