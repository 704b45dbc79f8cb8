"""Rich UI components for the CLI.

Commands build their output from these tables and panels instead of
formatting inline, so `export` and `doctor` share one look.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.formats import ExportFormat
from core.services.export_plan import PlannedOutput


def print_banner(console: Console, version: str) -> None:
    """Print the welcome banner."""

    title = Text("mediascope", style="bold cyan")
    subtitle = Text(f"Media analysis exports • v{version}", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_formats_table(export_formats: list[ExportFormat]) -> Table:
    """Table of available formats and the files each one produces."""

    table = Table(title="Export formats available (and produced files)")
    table.add_column("Format", style="cyan", no_wrap=True)
    table.add_column("Description", style="white")
    table.add_column("Produced files", style="magenta")
    for export_format in export_formats:
        table.add_row(
            export_format.name,
            export_format.long_name,
            ", ".join(sorted(export_format.produced_file_names)),
        )
    return table


def build_plan_table(planned: list[PlannedOutput]) -> Table:
    """Export plan table: one row per output file."""

    table = Table(title="Export plan")
    table.add_column("Source", style="cyan")
    table.add_column("Format", style="white", no_wrap=True)
    table.add_column("Output file", style="green")
    for item in planned:
        table.add_row(item.source, item.format_name, str(item.output_file))
    return table
