"""Doctor command for environment diagnostics."""

from __future__ import annotations

import tempfile
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from cli.ui_components import print_banner
from core.config import AppSettings, get_app_version, get_user_env_file, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_writable(directory: Path) -> tuple[bool, str]:
    """Try to create (and remove) a temp file in `directory`."""

    if not directory.exists():
        return False, "Directory does not exist"
    if not directory.is_dir():
        return False, "Not a directory"
    try:
        with tempfile.NamedTemporaryFile(dir=directory, prefix=".mediascope-doctor-"):
            pass
        return True, "OK"
    except OSError as exc:
        return False, str(exc)


@app.command()
def run(
    export_dir: Path = typer.Option(
        Path("."),
        "-e",
        "--export",
        metavar="DIRECTORY",
        help="Export directory to check for write access.",
    ),
) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()
    print_banner(_console, get_app_version())

    table = Table(title="mediascope Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Log level", "OK", settings.log_level)
    table.add_row("Log file", "OK" if settings.log_file else "OPTIONAL", str(settings.log_file or "-"))
    table.add_row(
        "Default base filename",
        "OK" if settings.default_base_file_name else "OPTIONAL",
        settings.default_base_file_name or "-",
    )
    table.add_row("Source ext in output names", "OK", "yes" if settings.add_source_ext_to_output_names else "no")
    table.add_row("User config", "OK" if get_user_env_file().exists() else "OPTIONAL", str(get_user_env_file()))

    ok_export, detail_export = _check_writable(export_dir)
    table.add_row("Export directory", "OK" if ok_export else "FAIL", f"{export_dir}: {detail_export}")

    _console.print(table)

    if not ok_export:
        _console.print("\n[yellow]Note:[/yellow] Create the export directory or pick another one with `-e`.")
        raise typer.Exit(code=1)


@app.command()
def configure() -> None:
    """Interactive setup of export defaults (stored in the user config .env)."""

    base_file_name = typer.prompt("Default export base filename (empty for none)", default="", show_default=False)
    keep_ext = typer.confirm("Keep source extension in output names for multiple sources?", default=False)

    env_path = write_user_env_vars(
        {
            "MEDIASCOPE_DEFAULT_BASE_FILE_NAME": base_file_name,
            "MEDIASCOPE_ADD_SOURCE_EXT_TO_OUTPUT_NAMES": "true" if keep_ext else "false",
        }
    )

    _console.print(f"[green]Saved export defaults to:[/green] {env_path}")
