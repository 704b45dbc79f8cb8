"""Typer CLI entrypoint for mediascope."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console

from cli import doctor
from cli.session import AppSession
from core.config import AppSettings
from core.domain.export_target import ExportTarget
from core.domain.models import SessionOptions
from core.logging_utils import configure_logging
from core.services.command_runner import CommandRunner

app = typer.Typer(
    add_completion=False,
    help="Extract/process technical information from audio/video files and plan their exports.",
    no_args_is_help=True,
)
app.add_typer(doctor.app, name="doctor")

logger = logging.getLogger(__name__)


def _read_input_list(path: Path) -> list[str]:
    """One entry per line; blank lines and # comments are skipped."""

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise typer.BadParameter(f"Can't read input list {path}: {exc}") from exc

    entries: list[str] = []
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if line and not line.startswith("#"):
            entries.append(line)
    return entries


def build_session_options(
    *,
    inputs: list[str],
    export_dir: Path | None,
    base_file_name: str | None,
    formats: list[str],
    version: bool,
    options: bool,
    save_plan: bool = False,
    from_input_list: bool = False,
) -> SessionOptions:
    export_target = None
    if export_dir is not None:
        export_target = ExportTarget(directory=export_dir, base_file_name=base_file_name)
    return SessionOptions(
        inputs=tuple(inputs),
        export_target=export_target,
        formats=tuple(formats),
        version=version,
        options=options,
        save_plan=save_plan,
        from_input_list=from_input_list,
    )


@app.command("export")
def export(
    input_: list[str] | None = typer.Option(
        None,
        "-i",
        "--input",
        metavar="FILE",
        help="Input (source media) file to work with. Repeatable.",
    ),
    input_list: list[Path] | None = typer.Option(
        None,
        "--input-list",
        metavar="TEXT_FILE_LIST",
        help="Read input files from a text list, one per line.",
        dir_okay=False,
    ),
    export_dir: Path | None = typer.Option(
        None,
        "-e",
        "--export",
        metavar="DIRECTORY",
        help="Export data to this directory.",
        file_okay=False,
    ),
    base_file_name: str | None = typer.Option(
        None,
        "--export-base-filename",
        metavar="FILENAME",
        help="Base file name for exported data file(s).",
    ),
    export_format: list[str] | None = typer.Option(
        None,
        "-f",
        "--format",
        metavar="FORMAT_TYPE",
        help="Format to export data to. Repeatable; all formats when absent.",
    ),
    version: bool = typer.Option(False, "-v", "--version", help="Show the application version."),
    options: bool = typer.Option(False, "-o", "--options", help="Show the available export formats."),
    save_plan: bool = typer.Option(
        False,
        "--save-plan",
        help="Also write the export plan as JSON into the export directory.",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose mode."),
    quiet: bool = typer.Option(False, "-q", "--quiet", help="Quiet mode (don't log anything, except errors)."),
    log_file: Path | None = typer.Option(
        None,
        "--log",
        metavar="LOG_FILE",
        help="Also write log messages to this text file.",
        dir_okay=False,
    ),
) -> None:
    """Plan an export: show every file each format would write for each input."""

    settings = AppSettings()
    configure_logging(
        settings.log_level,
        verbose=verbose,
        quiet=quiet,
        log_file=log_file or settings.log_file,
    )

    inputs = list(input_ or [])
    for list_path in input_list or []:
        inputs.extend(_read_input_list(list_path))

    session_options = build_session_options(
        inputs=inputs,
        export_dir=export_dir,
        base_file_name=base_file_name if base_file_name is not None else settings.default_base_file_name,
        formats=list(export_format or []),
        version=version,
        options=options,
        save_plan=save_plan,
        from_input_list=bool(input_list),
    )
    session = AppSession(session_options, settings, Console())

    logger.debug("Start CLI application with %d input(s)", len(inputs))
    runner = CommandRunner(session.run_cli)
    exit_code = runner.run()
    raise typer.Exit(code=exit_code)


def run() -> None:
    app()
