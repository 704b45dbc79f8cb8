"""CLI session: the deferred computation behind `mediascope export`."""

from __future__ import annotations

import logging

from rich.console import Console

from adapters.json_exporter import export_plan_json
from cli.ui_components import build_formats_table, build_plan_table
from core.config import APP_NAME, AppSettings, get_app_version
from core.domain.formats import EXPORT_FORMATS
from core.domain.models import SessionOptions
from core.services.export_plan import plan_exports

PLAN_FILE_NAME = "export-plan.json"

logger = logging.getLogger(__name__)


class AppSession:
    """Runs one CLI invocation and returns its exit code.

    Errors (missing export directory, unknown format) are raised, not turned
    into exit codes here.
    """

    def __init__(self, options: SessionOptions, settings: AppSettings, console: Console) -> None:
        self.options = options
        self.settings = settings
        self.console = console

    def run_cli(self) -> int:
        if self.options.version:
            self.console.print(f"{APP_NAME} {get_app_version()}")
            return 0

        if self.options.options:
            self.console.print(build_formats_table(list(EXPORT_FORMATS)))
            return 0

        planned = plan_exports(self.options, self.settings)
        self.console.print(build_plan_table(planned))

        if self.options.save_plan and self.options.export_target is not None:
            plan_path = export_plan_json(
                planned=planned,
                output_path=self.options.export_target.make_output_file(PLAN_FILE_NAME),
            )
            logger.info("Saved export plan to %s", plan_path)
        return 0
