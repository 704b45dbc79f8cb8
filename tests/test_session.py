"""
Tests for AppSession.run_cli and the JSON plan exporter.

Verifies:
1. --version and --options print and return 0 without planning.
2. The plan is printed, and saved through the export target when asked.
3. Planning errors propagate.
"""

import json
from pathlib import Path

import pytest
from rich.console import Console

from adapters.json_exporter import export_plan_json
from cli.session import PLAN_FILE_NAME, AppSession
from core.config import AppSettings
from core.domain.export_target import ExportTarget
from core.domain.models import SessionOptions
from core.errors import SessionConfigurationError
from core.services.export_plan import PlannedOutput


def _session(**kwargs):
    console = Console(record=True, width=200)
    return AppSession(SessionOptions(**kwargs), AppSettings(), console), console


def test_version():
    session, console = _session(version=True)

    assert session.run_cli() == 0
    assert console.export_text().startswith("mediascope ")


def test_options_lists_formats():
    session, console = _session(options=True)

    assert session.run_cli() == 0
    text = console.export_text()
    assert "sqlite" in text
    assert "media-datas.sqlite" in text


def test_plan_is_printed(tmp_path):
    session, console = _session(
        inputs=("clip.mov",),
        export_target=ExportTarget(directory=tmp_path),
        formats=("sqlite",),
    )

    assert session.run_cli() == 0
    assert "media-datas.sqlite" in console.export_text()
    assert not (tmp_path / PLAN_FILE_NAME).exists()


def test_plan_is_saved_with_base_name(tmp_path):
    session, _ = _session(
        inputs=("clip.mov",),
        export_target=ExportTarget(directory=tmp_path, base_file_name="ep01"),
        formats=("report",),
        save_plan=True,
    )

    assert session.run_cli() == 0
    payload = json.loads((tmp_path / ("ep01_" + PLAN_FILE_NAME)).read_text(encoding="utf-8"))
    assert payload == [
        {"format": "report", "output_file": str(tmp_path / "ep01_report.html"), "source": "clip.mov"},
    ]


def test_planning_errors_propagate():
    session, _ = _session(inputs=("clip.mov",))

    with pytest.raises(SessionConfigurationError):
        session.run_cli()


def test_export_plan_json_creates_parent(tmp_path):
    output_path = tmp_path / "nested" / "plan.json"
    planned = [PlannedOutput(source="a.mov", format_name="json", output_file=Path("out") / "a.json")]

    assert export_plan_json(planned=planned, output_path=output_path) == output_path
    text = output_path.read_text(encoding="utf-8")
    assert text.endswith("\n")
    assert json.loads(text) == [{"format": "json", "output_file": str(Path("out") / "a.json"), "source": "a.mov"}]
