"""
Tests for export formats and export planning.

Verifies:
1. Format lookup, selection order and duplicate handling.
2. One planned output per source, format and produced file.
3. Missing export target, missing inputs and unknown formats raise.
"""

from pathlib import Path

import pytest

from core.config import AppSettings
from core.domain.export_target import ExportTarget
from core.domain.formats import EXPORT_FORMATS, get_export_format, known_format_names, resolve_export_formats
from core.domain.models import SessionOptions
from core.errors import MediascopeError, SessionConfigurationError, UnknownExportFormatError
from core.services.export_plan import plan_exports

OUT = Path("/out")


def test_get_export_format_is_case_insensitive():
    assert get_export_format(" JSON ").name == "json"


def test_unknown_format():
    with pytest.raises(UnknownExportFormatError) as excinfo:
        get_export_format("nope")

    assert isinstance(excinfo.value, ValueError)
    assert isinstance(excinfo.value, MediascopeError)
    assert excinfo.value.known == known_format_names()
    assert "nope" in str(excinfo.value)


def test_resolve_all_formats_when_none_selected():
    assert resolve_export_formats(None) == list(EXPORT_FORMATS)
    assert resolve_export_formats([]) == list(EXPORT_FORMATS)


def test_resolve_keeps_order_and_drops_duplicates():
    names = [f.name for f in resolve_export_formats(["xml", "json", "XML"])]
    assert names == ["xml", "json"]


def test_plan_single_source():
    options = SessionOptions(
        inputs=("clip.mov",),
        export_target=ExportTarget(directory=OUT, base_file_name="ep01"),
        formats=("json", "report"),
    )

    planned = plan_exports(options, AppSettings())

    assert [(p.source, p.format_name, p.output_file) for p in planned] == [
        ("clip.mov", "json", OUT / "ep01_media-datas.json"),
        ("clip.mov", "report", OUT / "ep01_report.html"),
    ]


def test_plan_multiple_sources():
    options = SessionOptions(
        inputs=("a.mov", "b.wav"),
        export_target=ExportTarget(directory=OUT),
        formats=("json",),
    )

    planned = plan_exports(options, AppSettings())

    assert [p.output_file for p in planned] == [
        OUT / "a_media-datas.json",
        OUT / "b_media-datas.json",
    ]


def test_plan_multiple_sources_with_ext(monkeypatch):
    monkeypatch.setenv("MEDIASCOPE_ADD_SOURCE_EXT_TO_OUTPUT_NAMES", "true")
    options = SessionOptions(
        inputs=("a.mov", "b.wav"),
        export_target=ExportTarget(directory=OUT, base_file_name="take-"),
        formats=("xml",),
    )

    planned = plan_exports(options, AppSettings())

    assert [p.output_file for p in planned] == [
        OUT / "a-mov_take-media-datas.xml",
        OUT / "b-wav_take-media-datas.xml",
    ]


def test_plan_covers_every_produced_file():
    options = SessionOptions(inputs=("clip.mov",), export_target=ExportTarget(directory=OUT))

    planned = plan_exports(options, AppSettings())

    assert len(planned) == sum(len(f.produced_file_names) for f in EXPORT_FORMATS)


def test_plan_requires_export_target():
    with pytest.raises(SessionConfigurationError):
        plan_exports(SessionOptions(inputs=("clip.mov",)), AppSettings())


def test_plan_requires_inputs():
    with pytest.raises(SessionConfigurationError):
        plan_exports(SessionOptions(export_target=ExportTarget(directory=OUT)), AppSettings())


def test_plan_unknown_format():
    options = SessionOptions(
        inputs=("clip.mov",),
        export_target=ExportTarget(directory=OUT),
        formats=("nope",),
    )
    with pytest.raises(UnknownExportFormatError):
        plan_exports(options, AppSettings())


def test_plan_from_input_list_counts_as_multiple_sources():
    options = SessionOptions(
        inputs=("a.mov",),
        export_target=ExportTarget(directory=OUT),
        formats=("json",),
        from_input_list=True,
    )

    assert options.multiple_sources
    assert [p.output_file for p in plan_exports(options, AppSettings())] == [OUT / "a_media-datas.json"]
