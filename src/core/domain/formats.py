"""Formatos de exportación conocidos y los ficheros que produce cada uno."""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.errors import UnknownExportFormatError


class ExportFormat(BaseModel):
    """Un formato de exportación y los sufijos de salida que produce."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Nombre corto usado en la línea de comandos.")
    long_name: str = Field(..., min_length=1, description="Descripción legible.")
    produced_file_names: tuple[str, ...] = Field(
        default=(),
        description="Nombres de fichero (sufijos) que escribe este formato.",
    )


EXPORT_FORMATS: tuple[ExportFormat, ...] = (
    ExportFormat(name="report", long_name="HTML document report", produced_file_names=("report.html",)),
    ExportFormat(name="jsonreport", long_name="JSON document report", produced_file_names=("report.json",)),
    ExportFormat(name="json", long_name="JSON Document", produced_file_names=("media-datas.json",)),
    ExportFormat(name="xml", long_name="XML Document", produced_file_names=("media-datas.xml",)),
    ExportFormat(name="sqlite", long_name="SQLite database", produced_file_names=("media-datas.sqlite",)),
    ExportFormat(name="xlsx", long_name="XLSX Spreadsheet", produced_file_names=("media-datas.xlsx",)),
    ExportFormat(name="ffprobexml", long_name="Media file headers on FFprobe XML", produced_file_names=("ffprobe.xml",)),
    ExportFormat(
        name="graphic",
        long_name="Data graphical representation",
        produced_file_names=(
            "audio-loudness.jpg",
            "audio-phase.jpg",
            "video-bitrate.jpg",
            "video-siti.jpg",
            "events.jpg",
        ),
    ),
)


def known_format_names() -> list[str]:
    return [f.name for f in EXPORT_FORMATS]


def get_export_format(name: str) -> ExportFormat:
    """Busca un formato por su nombre corto (sin distinguir mayúsculas)."""

    wanted = name.strip().lower()
    for export_format in EXPORT_FORMATS:
        if export_format.name == wanted:
            return export_format
    raise UnknownExportFormatError(name, known_format_names())


def resolve_export_formats(names: list[str] | None) -> list[ExportFormat]:
    """Resuelve los nombres en orden y sin duplicados; sin selección, todos los formatos."""

    if not names:
        return list(EXPORT_FORMATS)

    selected: list[ExportFormat] = []
    for name in names:
        export_format = get_export_format(name)
        if export_format not in selected:
            selected.append(export_format)
    return selected
