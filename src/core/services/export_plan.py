"""Planificación de exportación.

Por qué separado de la CLI:
- Calcular qué ficheros produciría una exportación es lógica pura; mostrarlo
  (Rich) es asunto de la CLI.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from core.config import AppSettings
from core.domain.formats import resolve_export_formats
from core.domain.models import SessionOptions
from core.errors import SessionConfigurationError
from core.services.output_files import OutputFileSupplier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlannedOutput:
    source: str
    format_name: str
    output_file: Path


def plan_exports(options: SessionOptions, settings: AppSettings) -> list[PlannedOutput]:
    """Devuelve un `PlannedOutput` por fuente, formato y fichero producido.

    Orden estable: fuentes en el orden recibido, luego formatos, luego ficheros.
    """

    if options.export_target is None:
        raise SessionConfigurationError("An export directory is required (use -e/--export).")
    if not options.inputs:
        raise SessionConfigurationError("At least one input is required (use -i/--input).")

    export_formats = resolve_export_formats(list(options.formats))
    supplier = OutputFileSupplier(
        options.export_target,
        multiple_sources=options.multiple_sources,
        keep_source_extension=settings.add_source_ext_to_output_names,
    )

    planned: list[PlannedOutput] = []
    for source in options.inputs:
        for export_format in export_formats:
            for file_name in export_format.produced_file_names:
                planned.append(
                    PlannedOutput(
                        source=source,
                        format_name=export_format.name,
                        output_file=supplier.make_output_file(file_name, source=source),
                    )
                )

    logger.info(
        "Planned %d output file(s) for %d source(s) and %d format(s)",
        len(planned),
        len(options.inputs),
        len(export_formats),
    )
    return planned
