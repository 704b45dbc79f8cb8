"""Nombres de los ficheros de salida de una exportación.

Envuelve `ExportTarget.make_output_file` para que, con varias fuentes, dos
fuentes nunca escriban en la misma ruta.
"""

from __future__ import annotations

import logging
from pathlib import Path, PurePath

from core.domain.export_target import DEFAULT_SEPARATOR, ExportTarget, join_base_file_name

logger = logging.getLogger(__name__)


def source_prefix(source: str, *, keep_extension: bool = False) -> str:
    """Prefijo que identifica las salidas de `source` cuando hay varias fuentes.

    `clip.mov` da `clip`, o `clip-mov` con `keep_extension`.
    """

    name = PurePath(source).name
    stem, dot, extension = name.rpartition(".")
    if not dot or not stem:
        return name
    if keep_extension and extension:
        return name.replace(".", "-")
    return stem


class OutputFileSupplier:
    """Construye las rutas de salida de una exportación.

    - Una sola fuente: decide el destino de exportación.
    - Varias fuentes: cada nombre lleva delante el de la fuente y
      `DEFAULT_SEPARATOR`.
    """

    def __init__(
        self,
        export_target: ExportTarget,
        *,
        multiple_sources: bool = False,
        keep_source_extension: bool = False,
    ) -> None:
        self.export_target = export_target
        self.multiple_sources = multiple_sources
        self.keep_source_extension = keep_source_extension

    def make_output_file(self, suffix: str, source: str | None = None) -> Path:
        if self.multiple_sources and source:
            prefix = source_prefix(source, keep_extension=self.keep_source_extension)
            name = prefix + DEFAULT_SEPARATOR + join_base_file_name(self.export_target.base_file_name, suffix)
            output_file = self.export_target.directory / name
        else:
            output_file = self.export_target.make_output_file(suffix)

        logger.debug("Make output file name: %s", output_file)
        return output_file
