"""Destino de exportación y construcción de nombres de salida.

Por qué en el dominio:
- La regla de nombres es pura (no toca el disco), así que la comparten la
  CLI, el planificador de exportación y los tests sin depender de I/O.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

JOIN_CHARACTERS: tuple[str, ...] = ("_", " ", "-", "|")
DEFAULT_SEPARATOR = "_"


def join_base_file_name(base_file_name: str | None, suffix: str) -> str:
    """Combina nombre base y sufijo en un único segmento de ruta.

    - Sin nombre base (o vacío): el sufijo tal cual.
    - Nombre base terminado en un carácter de unión: se concatena sin añadir otro.
    - Resto de casos: se unen con `DEFAULT_SEPARATOR`.
    """

    if not isinstance(suffix, str):
        raise TypeError(f"suffix must be a str, not {type(suffix).__name__}")

    if not base_file_name:
        return suffix
    if base_file_name.endswith(JOIN_CHARACTERS):
        return base_file_name + suffix
    return base_file_name + DEFAULT_SEPARATOR + suffix


class ExportTarget(BaseModel):
    """Directorio de exportación y nombre base opcional para los ficheros generados.

    No se valida que `directory` exista: crear o escribir ficheros es asunto
    de quien use la ruta devuelta.
    """

    model_config = ConfigDict(frozen=True)

    directory: Path = Field(
        ...,
        description="Directorio donde se escriben los ficheros exportados.",
    )
    base_file_name: str | None = Field(
        default=None,
        description="Prefijo común de los ficheros exportados (p.ej. 'episode-01').",
    )

    def make_output_file(self, suffix: str) -> Path:
        """Devuelve `directory / <nombre efectivo>` para un sufijo generado."""

        return self.directory / join_base_file_name(self.base_file_name, suffix)
