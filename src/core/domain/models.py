"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta de lo que llega desde la CLI, sin acoplar el Core a typer.

Nota:
- Estos modelos describen *qué* pide una invocación, no *cómo* se ejecuta.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.export_target import ExportTarget


class SessionOptions(BaseModel):
    """Opciones de una invocación de la CLI.

    - `inputs`: fuentes (ficheros o URLs) a procesar, en el orden recibido.
    - `export_target`: ausente cuando solo se pide `version` u `options`.
    """

    model_config = ConfigDict(frozen=True)

    inputs: tuple[str, ...] = Field(
        default=(),
        description="Fuentes a procesar.",
    )
    export_target: ExportTarget | None = Field(
        default=None,
        description="Directorio y nombre base de los ficheros exportados.",
    )
    formats: tuple[str, ...] = Field(
        default=(),
        description="Formatos de exportación seleccionados (vacío = todos).",
    )
    version: bool = Field(default=False, description="Mostrar la versión y salir.")
    options: bool = Field(default=False, description="Mostrar formatos disponibles y salir.")
    from_input_list: bool = Field(
        default=False,
        description="Las fuentes llegaron (también) desde un fichero de lista.",
    )
    save_plan: bool = Field(
        default=False,
        description="Guardar el plan como JSON en el directorio de exportación.",
    )

    @property
    def multiple_sources(self) -> bool:
        """True con más de una fuente, o cuando las fuentes vienen de un fichero de lista."""

        return len(self.inputs) > 1 or self.from_input_list
