"""Jerarquía de errores de mediascope.

La CLI los deja propagar; solo el entero que devuelve el runner se convierte
en exit code.
"""

from __future__ import annotations


class MediascopeError(Exception):
    """Error base de mediascope."""


class RunnerNotConfiguredError(MediascopeError):
    """Se lanza al ejecutar un `CommandRunner` sin computación configurada."""


class SessionConfigurationError(MediascopeError):
    """A la sesión de la CLI le falta lo necesario para planificar la exportación."""


class UnknownExportFormatError(MediascopeError, ValueError):
    """Se pidió un formato de exportación no registrado."""

    def __init__(self, name: str, known: list[str]) -> None:
        self.name = name
        self.known = known
        super().__init__(f"Unknown export format '{name}'. Known formats: {', '.join(known)}")
