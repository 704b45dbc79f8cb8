"""Contrato de trabajo diferido.

Por qué Protocol:
- La CLI decide *qué* ejecutar; el runner decide *cómo* su resultado se
  convierte en exit code del proceso.
- Cualquier función, lambda o método ligado cumple el contrato, y los tests
  pueden pasar un fake escrito a mano.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class DeferredComputation(Protocol):
    """Unidad de trabajo sin argumentos que devuelve un código entero o lanza."""

    def __call__(self) -> int:
        """Ejecuta el trabajo y devuelve el código de resultado."""

        ...
