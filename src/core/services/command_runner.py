"""Runner de comandos de la CLI.

Por qué existe:
- Separa el trabajo real de una invocación (una `DeferredComputation`) de la
  forma en que su resultado llega al proceso como exit code.
"""

from __future__ import annotations

import logging

from core.errors import RunnerNotConfiguredError
from core.interfaces.deferred import DeferredComputation

logger = logging.getLogger(__name__)


class CommandRunner:
    """Ejecuta la computación configurada y devuelve su código tal cual.

    Reglas:
    - `do_call` se asigna una vez, antes de `run`, y no cambia durante la ejecución.
    - Cada `run` invoca la computación exactamente una vez.
    - Las excepciones de la computación se propagan sin tocar: sin reintentos,
      sin envolverlas y sin exit code por defecto.
    """

    def __init__(self, do_call: DeferredComputation | None = None) -> None:
        self.do_call = do_call

    def run(self) -> int:
        if self.do_call is None:
            raise RunnerNotConfiguredError("No computation configured for this command runner.")

        logger.debug("Run deferred computation %r", self.do_call)
        exit_code = self.do_call()
        logger.debug("Deferred computation returned %s", exit_code)
        return exit_code

    def __call__(self) -> int:
        return self.run()
