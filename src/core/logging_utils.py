"""Utilidades de logging para la CLI y los servicios.

Por qué Rich:
- Mismo estilo visual que el resto de la salida de la CLI.
- Trazas legibles cuando una exportación falla.
"""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

DEFAULT_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER_NAME = "mediascope"


def resolve_level(level: str | int, *, verbose: bool = False, quiet: bool = False) -> int:
    """Traduce un nivel (nombre o entero) y los modos verbose/quiet a un nivel de logging.

    `verbose` gana sobre `quiet`. Nombres desconocidos caen en INFO.
    """

    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(
    level: str | int = logging.INFO,
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_file: Path | None = None,
    console: Console | None = None,
) -> logging.Logger:
    """Configura el logging del proceso: Rich en stderr y, opcionalmente, un fichero.

    - Los handlers de una llamada anterior se reemplazan, nunca se duplican.
    - Devuelve el logger raíz, del que cuelgan los loggers `cli.*` y `core.*`.
    """

    log_level = resolve_level(level, verbose=verbose, quiet=quiet)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in list(root_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root_logger.removeHandler(handler)
            handler.close()

    rich_handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
    )
    rich_handler.set_name(_HANDLER_NAME)
    rich_handler.setLevel(log_level)
    root_logger.addHandler(rich_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.set_name(_HANDLER_NAME)
        file_handler.setFormatter(logging.Formatter(fmt=DEFAULT_LOG_FORMAT, datefmt=DEFAULT_DATE_FORMAT))
        file_handler.setLevel(log_level)
        root_logger.addHandler(file_handler)

    return root_logger
