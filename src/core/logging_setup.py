"""Logging de diagnóstico.

Por qué separado de la salida de las demos:
- Las demos "imprimen" vía `emit`; el logging solo cuenta qué hace la
  aplicación (qué se ejecuta, cuánto tarda, qué falla).
- Va a stderr con Rich para no mezclarse con `--json` en stdout.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "patternbook-rich"


def configure_logging(level: str | int = "WARNING", *, console: Console | None = None) -> logging.Logger:
    """Configura el logger raíz con un `RichHandler` (idempotente).

    Llamarla varias veces solo ajusta el nivel; nunca duplica handlers.
    """

    root = logging.getLogger()
    if isinstance(level, str):
        level = getattr(logging, level.upper())
    root.setLevel(level)

    for handler in root.handlers:
        if handler.get_name() == _HANDLER_NAME:
            handler.setLevel(level)
            break
    else:
        handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
            markup=False,
        )
        handler.set_name(_HANDLER_NAME)
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        root.addHandler(handler)

    return logging.getLogger("patternbook")
