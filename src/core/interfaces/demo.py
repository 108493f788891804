"""Contrato de las demos del catálogo.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite que cada demo sea intercambiable y testeable sin acoplar el Core
  a implementaciones concretas.
"""

from __future__ import annotations

from typing import Callable, ClassVar, Protocol, runtime_checkable

from core.domain.models import PatternInfo

Emit = Callable[[str], None]


@runtime_checkable
class PatternDemo(Protocol):
    """Contrato mínimo para una demo.

    Reglas de diseño:
    - `info` es un atributo de clase: el catálogo lo lee sin instanciar.
    - `run` no imprime: escribe cada línea a través de `emit`, lo que permite
      capturar la salida en un `DemoTranscript`.
    """

    info: ClassVar[PatternInfo]

    def run(self, emit: Emit) -> None:
        """Ejecuta la demo emitiendo su salida línea a línea."""

        ...
