"""Base común de las demos.

Por qué una base y no solo el Protocol:
- Todas las demos aceptan `settings` opcional, igual que el resto de
  implementaciones concretas; así el catálogo las construye sin distinguir.
"""

from __future__ import annotations

from typing import ClassVar

from core.config import AppSettings
from core.domain.models import PatternInfo
from core.interfaces.demo import Emit, PatternDemo


class DemoBase(PatternDemo):
    info: ClassVar[PatternInfo]

    def __init__(self, settings: AppSettings | None = None) -> None:
        self._settings = settings or AppSettings()

    def run(self, emit: Emit) -> None:
        raise NotImplementedError
