"""Idiomas soportados por patternbook.

El catálogo guarda una frase de intención en inglés y otra en español por
patrón. Vive en el dominio para que la CLI, los servicios y los exportadores
compartan la misma fuente de verdad sin imports circulares.
"""

from __future__ import annotations

from enum import Enum


class Language(str, Enum):
    """Idiomas disponibles para la salida orientada al usuario."""

    ENGLISH = "en"
    SPANISH = "es"

    @classmethod
    def default(cls) -> "Language":
        return cls.ENGLISH

    @classmethod
    def from_bool(cls, spanish: bool) -> "Language":
        """Deriva el idioma a partir de un flag booleano (`--spanish`)."""

        return cls.SPANISH if spanish else cls.ENGLISH

    def label(self) -> str:
        return "Español" if self is Language.SPANISH else "English"
