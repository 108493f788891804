"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta de las fichas del catálogo (slug, categoría, alias) en
  el momento de declarar cada demo, no al renderizarlas.
- Serialización directa a JSON/HTML para los exportadores.

Nota:
- Estos modelos describen *qué* es un patrón y *qué* produjo una ejecución,
  no *cómo* se implementa cada demo.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field, computed_field
from pydantic.config import ConfigDict

from core.domain.language import Language


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PatternCategory(str, Enum):
    """Categorías del catálogo, en el orden en que se presentan."""

    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIORAL = "behavioral"
    PRINCIPLE = "principle"

    def order(self) -> int:
        return list(PatternCategory).index(self)


class PatternInfo(BaseModel):
    """Ficha de un patrón (o principio) del catálogo.

    Por qué existe:
    - Cada demo declara su ficha como atributo de clase; el catálogo la usa
      para listar, buscar por alias y exportar sin instanciar la demo.
    """

    model_config = ConfigDict(frozen=True)

    slug: str = Field(
        ...,
        min_length=1,
        max_length=64,
        pattern=r"^[a-z0-9]+(-[a-z0-9]+)*$",
        description="Identificador kebab-case único en el catálogo.",
    )
    name: str = Field(
        ...,
        min_length=1,
        max_length=128,
        description="Nombre legible (p.ej. 'Chain of Responsibility').",
    )
    category: PatternCategory = Field(
        ...,
        description="Categoría GoF o 'principle' para los principios de diseño.",
    )
    intent: str = Field(
        ...,
        min_length=1,
        description="Intención del patrón en una frase (inglés).",
    )
    intent_es: str = Field(
        ...,
        min_length=1,
        description="Intención del patrón en una frase (español).",
    )
    aliases: tuple[str, ...] = Field(
        default=(),
        description="Claves adicionales aceptadas por la búsqueda.",
    )
    challenge: bool = Field(
        default=False,
        description="La demo incluye un ejercicio 'challenge' del curso.",
    )

    def intent_for(self, language: Language) -> str:
        return self.intent_es if language is Language.SPANISH else self.intent


class DemoTranscript(BaseModel):
    """Resultado de ejecutar una demo: las líneas que emitió, en orden.

    Por qué un modelo y no texto plano:
    - Permite exportar ejecuciones (JSON/HTML) y testear el comportamiento
      observable de cada demo sin capturar stdout.
    """

    slug: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    category: PatternCategory
    lines: list[str] = Field(
        default_factory=list,
        description="Salida de la demo, una entrada por línea emitida.",
    )
    ok: bool = Field(
        default=True,
        description="False si la demo lanzó una excepción.",
    )
    error: str | None = Field(
        default=None,
        description="Mensaje de la excepción cuando `ok` es False.",
    )
    started_at: datetime = Field(default_factory=_utcnow)
    duration_ms: float = Field(default=0.0, ge=0.0)


class RunReport(BaseModel):
    """Agregado de una invocación de `patternbook run`."""

    transcripts: list[DemoTranscript] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    language: Language = Field(default=Language.ENGLISH)
    generated_at: datetime = Field(default_factory=_utcnow)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def ok(self) -> bool:
        return all(t.ok for t in self.transcripts)

    def failed(self) -> list[DemoTranscript]:
        return [t for t in self.transcripts if not t.ok]
