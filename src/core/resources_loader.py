"""Cargador de las explicaciones markdown del catálogo.

Este módulo vive en `core/` porque:
- centraliza *dónde* están las explicaciones sin acoplarse a la CLI
- evita duplicar lógica de paths entre `show`, exportadores y `doctor`.

Las explicaciones se distribuyen con el paquete `patterns` (`patterns/docs`).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from core.config import AppSettings
from core.domain.errors import DocumentNotFoundError

logger = logging.getLogger(__name__)


def _bundled_docs_dir() -> Path:
    # core/resources_loader.py -> core -> src -> src/patterns/docs
    return Path(__file__).resolve().parents[1] / "patterns" / "docs"


def docs_dir(settings: AppSettings | None = None) -> Path:
    """Directorio de explicaciones en runtime.

    Reglas:
    - Si `PATTERNBOOK_DOCS_DIR` (o `settings.docs_dir`) está definido, se usa tal cual.
    - Si no, las explicaciones empaquetadas junto a las demos.
    """

    if settings is not None and settings.docs_dir is not None:
        return settings.docs_dir

    override = (os.environ.get("PATTERNBOOK_DOCS_DIR") or "").strip()
    if override:
        return Path(override)

    return _bundled_docs_dir()


def doc_path(slug: str, settings: AppSettings | None = None) -> Path:
    return docs_dir(settings) / f"{slug}.md"


def load_pattern_doc(slug: str, settings: AppSettings | None = None) -> str:
    """Devuelve el markdown de un patrón.

    Lanza `DocumentNotFoundError` si el fichero no existe.
    """

    path = doc_path(slug, settings)
    if not path.is_file():
        raise DocumentNotFoundError(slug, str(path))

    logger.debug("Loading documentation for %s from %s", slug, path)
    return path.read_text(encoding="utf-8")


def missing_docs(slugs: list[str], settings: AppSettings | None = None) -> list[str]:
    """Slugs sin explicación markdown (usado por `doctor`)."""

    return [slug for slug in slugs if not doc_path(slug, settings).is_file()]
