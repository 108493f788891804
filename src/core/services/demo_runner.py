"""Orquestación de ejecuciones de demos.

Este módulo concentra el flujo "resolver -> ejecutar -> capturar" que la CLI
necesita, de modo que el mismo pipeline sirva para tests y exportadores y
los efectos secundarios (paneles, barras de progreso) se queden en la CLI.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Sequence

from core.config import AppSettings
from core.domain.errors import DemoExecutionError
from core.domain.models import DemoTranscript, PatternCategory, RunReport
from core.interfaces.demo import PatternDemo
from core.services.catalogue import create_demo, list_infos, resolve_slug

logger = logging.getLogger(__name__)


@dataclass
class RunRequest:
    """Parámetros de una ejecución.

    Sin `slugs` ni `category` se ejecuta el catálogo completo.
    """

    slugs: Sequence[str] | None = None
    category: PatternCategory | None = None
    strict: bool = False


@dataclass
class RunHooks:
    """Callbacks opcionales para la capa de UI."""

    demo_start: Callable[[str], None] | None = None
    line: Callable[[str, str], None] | None = None
    warning: Callable[[str], None] | None = None


@dataclass
class RunResult:
    report: RunReport
    slugs: list[str] = field(default_factory=list)


def select_slugs(request: RunRequest) -> list[str]:
    """Resuelve la selección a slugs canónicos, sin duplicados y en orden.

    Las claves desconocidas lanzan `UnknownPatternError` antes de ejecutar nada.
    """

    selected: list[str] = []
    for key in request.slugs or []:
        slug = resolve_slug(key)
        if slug not in selected:
            selected.append(slug)

    if request.category is not None:
        in_category = [info.slug for info in list_infos(request.category)]
        if selected:
            selected = [slug for slug in selected if slug in in_category]
        else:
            selected = in_category
    elif not selected:
        selected = [info.slug for info in list_infos()]

    return selected


def run_demo(demo: PatternDemo, *, strict: bool = False, hooks: RunHooks | None = None) -> DemoTranscript:
    """Ejecuta una demo capturando cada línea emitida."""

    hooks = hooks or RunHooks()
    info = demo.info
    lines: list[str] = []

    def emit(line: str) -> None:
        lines.append(line)
        if hooks.line:
            hooks.line(info.slug, line)

    if hooks.demo_start:
        hooks.demo_start(info.slug)

    started_at = datetime.now(timezone.utc)
    start = time.perf_counter()
    error: str | None = None
    try:
        demo.run(emit)
    except Exception as exc:
        if strict:
            raise DemoExecutionError(info.slug, exc) from exc
        error = f"{type(exc).__name__}: {exc}"
        logger.warning("Demo %s failed: %s", info.slug, error)
    duration_ms = (time.perf_counter() - start) * 1000

    logger.debug("Demo %s emitted %d lines in %.2f ms", info.slug, len(lines), duration_ms)
    return DemoTranscript(
        slug=info.slug,
        name=info.name,
        category=info.category,
        lines=lines,
        ok=error is None,
        error=error,
        started_at=started_at,
        duration_ms=duration_ms,
    )


def run_demos(
    *,
    settings: AppSettings,
    request: RunRequest,
    hooks: RunHooks | None = None,
) -> RunResult:
    hooks = hooks or RunHooks()
    slugs = select_slugs(request)
    warnings: list[str] = []

    if not slugs:
        message = "No demos matched the selection."
        warnings.append(message)
        if hooks.warning:
            hooks.warning(message)

    logger.info("Running %d demo(s): %s", len(slugs), ", ".join(slugs))
    transcripts: list[DemoTranscript] = []
    for slug in slugs:
        transcript = run_demo(create_demo(slug, settings), strict=request.strict, hooks=hooks)
        if not transcript.ok:
            message = f"{slug}: {transcript.error}"
            warnings.append(message)
            if hooks.warning:
                hooks.warning(message)
        transcripts.append(transcript)

    report = RunReport(
        transcripts=transcripts,
        warnings=warnings,
        language=settings.default_language,
    )
    return RunResult(report=report, slugs=slugs)
