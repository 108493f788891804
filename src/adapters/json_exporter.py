"""Exportación JSON de ejecuciones y del catálogo.

Por qué JSON:
- Permite comparar transcripciones entre versiones o alimentar otras herramientas.
- Persiste el resultado de una ejecución sin depender del render HTML/PDF.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import PatternInfo, RunReport


def _write_json(payload: object, output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path


def export_report_json(*, report: RunReport, output_path: Path) -> Path:
    """Exporta `RunReport` a JSON UTF-8 con formato estable."""

    return _write_json(report.model_dump(mode="json"), output_path)


def catalogue_payload(infos: list[PatternInfo]) -> list[dict]:
    return [info.model_dump(mode="json") for info in infos]


def export_catalogue_json(*, infos: list[PatternInfo], output_path: Path) -> Path:
    return _write_json(catalogue_payload(infos), output_path)
