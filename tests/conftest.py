"""Fixtures compartidas.

Aíslan cada test del entorno real: directorio de trabajo, config de usuario
y la instancia única del logger de la demo Singleton.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from core.config import AppSettings
from core.interfaces.demo import PatternDemo
from patterns.creational.singleton import AppLogger


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    for var in (
        "PATTERNBOOK_DEFAULT_LANGUAGE",
        "PATTERNBOOK_LOG_LEVEL",
        "PATTERNBOOK_LOG_DIR",
        "PATTERNBOOK_LOG_MAX_BYTES",
        "PATTERNBOOK_DOCS_DIR",
        "PATTERNBOOK_SHOW_BANNER",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("PATTERNBOOK_LOG_DIR", str(tmp_path / "logs"))
    return tmp_path


@pytest.fixture(autouse=True)
def fresh_logger():
    AppLogger.reset_instance()
    yield
    AppLogger.reset_instance()


@pytest.fixture
def settings(tmp_path: Path) -> AppSettings:
    return AppSettings(log_dir=tmp_path / "logs", reports_dir=tmp_path / "reports")


@pytest.fixture
def run_lines() -> Callable[[PatternDemo], list[str]]:
    """Ejecuta una demo y devuelve las líneas emitidas."""

    def _run(demo: PatternDemo) -> list[str]:
        lines: list[str] = []
        demo.run(lines.append)
        return lines

    return _run
