"""Singleton: logger de aplicación con rotación (challenge del curso).

Detalles del challenge:
- Instancia única creada perezosamente con doble verificación + lock.
- Niveles ordenados INFO < WARNING < ERROR; se descartan los inferiores al actual.
- Antes de cada escritura, si el fichero supera `max_bytes`, se renombra a
  `application_backup.log` (reemplazando el backup anterior).
"""

from __future__ import annotations

import threading
from datetime import datetime
from enum import IntEnum
from pathlib import Path
from typing import ClassVar

from core.domain.models import PatternCategory, PatternInfo
from core.interfaces.demo import Emit
from patterns._base import DemoBase

LOG_FILE_NAME = "application.log"
BACKUP_FILE_NAME = "application_backup.log"
DEFAULT_MAX_BYTES = 5 * 1024


class LogLevel(IntEnum):
    INFO = 0
    WARNING = 1
    ERROR = 2


class AppLogger:
    """Logger de fichero del que solo existe una instancia por proceso."""

    _instance: ClassVar[AppLogger | None] = None
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        if AppLogger._instance is not None:
            raise RuntimeError("AppLogger is a singleton; use AppLogger.get_instance()")
        self.current_level = LogLevel.INFO
        self.max_bytes = DEFAULT_MAX_BYTES
        self.log_file = Path(LOG_FILE_NAME)
        self.backup_file = Path(BACKUP_FILE_NAME)
        self._write_lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> AppLogger:
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Olvida la instancia actual (solo para tests y demos repetidas)."""

        with cls._lock:
            cls._instance = None

    def use_directory(self, directory: Path, max_bytes: int = DEFAULT_MAX_BYTES) -> None:
        directory.mkdir(parents=True, exist_ok=True)
        self.log_file = directory / LOG_FILE_NAME
        self.backup_file = directory / BACKUP_FILE_NAME
        self.max_bytes = max_bytes

    def set_log_level(self, level: LogLevel) -> None:
        self.current_level = level

    def log(self, level: LogLevel, message: str) -> bool:
        """Escribe `message` si `level` alcanza el nivel actual; devuelve si se escribió."""

        if level < self.current_level:
            return False

        with self._write_lock:
            self._rotate_if_needed()
            timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
            with self.log_file.open("a", encoding="utf-8") as fh:
                fh.write(f"[{level.name}] {timestamp} - {message}\n")
        return True

    def _rotate_if_needed(self) -> None:
        if self.log_file.exists() and self.log_file.stat().st_size > self.max_bytes:
            self.log_file.replace(self.backup_file)


class SingletonDemo(DemoBase):
    info = PatternInfo(
        slug="singleton",
        name="Singleton",
        category=PatternCategory.CREATIONAL,
        intent="Ensure a class has only one instance and provide a global point of access to it.",
        intent_es="Garantiza que una clase tenga una única instancia y un punto de acceso global a ella.",
        aliases=("logger",),
        challenge=True,
    )

    fill_messages = 100

    def run(self, emit: Emit) -> None:
        logger = AppLogger.get_instance()
        logger.use_directory(self._settings.log_dir, self._settings.log_max_bytes)
        logger.set_log_level(LogLevel.WARNING)

        emit(f"Same instance: {logger is AppLogger.get_instance()}")

        for level, message in (
            (LogLevel.INFO, "This is an informational message."),
            (LogLevel.WARNING, "This is a warning message."),
            (LogLevel.ERROR, "This is an error message!"),
        ):
            written = logger.log(level, message)
            emit(f"{level.name:<7} -> {'logged' if written else 'skipped (below WARNING)'}")

        for _ in range(self.fill_messages):
            logger.log(LogLevel.WARNING, "Filling up the log file...")

        emit(f"Log file: {logger.log_file}")
        emit(f"Backup file: {logger.backup_file} (exists: {logger.backup_file.exists()})")
        emit(f"Check '{LOG_FILE_NAME}' and '{BACKUP_FILE_NAME}' for logs.")
