"""Tests del logger singleton (challenge de la demo Singleton)."""

import re
import threading

import pytest

from patterns.creational.singleton import (
    BACKUP_FILE_NAME,
    LOG_FILE_NAME,
    AppLogger,
    LogLevel,
    SingletonDemo,
)

LINE_RE = re.compile(r"^\[(INFO|WARNING|ERROR)\] \d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2} - .+$")


@pytest.fixture
def logger(tmp_path):
    instance = AppLogger.get_instance()
    instance.use_directory(tmp_path / "logs", max_bytes=512)
    return instance


def test_get_instance_returns_same_object():
    assert AppLogger.get_instance() is AppLogger.get_instance()


def test_direct_construction_is_rejected_once_instance_exists():
    AppLogger.get_instance()
    with pytest.raises(RuntimeError):
        AppLogger()


def test_concurrent_get_instance_creates_one_object():
    seen = []
    barrier = threading.Barrier(8)

    def grab():
        barrier.wait()
        seen.append(AppLogger.get_instance())

    threads = [threading.Thread(target=grab) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len({id(obj) for obj in seen}) == 1


def test_levels_below_current_are_skipped(logger):
    logger.set_log_level(LogLevel.WARNING)
    assert logger.log(LogLevel.INFO, "hidden") is False
    assert logger.log(LogLevel.WARNING, "shown") is True
    assert logger.log(LogLevel.ERROR, "also shown") is True

    lines = logger.log_file.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert all(LINE_RE.match(line) for line in lines)
    assert lines[0].startswith("[WARNING] ")
    assert lines[1].endswith(" - also shown")


def test_rotation_moves_log_to_backup(logger):
    for i in range(30):
        logger.log(LogLevel.ERROR, f"message number {i}")

    assert logger.backup_file.exists()
    assert logger.backup_file.name == BACKUP_FILE_NAME
    assert logger.log_file.name == LOG_FILE_NAME
    # El fichero activo nunca crece mucho más allá del umbral.
    assert logger.log_file.stat().st_size <= 512 + 100


def test_rotation_replaces_previous_backup(logger):
    logger.backup_file.parent.mkdir(parents=True, exist_ok=True)
    logger.backup_file.write_text("old backup\n", encoding="utf-8")
    for i in range(30):
        logger.log(LogLevel.ERROR, f"message number {i}")
    assert "old backup" not in logger.backup_file.read_text(encoding="utf-8")


def test_demo_reports_filtering_and_rotation(settings, run_lines):
    lines = run_lines(SingletonDemo(settings))

    assert lines[0] == "Same instance: True"
    assert lines[1].startswith("INFO") and lines[1].endswith("skipped (below WARNING)")
    assert lines[2].startswith("WARNING") and lines[2].endswith("logged")
    assert lines[3].startswith("ERROR") and lines[3].endswith("logged")
    assert "(exists: True)" in lines[5]
    assert lines[-1] == "Check 'application.log' and 'application_backup.log' for logs."
    assert (settings.log_dir / LOG_FILE_NAME).exists()
