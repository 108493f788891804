"""Memento: instantáneas de un editor guardadas por un cuidador externo."""

from __future__ import annotations

from dataclasses import dataclass

from core.domain.models import PatternCategory, PatternInfo
from core.interfaces.demo import Emit
from patterns._base import DemoBase


@dataclass(frozen=True)
class EditorMemento:
    content: str
    cursor: int


class TextEditor:
    def __init__(self) -> None:
        self.content = ""
        self.cursor = 0

    def type(self, text: str) -> None:
        self.content = self.content[: self.cursor] + text + self.content[self.cursor :]
        self.cursor += len(text)

    def save(self) -> EditorMemento:
        return EditorMemento(self.content, self.cursor)

    def restore(self, memento: EditorMemento) -> None:
        self.content = memento.content
        self.cursor = memento.cursor


class History:
    """Cuidador: guarda mementos sin mirar dentro."""

    def __init__(self, editor: TextEditor) -> None:
        self._editor = editor
        self._snapshots: list[EditorMemento] = []

    def backup(self) -> None:
        self._snapshots.append(self._editor.save())

    def undo(self) -> bool:
        if not self._snapshots:
            return False
        self._editor.restore(self._snapshots.pop())
        return True


class MementoDemo(DemoBase):
    info = PatternInfo(
        slug="memento",
        name="Memento",
        category=PatternCategory.BEHAVIORAL,
        intent="Capture and externalize an object's internal state so it can be restored later.",
        intent_es="Captura y externaliza el estado interno de un objeto para poder restaurarlo después.",
        aliases=("snapshot", "undo"),
    )

    def run(self, emit: Emit) -> None:
        editor = TextEditor()
        history = History(editor)

        for chunk in ("Hello", ", world", "!!!"):
            history.backup()
            editor.type(chunk)
            emit(f"Typed: {editor.content!r}")

        while history.undo():
            emit(f"Undo: {editor.content!r}")
        emit(f"Undo with empty history: {history.undo()}")
