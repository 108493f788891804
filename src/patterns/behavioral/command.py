"""Command: mando a distancia con historial para deshacer."""

from __future__ import annotations

from typing import Protocol

from core.domain.models import PatternCategory, PatternInfo
from core.interfaces.demo import Emit
from patterns._base import DemoBase


class Light:
    def __init__(self, room: str) -> None:
        self.room = room
        self.is_on = False

    def turn_on(self) -> str:
        self.is_on = True
        return f"{self.room} light is ON"

    def turn_off(self) -> str:
        self.is_on = False
        return f"{self.room} light is OFF"


class Command(Protocol):
    def execute(self) -> str: ...

    def undo(self) -> str: ...


class LightOnCommand:
    def __init__(self, light: Light) -> None:
        self.light = light

    def execute(self) -> str:
        return self.light.turn_on()

    def undo(self) -> str:
        return self.light.turn_off()


class LightOffCommand:
    def __init__(self, light: Light) -> None:
        self.light = light

    def execute(self) -> str:
        return self.light.turn_off()

    def undo(self) -> str:
        return self.light.turn_on()


class RemoteControl:
    """Invocador: no sabe qué hace cada comando, solo los ejecuta y apila."""

    def __init__(self) -> None:
        self._history: list[Command] = []

    def press(self, command: Command) -> str:
        self._history.append(command)
        return command.execute()

    def undo(self) -> str:
        if not self._history:
            return "Nothing to undo"
        return self._history.pop().undo()


class CommandDemo(DemoBase):
    info = PatternInfo(
        slug="command",
        name="Command",
        category=PatternCategory.BEHAVIORAL,
        intent="Encapsulate a request as an object, letting you parameterize, queue and undo operations.",
        intent_es="Encapsula una petición como objeto para parametrizar, encolar y deshacer operaciones.",
        aliases=("action",),
    )

    def run(self, emit: Emit) -> None:
        living_room = Light("Living room")
        remote = RemoteControl()
        emit(remote.press(LightOnCommand(living_room)))
        emit(remote.press(LightOffCommand(living_room)))
        emit(f"Undo: {remote.undo()}")
        emit(f"Undo: {remote.undo()}")
        emit(f"Undo: {remote.undo()}")
