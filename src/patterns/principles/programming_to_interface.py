"""Programar contra una interfaz: `Computer` recibe su pantalla por constructor."""

from __future__ import annotations

from typing import Protocol

from core.domain.models import PatternCategory, PatternInfo
from core.interfaces.demo import Emit
from patterns._base import DemoBase


class DisplayModule(Protocol):
    def display(self) -> str: ...


class Monitor:
    def display(self) -> str:
        return "Display through Monitor"


class Projector:
    def display(self) -> str:
        return "Display through Projector"


class Computer:
    def __init__(self, display_module: DisplayModule) -> None:
        self._display_module = display_module

    def display(self) -> str:
        return self._display_module.display()


class ProgrammingToInterfaceDemo(DemoBase):
    info = PatternInfo(
        slug="programming-to-an-interface",
        name="Programming to an Interface",
        category=PatternCategory.PRINCIPLE,
        intent="Depend on abstractions, not on concrete implementations.",
        intent_es="Depende de abstracciones, no de implementaciones concretas.",
        aliases=("program-to-interface", "dependency-injection"),
    )

    def run(self, emit: Emit) -> None:
        for module in (Monitor(), Projector()):
            emit(Computer(module).display())
