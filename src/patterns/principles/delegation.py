"""Principio de delegación: `Printer` parece imprimir, pero delega el trabajo."""

from __future__ import annotations

from typing import Protocol

from core.domain.models import PatternCategory, PatternInfo
from core.interfaces.demo import Emit
from patterns._base import DemoBase


class PrinterService(Protocol):
    def print(self, document: str) -> str: ...


class RealPrinter:
    def print(self, document: str) -> str:
        return f"The Delegate: printing {document!r}."


class PdfPrinter:
    def print(self, document: str) -> str:
        return f"The Delegate: saving {document!r} as PDF."


class Printer:
    def __init__(self, printer_service: PrinterService) -> None:
        self.printer_service = printer_service

    def print(self, document: str) -> str:
        return self.printer_service.print(document)


class DelegationDemo(DemoBase):
    info = PatternInfo(
        slug="delegation",
        name="Delegation Principle",
        category=PatternCategory.PRINCIPLE,
        intent="Hand a task over to a helper object instead of doing it yourself or inheriting it.",
        intent_es="Entrega una tarea a un objeto auxiliar en lugar de hacerla uno mismo o heredarla.",
    )

    def run(self, emit: Emit) -> None:
        printer = Printer(RealPrinter())
        emit(printer.print("report.txt"))

        printer.printer_service = PdfPrinter()
        emit(printer.print("report.txt"))
