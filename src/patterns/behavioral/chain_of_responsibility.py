"""Chain of Responsibility: tickets de soporte escalados por severidad."""

from __future__ import annotations

from dataclasses import dataclass

from core.domain.models import PatternCategory, PatternInfo
from core.interfaces.demo import Emit
from patterns._base import DemoBase


@dataclass(frozen=True)
class Ticket:
    title: str
    severity: int


class SupportHandler:
    name = "handler"
    max_severity = 0

    def __init__(self) -> None:
        self._next: SupportHandler | None = None

    def set_next(self, handler: SupportHandler) -> SupportHandler:
        self._next = handler
        return handler

    def handle(self, ticket: Ticket) -> str:
        if ticket.severity <= self.max_severity:
            return f"{self.name} resolved '{ticket.title}' (severity {ticket.severity})"
        if self._next is not None:
            return self._next.handle(ticket)
        return f"Nobody could handle '{ticket.title}' (severity {ticket.severity})"


class LevelOneSupport(SupportHandler):
    name, max_severity = "Level 1 support", 1


class LevelTwoSupport(SupportHandler):
    name, max_severity = "Level 2 support", 3


class Manager(SupportHandler):
    name, max_severity = "Manager", 5


def build_chain() -> SupportHandler:
    head = LevelOneSupport()
    head.set_next(LevelTwoSupport()).set_next(Manager())
    return head


class ChainOfResponsibilityDemo(DemoBase):
    info = PatternInfo(
        slug="chain-of-responsibility",
        name="Chain of Responsibility",
        category=PatternCategory.BEHAVIORAL,
        intent="Pass a request along a chain of handlers until one of them handles it.",
        intent_es="Pasa una petición a lo largo de una cadena de manejadores hasta que uno la atiende.",
        aliases=("chain", "cor"),
    )

    def run(self, emit: Emit) -> None:
        chain = build_chain()
        for ticket in (
            Ticket("Password reset", 1),
            Ticket("Broken invoice export", 3),
            Ticket("Refund over limit", 5),
            Ticket("Data center on fire", 9),
        ):
            emit(chain.handle(ticket))
