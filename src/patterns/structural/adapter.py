"""Adapter: cliente de analítica basado en dicts sobre una librería XML heredada."""

from __future__ import annotations

from typing import Protocol
from xml.sax.saxutils import escape

from core.domain.models import PatternCategory, PatternInfo
from core.interfaces.demo import Emit
from patterns._base import DemoBase


class AnalyticsClient(Protocol):
    def track(self, event: dict[str, object]) -> str: ...


class LegacyXmlAnalytics:
    """API heredada que no podemos modificar: solo acepta XML."""

    def submit_xml(self, payload: str) -> str:
        return f"Legacy analytics accepted {len(payload)} bytes: {payload}"


class XmlAnalyticsAdapter:
    def __init__(self, adaptee: LegacyXmlAnalytics) -> None:
        self._adaptee = adaptee

    def track(self, event: dict[str, object]) -> str:
        return self._adaptee.submit_xml(self.to_xml(event))

    @staticmethod
    def to_xml(event: dict[str, object]) -> str:
        fields = "".join(f"<{key}>{escape(str(value))}</{key}>" for key, value in sorted(event.items()))
        return f"<event>{fields}</event>"


class AdapterDemo(DemoBase):
    info = PatternInfo(
        slug="adapter",
        name="Adapter",
        category=PatternCategory.STRUCTURAL,
        intent="Convert the interface of a class into another interface clients expect.",
        intent_es="Convierte la interfaz de una clase en otra interfaz que los clientes esperan.",
        aliases=("wrapper",),
    )

    def run(self, emit: Emit) -> None:
        client: AnalyticsClient = XmlAnalyticsAdapter(LegacyXmlAnalytics())
        emit(client.track({"name": "checkout", "amount": 2500}))
        emit(client.track({"name": "search", "query": "fish & chips"}))
