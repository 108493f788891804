"""Proxy: proxy virtual que carga la imagen real solo cuando se muestra."""

from __future__ import annotations

from typing import Protocol

from core.domain.models import PatternCategory, PatternInfo
from core.interfaces.demo import Emit
from patterns._base import DemoBase


class Image(Protocol):
    def display(self) -> str: ...


class RealImage:
    def __init__(self, filename: str) -> None:
        self.filename = filename

    def display(self) -> str:
        return f"Displaying {self.filename}"


class ImageProxy:
    def __init__(self, filename: str) -> None:
        self.filename = filename
        self._real: RealImage | None = None
        self.accesses = 0
        self.loads = 0

    @property
    def loaded(self) -> bool:
        return self._real is not None

    def display(self) -> str:
        self.accesses += 1
        if self._real is None:
            self._real = RealImage(self.filename)
            self.loads += 1
            return f"Loading {self.filename} from disk... {self._real.display()}"
        return f"{self._real.display()} (cached)"


class ProxyDemo(DemoBase):
    info = PatternInfo(
        slug="proxy",
        name="Proxy",
        category=PatternCategory.STRUCTURAL,
        intent="Provide a surrogate or placeholder for another object to control access to it.",
        intent_es="Proporciona un sustituto de otro objeto para controlar el acceso a él.",
        aliases=("surrogate",),
    )

    def run(self, emit: Emit) -> None:
        proxy = ImageProxy("holiday.png")
        image: Image = proxy
        emit(f"Proxy created, image loaded: {proxy.loaded}")
        emit(image.display())
        emit(image.display())
        emit(f"Accesses through proxy: {proxy.accesses}")
