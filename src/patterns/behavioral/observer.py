"""Observer: estación meteorológica que notifica a sus pantallas."""

from __future__ import annotations

from typing import Protocol

from core.domain.models import PatternCategory, PatternInfo
from core.interfaces.demo import Emit
from patterns._base import DemoBase


class Observer(Protocol):
    def update(self, temperature: float) -> None: ...


class WeatherStation:
    def __init__(self) -> None:
        self._observers: list[Observer] = []
        self.temperature: float | None = None

    def attach(self, observer: Observer) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def detach(self, observer: Observer) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def set_temperature(self, temperature: float) -> None:
        self.temperature = temperature
        self.notify()

    def notify(self) -> None:
        if self.temperature is None:
            return
        for observer in list(self._observers):
            observer.update(self.temperature)


class PhoneDisplay:
    def __init__(self, emit: Emit) -> None:
        self._emit = emit

    def update(self, temperature: float) -> None:
        self._emit(f"Phone display: {temperature:.1f} C")


class TVDisplay:
    def __init__(self, emit: Emit) -> None:
        self._emit = emit

    def update(self, temperature: float) -> None:
        self._emit(f"TV display: {temperature:.1f} C")


class ObserverDemo(DemoBase):
    info = PatternInfo(
        slug="observer",
        name="Observer",
        category=PatternCategory.BEHAVIORAL,
        intent="Define a one-to-many dependency so that when one object changes state, all its dependents are notified.",
        intent_es="Define una dependencia uno-a-muchos para que al cambiar un objeto se notifique a sus dependientes.",
        aliases=("publish-subscribe", "pub-sub"),
    )

    def run(self, emit: Emit) -> None:
        station = WeatherStation()
        phone, tv = PhoneDisplay(emit), TVDisplay(emit)
        station.attach(phone)
        station.attach(tv)
        station.set_temperature(25.0)

        station.detach(tv)
        emit("TV display detached")
        station.set_temperature(30.5)
