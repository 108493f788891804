"""State: semáforo cuyo comportamiento depende de su estado actual."""

from __future__ import annotations

from abc import ABC, abstractmethod

from core.domain.models import PatternCategory, PatternInfo
from core.interfaces.demo import Emit
from patterns._base import DemoBase


class LightState(ABC):
    name: str
    action: str

    @abstractmethod
    def next(self) -> LightState: ...


class RedState(LightState):
    name, action = "Red", "Stop"

    def next(self) -> LightState:
        return GreenState()


class GreenState(LightState):
    name, action = "Green", "Go"

    def next(self) -> LightState:
        return YellowState()


class YellowState(LightState):
    name, action = "Yellow", "Slow down"

    def next(self) -> LightState:
        return RedState()


class TrafficLight:
    def __init__(self, state: LightState | None = None) -> None:
        self.state = state or RedState()

    def change(self) -> str:
        previous = self.state
        self.state = previous.next()
        return f"{previous.name} -> {self.state.name}: {self.state.action}"


class StateDemo(DemoBase):
    info = PatternInfo(
        slug="state",
        name="State",
        category=PatternCategory.BEHAVIORAL,
        intent="Allow an object to alter its behavior when its internal state changes.",
        intent_es="Permite que un objeto altere su comportamiento cuando cambia su estado interno.",
        aliases=("traffic-light",),
    )

    def run(self, emit: Emit) -> None:
        light = TrafficLight()
        emit(f"Initial: {light.state.name} ({light.state.action})")
        for _ in range(4):
            emit(light.change())
