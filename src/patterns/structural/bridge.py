"""Bridge: mandos (abstracción) independientes de los dispositivos (implementación)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from core.domain.models import PatternCategory, PatternInfo
from core.interfaces.demo import Emit
from patterns._base import DemoBase


class Device(ABC):
    def __init__(self) -> None:
        self.enabled = False
        self.volume = 30

    @property
    @abstractmethod
    def name(self) -> str: ...

    def set_volume(self, volume: int) -> None:
        self.volume = max(0, min(100, volume))

    def status(self) -> str:
        power = "on" if self.enabled else "off"
        return f"{self.name} is {power}, volume {self.volume}"


class TV(Device):
    name = "TV"


class Radio(Device):
    name = "Radio"


class RemoteControl:
    def __init__(self, device: Device) -> None:
        self.device = device

    def toggle_power(self) -> None:
        self.device.enabled = not self.device.enabled

    def volume_up(self) -> None:
        self.device.set_volume(self.device.volume + 10)


class AdvancedRemoteControl(RemoteControl):
    def mute(self) -> None:
        self.device.set_volume(0)


class BridgeDemo(DemoBase):
    info = PatternInfo(
        slug="bridge",
        name="Bridge",
        category=PatternCategory.STRUCTURAL,
        intent="Decouple an abstraction from its implementation so that the two can vary independently.",
        intent_es="Desacopla una abstracción de su implementación para que ambas varíen de forma independiente.",
        aliases=("handle-body",),
    )

    def run(self, emit: Emit) -> None:
        basic = RemoteControl(TV())
        basic.toggle_power()
        basic.volume_up()
        emit(f"Basic remote: {basic.device.status()}")

        advanced = AdvancedRemoteControl(Radio())
        advanced.toggle_power()
        advanced.mute()
        emit(f"Advanced remote: {advanced.device.status()}")
