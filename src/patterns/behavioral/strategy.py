"""Strategy: el navegador cambia de algoritmo de ruta en tiempo de ejecución."""

from __future__ import annotations

from typing import Protocol

from core.domain.models import PatternCategory, PatternInfo
from core.interfaces.demo import Emit
from patterns._base import DemoBase


class RouteStrategy(Protocol):
    name: str

    def minutes(self, distance_km: float) -> int: ...


class CarRoute:
    name = "car"

    def minutes(self, distance_km: float) -> int:
        return round(distance_km / 50 * 60)


class WalkingRoute:
    name = "walking"

    def minutes(self, distance_km: float) -> int:
        return round(distance_km / 5 * 60)


class PublicTransportRoute:
    name = "public transport"

    def minutes(self, distance_km: float) -> int:
        # 10 minutos de espera media + trayecto a 30 km/h
        return 10 + round(distance_km / 30 * 60)


class Navigator:
    def __init__(self, strategy: RouteStrategy) -> None:
        self.strategy = strategy

    def set_strategy(self, strategy: RouteStrategy) -> None:
        self.strategy = strategy

    def build_route(self, origin: str, destination: str, distance_km: float) -> str:
        minutes = self.strategy.minutes(distance_km)
        return f"{origin} -> {destination} by {self.strategy.name}: {minutes} min"


class StrategyDemo(DemoBase):
    info = PatternInfo(
        slug="strategy",
        name="Strategy",
        category=PatternCategory.BEHAVIORAL,
        intent="Define a family of algorithms, encapsulate each one, and make them interchangeable.",
        intent_es="Define una familia de algoritmos, encapsula cada uno y los hace intercambiables.",
        aliases=("policy",),
    )

    def run(self, emit: Emit) -> None:
        navigator = Navigator(CarRoute())
        for strategy in (CarRoute(), WalkingRoute(), PublicTransportRoute()):
            navigator.set_strategy(strategy)
            emit(navigator.build_route("Douala", "Bonaberi", 10.0))
