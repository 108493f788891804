"""Prototype: clonar figuras preconfiguradas desde un registro."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field

from core.domain.errors import UnknownVariantError
from core.domain.models import PatternCategory, PatternInfo
from core.interfaces.demo import Emit
from patterns._base import DemoBase


@dataclass
class Shape:
    kind: str
    color: str
    x: int = 0
    y: int = 0
    tags: list[str] = field(default_factory=list)

    def clone(self) -> Shape:
        # Copia profunda: los clones no comparten `tags` con el prototipo.
        return copy.deepcopy(self)


class ShapeRegistry:
    def __init__(self) -> None:
        self._prototypes: dict[str, Shape] = {}

    def register(self, key: str, prototype: Shape) -> None:
        self._prototypes[key] = prototype

    def create(self, key: str) -> Shape:
        try:
            return self._prototypes[key].clone()
        except KeyError:
            raise UnknownVariantError(key, sorted(self._prototypes)) from None


class PrototypeDemo(DemoBase):
    info = PatternInfo(
        slug="prototype",
        name="Prototype",
        category=PatternCategory.CREATIONAL,
        intent="Create new objects by copying a prototypical instance.",
        intent_es="Crea nuevos objetos copiando una instancia prototípica.",
        aliases=("clone",),
    )

    def run(self, emit: Emit) -> None:
        registry = ShapeRegistry()
        registry.register("red-circle", Shape("circle", "red", tags=["round"]))
        registry.register("blue-square", Shape("square", "blue", tags=["angular"]))

        first = registry.create("red-circle")
        second = registry.create("red-circle")
        emit(f"Clones are equal: {first == second}")
        emit(f"Clones are the same object: {first is second}")

        second.x, second.y = 10, 20
        second.tags.append("moved")
        emit(f"First clone: {first}")
        emit(f"Second clone: {second}")
        emit(f"Fresh clone tags: {registry.create('red-circle').tags}")
