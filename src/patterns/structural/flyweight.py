"""Flyweight: tipos de árbol compartidos entre miles de árboles."""

from __future__ import annotations

from dataclasses import dataclass

from core.domain.models import PatternCategory, PatternInfo
from core.interfaces.demo import Emit
from patterns._base import DemoBase


@dataclass(frozen=True)
class TreeType:
    """Estado intrínseco (compartido)."""

    name: str
    color: str
    texture: str


class TreeTypeFactory:
    def __init__(self) -> None:
        self._cache: dict[tuple[str, str, str], TreeType] = {}

    def get(self, name: str, color: str, texture: str) -> TreeType:
        key = (name, color, texture)
        if key not in self._cache:
            self._cache[key] = TreeType(name, color, texture)
        return self._cache[key]

    def __len__(self) -> int:
        return len(self._cache)


@dataclass(frozen=True)
class Tree:
    """Estado extrínseco (posición) + referencia al flyweight."""

    x: int
    y: int
    kind: TreeType


class Forest:
    def __init__(self, factory: TreeTypeFactory | None = None) -> None:
        self.factory = factory or TreeTypeFactory()
        self.trees: list[Tree] = []

    def plant(self, x: int, y: int, name: str, color: str, texture: str) -> Tree:
        tree = Tree(x, y, self.factory.get(name, color, texture))
        self.trees.append(tree)
        return tree


class FlyweightDemo(DemoBase):
    info = PatternInfo(
        slug="flyweight",
        name="Flyweight",
        category=PatternCategory.STRUCTURAL,
        intent="Use sharing to support large numbers of fine-grained objects efficiently.",
        intent_es="Usa compartición para soportar eficientemente un gran número de objetos pequeños.",
        aliases=("cache",),
    )

    species = (("oak", "green", "rough"), ("pine", "dark green", "needles"), ("birch", "white", "smooth"))

    def run(self, emit: Emit) -> None:
        forest = Forest()
        for i in range(1000):
            forest.plant(i % 97, i // 97, *self.species[i % len(self.species)])

        emit(f"Trees planted: {len(forest.trees)}")
        emit(f"Tree types created: {len(forest.factory)}")
        first, fourth = forest.trees[0], forest.trees[3]
        emit(f"Trees #0 and #3 share their type: {first.kind is fourth.kind}")
