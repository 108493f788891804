"""Composite: árbol de ficheros y directorios tratado de forma uniforme."""

from __future__ import annotations

from abc import ABC, abstractmethod

from core.domain.models import PatternCategory, PatternInfo
from core.interfaces.demo import Emit
from patterns._base import DemoBase


class Node(ABC):
    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    def size(self) -> int: ...

    @abstractmethod
    def render(self, depth: int = 0) -> list[str]: ...


class File(Node):
    def __init__(self, name: str, size: int) -> None:
        super().__init__(name)
        self._size = size

    def size(self) -> int:
        return self._size

    def render(self, depth: int = 0) -> list[str]:
        return [f"{'  ' * depth}{self.name} ({self._size} B)"]


class Directory(Node):
    def __init__(self, name: str, children: list[Node] | None = None) -> None:
        super().__init__(name)
        self.children: list[Node] = list(children or [])

    def add(self, node: Node) -> Directory:
        self.children.append(node)
        return self

    def size(self) -> int:
        return sum(child.size() for child in self.children)

    def render(self, depth: int = 0) -> list[str]:
        lines = [f"{'  ' * depth}{self.name}/ ({self.size()} B)"]
        for child in self.children:
            lines.extend(child.render(depth + 1))
        return lines


class CompositeDemo(DemoBase):
    info = PatternInfo(
        slug="composite",
        name="Composite",
        category=PatternCategory.STRUCTURAL,
        intent="Compose objects into tree structures and let clients treat individual objects and compositions uniformly.",
        intent_es="Compone objetos en árboles y permite tratar igual a objetos individuales y composiciones.",
        aliases=("tree",),
    )

    def run(self, emit: Emit) -> None:
        root = Directory("project").add(File("README.md", 120)).add(
            Directory("src", [File("main.py", 300), Directory("utils", [File("helpers.py", 80)])])
        )
        for line in root.render():
            emit(line)
        emit(f"Total size: {root.size()} B")
