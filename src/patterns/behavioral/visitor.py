"""Visitor: nuevas operaciones sobre figuras sin tocar sus clases."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from core.domain.models import PatternCategory, PatternInfo
from core.interfaces.demo import Emit
from patterns._base import DemoBase

T = TypeVar("T")


class Shape(ABC):
    @abstractmethod
    def accept(self, visitor: ShapeVisitor[T]) -> T: ...


class Circle(Shape):
    def __init__(self, radius: float) -> None:
        self.radius = radius

    def accept(self, visitor: ShapeVisitor[T]) -> T:
        return visitor.visit_circle(self)


class Rectangle(Shape):
    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height

    def accept(self, visitor: ShapeVisitor[T]) -> T:
        return visitor.visit_rectangle(self)


class ShapeVisitor(ABC, Generic[T]):
    @abstractmethod
    def visit_circle(self, circle: Circle) -> T: ...

    @abstractmethod
    def visit_rectangle(self, rectangle: Rectangle) -> T: ...


class AreaVisitor(ShapeVisitor[float]):
    def visit_circle(self, circle: Circle) -> float:
        return math.pi * circle.radius**2

    def visit_rectangle(self, rectangle: Rectangle) -> float:
        return rectangle.width * rectangle.height


class XmlExportVisitor(ShapeVisitor[str]):
    def visit_circle(self, circle: Circle) -> str:
        return f'<circle radius="{circle.radius}"/>'

    def visit_rectangle(self, rectangle: Rectangle) -> str:
        return f'<rectangle width="{rectangle.width}" height="{rectangle.height}"/>'


class VisitorDemo(DemoBase):
    info = PatternInfo(
        slug="visitor",
        name="Visitor",
        category=PatternCategory.BEHAVIORAL,
        intent="Represent an operation to be performed on elements of an object structure without changing their classes.",
        intent_es="Representa una operación sobre los elementos de una estructura sin cambiar sus clases.",
    )

    def run(self, emit: Emit) -> None:
        shapes: list[Shape] = [Circle(1.0), Rectangle(3.0, 4.0)]
        area, export = AreaVisitor(), XmlExportVisitor()
        for shape in shapes:
            emit(f"{shape.accept(export)} area={shape.accept(area):.2f}")
        emit(f"Total area: {sum(shape.accept(area) for shape in shapes):.2f}")
