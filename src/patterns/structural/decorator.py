"""Decorator: ingredientes que envuelven una hamburguesa base."""

from __future__ import annotations

from abc import ABC, abstractmethod

from core.domain.models import PatternCategory, PatternInfo
from core.interfaces.demo import Emit
from patterns._base import DemoBase


class Burger(ABC):
    @abstractmethod
    def description(self) -> str: ...

    @abstractmethod
    def cost(self) -> float: ...


class BasicBurger(Burger):
    def description(self) -> str:
        return "Basic burger"

    def cost(self) -> float:
        return 5.0


class BurgerDecorator(Burger):
    label = ""
    price = 0.0

    def __init__(self, burger: Burger) -> None:
        self._burger = burger

    def description(self) -> str:
        return f"{self._burger.description()}, {self.label}"

    def cost(self) -> float:
        return self._burger.cost() + self.price


class Cheese(BurgerDecorator):
    label = "cheese"
    price = 1.0


class Bacon(BurgerDecorator):
    label = "bacon"
    price = 2.0


class Avocado(BurgerDecorator):
    label = "avocado"
    price = 1.5


class DecoratorDemo(DemoBase):
    info = PatternInfo(
        slug="decorator",
        name="Decorator",
        category=PatternCategory.STRUCTURAL,
        intent="Attach additional responsibilities to an object dynamically.",
        intent_es="Añade responsabilidades adicionales a un objeto de forma dinámica.",
    )

    def run(self, emit: Emit) -> None:
        burger: Burger = BasicBurger()
        emit(f"{burger.description()}: {burger.cost():.2f}")
        for topping in (Cheese, Bacon, Avocado):
            burger = topping(burger)
            emit(f"{burger.description()}: {burger.cost():.2f}")
