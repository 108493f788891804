"""Template Method: el esqueleto de preparar una bebida es fijo; los pasos varían."""

from __future__ import annotations

from abc import ABC, abstractmethod

from core.domain.models import PatternCategory, PatternInfo
from core.interfaces.demo import Emit
from patterns._base import DemoBase


class Beverage(ABC):
    def prepare(self) -> list[str]:
        """Método plantilla: el orden de los pasos no se sobrescribe."""

        steps = [self.boil_water(), self.brew(), self.pour_in_cup()]
        if self.wants_condiments():
            steps.append(self.add_condiments())
        return steps

    def boil_water(self) -> str:
        return "Boiling water"

    def pour_in_cup(self) -> str:
        return "Pouring into cup"

    @abstractmethod
    def brew(self) -> str: ...

    @abstractmethod
    def add_condiments(self) -> str: ...

    # hook
    def wants_condiments(self) -> bool:
        return True


class Tea(Beverage):
    def brew(self) -> str:
        return "Steeping the tea"

    def add_condiments(self) -> str:
        return "Adding lemon"


class Coffee(Beverage):
    def __init__(self, black: bool = False) -> None:
        self.black = black

    def brew(self) -> str:
        return "Dripping coffee through filter"

    def add_condiments(self) -> str:
        return "Adding sugar and milk"

    def wants_condiments(self) -> bool:
        return not self.black


class TemplateMethodDemo(DemoBase):
    info = PatternInfo(
        slug="template-method",
        name="Template Method",
        category=PatternCategory.BEHAVIORAL,
        intent="Define the skeleton of an algorithm, deferring some steps to subclasses.",
        intent_es="Define el esqueleto de un algoritmo y delega algunos pasos en las subclases.",
        aliases=("template",),
    )

    def run(self, emit: Emit) -> None:
        for label, beverage in (("Tea", Tea()), ("Coffee", Coffee()), ("Black coffee", Coffee(black=True))):
            emit(f"{label}: {' -> '.join(beverage.prepare())}")
