"""Abstract Factory: familias de coche + especificación por región."""

from __future__ import annotations

from abc import ABC, abstractmethod

from core.domain.errors import UnknownVariantError
from core.domain.models import PatternCategory, PatternInfo
from core.interfaces.demo import Emit
from patterns._base import DemoBase


class Car(ABC):
    @abstractmethod
    def assemble(self) -> str: ...


class CarSpecification(ABC):
    @abstractmethod
    def display(self) -> str: ...


class Sedan(Car):
    def assemble(self) -> str:
        return "Assembling Sedan car."


class Hatchback(Car):
    def assemble(self) -> str:
        return "Assembling Hatchback car."


class NorthAmericaSpecification(CarSpecification):
    def display(self) -> str:
        return "North America Car Specification: Safety features compliant with local regulations."


class EuropeSpecification(CarSpecification):
    def display(self) -> str:
        return "Europe Car Specification: Fuel efficiency and emissions standards compliant with EU regulations."


class CarFactory(ABC):
    """Crea productos de una misma familia; nunca se mezclan regiones."""

    @abstractmethod
    def create_car(self) -> Car: ...

    @abstractmethod
    def create_car_specification(self) -> CarSpecification: ...


class NorthAmericaCarFactory(CarFactory):
    def create_car(self) -> Car:
        return Sedan()

    def create_car_specification(self) -> CarSpecification:
        return NorthAmericaSpecification()


class EuropeCarFactory(CarFactory):
    def create_car(self) -> Car:
        return Hatchback()

    def create_car_specification(self) -> CarSpecification:
        return EuropeSpecification()


_REGIONS: dict[str, type[CarFactory]] = {
    "north-america": NorthAmericaCarFactory,
    "europe": EuropeCarFactory,
}


def factory_for_region(region: str) -> CarFactory:
    try:
        return _REGIONS[region.strip().lower().replace("_", "-")]()
    except KeyError:
        raise UnknownVariantError(region, sorted(_REGIONS)) from None


class AbstractFactoryDemo(DemoBase):
    info = PatternInfo(
        slug="abstract-factory",
        name="Abstract Factory",
        category=PatternCategory.CREATIONAL,
        intent="Provide an interface for creating families of related objects without specifying their concrete classes.",
        intent_es="Proporciona una interfaz para crear familias de objetos relacionados sin especificar sus clases concretas.",
        aliases=("kit",),
        challenge=True,
    )

    def run(self, emit: Emit) -> None:
        for region in ("north-america", "europe"):
            factory = factory_for_region(region)
            emit(f"[{region}]")
            emit(factory.create_car().assemble())
            emit(factory.create_car_specification().display())
