"""Builder: construcción paso a paso de una pizza."""

from __future__ import annotations

from dataclasses import dataclass, field

from core.domain.models import PatternCategory, PatternInfo
from core.interfaces.demo import Emit
from patterns._base import DemoBase


@dataclass(frozen=True)
class Pizza:
    size: str
    crust: str
    toppings: tuple[str, ...] = ()
    extra_cheese: bool = False

    def __str__(self) -> str:
        toppings = ", ".join(self.toppings) if self.toppings else "no toppings"
        cheese = " + extra cheese" if self.extra_cheese else ""
        return f"{self.size} pizza, {self.crust} crust, {toppings}{cheese}"


@dataclass
class PizzaBuilder:
    _size: str | None = None
    _crust: str = "classic"
    _toppings: list[str] = field(default_factory=list)
    _extra_cheese: bool = False

    def size(self, size: str) -> PizzaBuilder:
        self._size = size
        return self

    def crust(self, crust: str) -> PizzaBuilder:
        self._crust = crust
        return self

    def topping(self, topping: str) -> PizzaBuilder:
        self._toppings.append(topping)
        return self

    def extra_cheese(self) -> PizzaBuilder:
        self._extra_cheese = True
        return self

    def build(self) -> Pizza:
        if not self._size:
            raise ValueError("a pizza needs a size before it can be built")
        return Pizza(self._size, self._crust, tuple(self._toppings), self._extra_cheese)


class PizzaDirector:
    """Conoce recetas; delega cada paso en el builder."""

    def margherita(self, builder: PizzaBuilder) -> Pizza:
        return builder.size("medium").crust("thin").topping("tomato").topping("basil").build()

    def four_cheese(self, builder: PizzaBuilder) -> Pizza:
        return builder.size("large").topping("mozzarella").topping("gorgonzola").extra_cheese().build()


class BuilderDemo(DemoBase):
    info = PatternInfo(
        slug="builder",
        name="Builder",
        category=PatternCategory.CREATIONAL,
        intent="Separate the construction of a complex object from its representation.",
        intent_es="Separa la construcción de un objeto complejo de su representación.",
    )

    def run(self, emit: Emit) -> None:
        director = PizzaDirector()
        emit(f"Margherita: {director.margherita(PizzaBuilder())}")
        emit(f"Four cheese: {director.four_cheese(PizzaBuilder())}")

        custom = PizzaBuilder().size("small").crust("stuffed").topping("mushrooms").build()
        emit(f"Custom: {custom}")

        try:
            PizzaBuilder().topping("ham").build()
        except ValueError as exc:
            emit(f"Incomplete builder: {exc}")
