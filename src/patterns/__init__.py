"""Demos del catálogo (implementaciones concretas de `PatternDemo`).

Por qué un paquete por categoría:
- Agrupa las demos como el curso: creacionales, estructurales, de
  comportamiento y principios de diseño.
- Cada módulo es independiente; ninguna demo importa otra.
"""

from patterns.behavioral import (
    ChainOfResponsibilityDemo,
    CommandDemo,
    InterpreterDemo,
    IteratorDemo,
    MediatorDemo,
    MementoDemo,
    ObserverDemo,
    StateDemo,
    StrategyDemo,
    TemplateMethodDemo,
    VisitorDemo,
)
from patterns.creational import (
    AbstractFactoryDemo,
    BuilderDemo,
    FactoryMethodDemo,
    PrototypeDemo,
    SingletonDemo,
)
from patterns.principles import (
    DelegationDemo,
    ProgrammingToInterfaceDemo,
    SingleResponsibilityDemo,
)
from patterns.structural import (
    AdapterDemo,
    BridgeDemo,
    CompositeDemo,
    DecoratorDemo,
    FlyweightDemo,
    ProxyDemo,
)

__all__ = [
    "AbstractFactoryDemo",
    "AdapterDemo",
    "BridgeDemo",
    "BuilderDemo",
    "ChainOfResponsibilityDemo",
    "CommandDemo",
    "CompositeDemo",
    "DecoratorDemo",
    "DelegationDemo",
    "FactoryMethodDemo",
    "FlyweightDemo",
    "InterpreterDemo",
    "IteratorDemo",
    "MediatorDemo",
    "MementoDemo",
    "ObserverDemo",
    "ProgrammingToInterfaceDemo",
    "PrototypeDemo",
    "ProxyDemo",
    "SingleResponsibilityDemo",
    "SingletonDemo",
    "StateDemo",
    "StrategyDemo",
    "TemplateMethodDemo",
    "VisitorDemo",
]
