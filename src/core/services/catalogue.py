"""Catálogo de demos: registro, búsqueda por alias y construcción.

La CLI, el runner y los exportadores preguntan aquí qué demos existen;
ninguno importa clases concretas de `patterns`.
"""

from __future__ import annotations

import difflib
import logging

from core.config import AppSettings
from core.domain.errors import UnknownPatternError
from core.domain.models import PatternCategory, PatternInfo
from core.interfaces.demo import PatternDemo
from patterns import (
    AbstractFactoryDemo,
    AdapterDemo,
    BridgeDemo,
    BuilderDemo,
    ChainOfResponsibilityDemo,
    CommandDemo,
    CompositeDemo,
    DecoratorDemo,
    DelegationDemo,
    FactoryMethodDemo,
    FlyweightDemo,
    InterpreterDemo,
    IteratorDemo,
    MediatorDemo,
    MementoDemo,
    ObserverDemo,
    ProgrammingToInterfaceDemo,
    PrototypeDemo,
    ProxyDemo,
    SingleResponsibilityDemo,
    SingletonDemo,
    StateDemo,
    StrategyDemo,
    TemplateMethodDemo,
    VisitorDemo,
)

logger = logging.getLogger(__name__)

_DEMOS: tuple[type[PatternDemo], ...] = (
    SingletonDemo,
    FactoryMethodDemo,
    AbstractFactoryDemo,
    BuilderDemo,
    PrototypeDemo,
    AdapterDemo,
    BridgeDemo,
    CompositeDemo,
    DecoratorDemo,
    FlyweightDemo,
    ProxyDemo,
    ObserverDemo,
    StrategyDemo,
    StateDemo,
    CommandDemo,
    ChainOfResponsibilityDemo,
    TemplateMethodDemo,
    InterpreterDemo,
    VisitorDemo,
    MediatorDemo,
    MementoDemo,
    IteratorDemo,
    SingleResponsibilityDemo,
    ProgrammingToInterfaceDemo,
    DelegationDemo,
)


def _normalize(key: str) -> str:
    return "-".join(key.strip().lower().replace("_", "-").split())


def _build_index(demos: tuple[type[PatternDemo], ...]) -> dict[str, type[PatternDemo]]:
    index: dict[str, type[PatternDemo]] = {}
    for demo in demos:
        index[demo.info.slug] = demo
    for demo in demos:
        for alias in demo.info.aliases:
            key = _normalize(alias)
            if key in index and index[key] is not demo:
                raise ValueError(f"alias {alias!r} of {demo.info.slug!r} collides with {index[key].info.slug!r}")
            index[key] = demo
    return index


_INDEX = _build_index(_DEMOS)


def demo_classes() -> tuple[type[PatternDemo], ...]:
    """Clases registradas, ordenadas por categoría y luego por orden de declaración."""

    return tuple(sorted(_DEMOS, key=lambda d: d.info.category.order()))


def list_infos(category: PatternCategory | None = None) -> list[PatternInfo]:
    return [d.info for d in demo_classes() if category is None or d.info.category is category]


def resolve_slug(key: str) -> str:
    """Resuelve slug, alias o variante con `_`/espacios al slug canónico."""

    demo = _INDEX.get(_normalize(key))
    if demo is None:
        suggestions = difflib.get_close_matches(_normalize(key), list(_INDEX), n=3, cutoff=0.6)
        raise UnknownPatternError(key, sorted({_INDEX[s].info.slug for s in suggestions}))
    return demo.info.slug


def get_info(key: str) -> PatternInfo:
    return _INDEX[resolve_slug(key)].info


def create_demo(key: str, settings: AppSettings | None = None) -> PatternDemo:
    slug = resolve_slug(key)
    logger.debug("Creating demo %s", slug)
    return _INDEX[slug](settings=settings)  # type: ignore[call-arg]
