"""Patrones estructurales."""

from patterns.structural.adapter import AdapterDemo
from patterns.structural.bridge import BridgeDemo
from patterns.structural.composite import CompositeDemo
from patterns.structural.decorator import DecoratorDemo
from patterns.structural.flyweight import FlyweightDemo
from patterns.structural.proxy import ProxyDemo

__all__ = [
    "AdapterDemo",
    "BridgeDemo",
    "CompositeDemo",
    "DecoratorDemo",
    "FlyweightDemo",
    "ProxyDemo",
]
