"""Patrones creacionales."""

from patterns.creational.abstract_factory import AbstractFactoryDemo
from patterns.creational.builder import BuilderDemo
from patterns.creational.factory_method import FactoryMethodDemo
from patterns.creational.prototype import PrototypeDemo
from patterns.creational.singleton import SingletonDemo

__all__ = [
    "AbstractFactoryDemo",
    "BuilderDemo",
    "FactoryMethodDemo",
    "PrototypeDemo",
    "SingletonDemo",
]
