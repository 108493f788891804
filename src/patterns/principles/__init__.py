"""Principios de diseño (SOLID y afines)."""

from patterns.principles.delegation import DelegationDemo
from patterns.principles.programming_to_interface import ProgrammingToInterfaceDemo
from patterns.principles.single_responsibility import SingleResponsibilityDemo

__all__ = [
    "DelegationDemo",
    "ProgrammingToInterfaceDemo",
    "SingleResponsibilityDemo",
]
