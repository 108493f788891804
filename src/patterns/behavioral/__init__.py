"""Patrones de comportamiento."""

from patterns.behavioral.chain_of_responsibility import ChainOfResponsibilityDemo
from patterns.behavioral.command import CommandDemo
from patterns.behavioral.interpreter import InterpreterDemo
from patterns.behavioral.iterator import IteratorDemo
from patterns.behavioral.mediator import MediatorDemo
from patterns.behavioral.memento import MementoDemo
from patterns.behavioral.observer import ObserverDemo
from patterns.behavioral.state import StateDemo
from patterns.behavioral.strategy import StrategyDemo
from patterns.behavioral.template_method import TemplateMethodDemo
from patterns.behavioral.visitor import VisitorDemo

__all__ = [
    "ChainOfResponsibilityDemo",
    "CommandDemo",
    "InterpreterDemo",
    "IteratorDemo",
    "MediatorDemo",
    "MementoDemo",
    "ObserverDemo",
    "StateDemo",
    "StrategyDemo",
    "TemplateMethodDemo",
    "VisitorDemo",
]
