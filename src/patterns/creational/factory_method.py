"""Factory Method: vehículos y el challenge de métodos de pago.

Cada factoría concreta decide qué producto instanciar; el cliente
(`process_payment`) solo conoce la factoría abstracta y el contrato `Payment`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol

from core.domain.errors import UnknownVariantError
from core.domain.models import PatternCategory, PatternInfo
from core.interfaces.demo import Emit
from patterns._base import DemoBase


class Vehicle(Protocol):
    def drive(self) -> str: ...


class Car:
    def drive(self) -> str:
        return "Driving a car on four wheels."


class Bike:
    def drive(self) -> str:
        return "Riding a bike on two wheels."


class VehicleFactory(ABC):
    @abstractmethod
    def create_vehicle(self) -> Vehicle: ...

    def deliver(self) -> str:
        vehicle = self.create_vehicle()
        return f"{type(vehicle).__name__} delivered. {vehicle.drive()}"


class CarFactory(VehicleFactory):
    def create_vehicle(self) -> Vehicle:
        return Car()


class BikeFactory(VehicleFactory):
    def create_vehicle(self) -> Vehicle:
        return Bike()


# Challenge: métodos de pago (montos en xaf).


class Payment(Protocol):
    def process_payment(self, amount: float) -> str: ...


class CreditCardPayment:
    def process_payment(self, amount: float) -> str:
        return f"Processing credit card payment of {amount} xaf"


class PaypalPayment:
    def process_payment(self, amount: float) -> str:
        return f"Processing PayPal payment of {amount} xaf"


class CryptoPayment:
    def process_payment(self, amount: float) -> str:
        return f"Processing crypto payment of {amount} xaf in Bitcoin/Ethereum"


class MobileMoneyPayment:
    # MTN MoMo, Orange Money, ...
    def __init__(self, provider: str) -> None:
        self.provider = provider

    def process_payment(self, amount: float) -> str:
        return f"Processing mobile money payment via {self.provider} of {amount} xaf"


class PaymentFactory(ABC):
    @abstractmethod
    def create_payment(self) -> Payment: ...


class CreditCardPaymentFactory(PaymentFactory):
    def create_payment(self) -> Payment:
        return CreditCardPayment()


class PaypalPaymentFactory(PaymentFactory):
    def create_payment(self) -> Payment:
        return PaypalPayment()


class CryptoPaymentFactory(PaymentFactory):
    def create_payment(self) -> Payment:
        return CryptoPayment()


class MobileMoneyPaymentFactory(PaymentFactory):
    def __init__(self, provider: str) -> None:
        self.provider = provider

    def create_payment(self) -> Payment:
        return MobileMoneyPayment(self.provider)


_PAYMENT_FACTORIES = {
    "credit-card": CreditCardPaymentFactory,
    "paypal": PaypalPaymentFactory,
    "crypto": CryptoPaymentFactory,
}


def payment_factory_for(kind: str, provider: str | None = None) -> PaymentFactory:
    """Resuelve una factoría a partir de un string (p.ej. desde config o CLI)."""

    key = kind.strip().lower().replace("_", "-")
    if key == "mobile-money":
        return MobileMoneyPaymentFactory(provider or "MTN MoMo")
    try:
        return _PAYMENT_FACTORIES[key]()
    except KeyError:
        raise UnknownVariantError(kind, sorted([*_PAYMENT_FACTORIES, "mobile-money"])) from None


def process_payment(factory: PaymentFactory, amount: float) -> str:
    payment = factory.create_payment()
    return payment.process_payment(amount)


class FactoryMethodDemo(DemoBase):
    info = PatternInfo(
        slug="factory-method",
        name="Factory Method",
        category=PatternCategory.CREATIONAL,
        intent="Define an interface for creating an object, but let subclasses decide which class to instantiate.",
        intent_es="Define una interfaz para crear un objeto y deja que las subclases decidan qué clase instanciar.",
        aliases=("factory",),
        challenge=True,
    )

    def run(self, emit: Emit) -> None:
        for factory in (CarFactory(), BikeFactory()):
            emit(factory.deliver())

        emit("-- Payment challenge --")
        for factory, amount in (
            (CreditCardPaymentFactory(), 10000.0),
            (PaypalPaymentFactory(), 15000.0),
            (CryptoPaymentFactory(), 20000.0),
            (MobileMoneyPaymentFactory("MTN MoMo"), 5000.0),
            (MobileMoneyPaymentFactory("Orange Money"), 7000.0),
        ):
            emit(process_payment(factory, amount))

        try:
            payment_factory_for("cheque")
        except UnknownVariantError as exc:
            emit(f"Rejected: {exc}")
