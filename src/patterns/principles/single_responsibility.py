"""Principio de responsabilidad única.

`Employee` solo guarda datos; las reglas de promoción y el cálculo fiscal
viven en clases separadas, cada una con un único motivo para cambiar.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from core.config import AppSettings
from core.domain.models import PatternCategory, PatternInfo
from core.interfaces.demo import Emit
from patterns._base import DemoBase

PROMOTION_AFTER_YEARS = 3
INCOME_TAX_RATE = 0.10


@dataclass(frozen=True)
class Employee:
    employee_id: str
    name: str
    address: str
    date_of_joining: date
    monthly_salary: float = 0.0


def full_years_between(start: date, end: date) -> int:
    years = end.year - start.year
    if (end.month, end.day) < (start.month, start.day):
        years -= 1
    return max(years, 0)


class Promotion:
    def __init__(self, today: date | None = None) -> None:
        self.today = today or date.today()

    def is_promotion_due_this_year(self, employee: Employee) -> bool:
        return full_years_between(employee.date_of_joining, self.today) >= PROMOTION_AFTER_YEARS


class FinanceCalculation:
    def calc_income_tax_for_current_year(self, employee: Employee) -> float:
        return round(employee.monthly_salary * 12 * INCOME_TAX_RATE, 2)


class SingleResponsibilityDemo(DemoBase):
    info = PatternInfo(
        slug="single-responsibility",
        name="Single Responsibility Principle",
        category=PatternCategory.PRINCIPLE,
        intent="A class should have one, and only one, reason to change.",
        intent_es="Una clase debe tener un único motivo para cambiar.",
        aliases=("srp",),
    )

    def __init__(self, settings: AppSettings | None = None, today: date | None = None) -> None:
        super().__init__(settings)
        self._today = today

    def run(self, emit: Emit) -> None:
        employee = Employee("E123", "John Doe", "123 Street, City", date(2020, 2, 1), monthly_salary=250000.0)
        promotion = Promotion(self._today)
        finance = FinanceCalculation()

        emit(f"Employee: {employee.name} ({employee.employee_id}), joined {employee.date_of_joining.isoformat()}")
        emit(f"Is promotion due? {promotion.is_promotion_due_this_year(employee)}")
        emit(f"Income tax: {finance.calc_income_tax_for_current_year(employee)} xaf")
