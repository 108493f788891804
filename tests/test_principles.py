"""Tests de las demos de principios de diseño."""

from datetime import date

import pytest

from patterns.principles.delegation import DelegationDemo, PdfPrinter, Printer
from patterns.principles.programming_to_interface import Computer, Monitor, ProgrammingToInterfaceDemo
from patterns.principles.single_responsibility import (
    Employee,
    FinanceCalculation,
    Promotion,
    SingleResponsibilityDemo,
    full_years_between,
)


@pytest.mark.parametrize(
    ("start", "end", "years"),
    [
        (date(2020, 2, 1), date(2023, 1, 31), 2),
        (date(2020, 2, 1), date(2023, 2, 1), 3),
        (date(2020, 2, 29), date(2024, 2, 28), 3),
        (date(2025, 1, 1), date(2024, 1, 1), 0),
    ],
)
def test_full_years_between(start, end, years):
    assert full_years_between(start, end) == years


def test_promotion_after_three_full_years():
    employee = Employee("E1", "Ada", "Somewhere", date(2020, 2, 1))
    assert Promotion(today=date(2023, 2, 1)).is_promotion_due_this_year(employee)
    assert not Promotion(today=date(2023, 1, 31)).is_promotion_due_this_year(employee)


def test_income_tax_is_ten_percent_of_annual_salary():
    employee = Employee("E1", "Ada", "Somewhere", date(2020, 2, 1), monthly_salary=100000.0)
    assert FinanceCalculation().calc_income_tax_for_current_year(employee) == 120000.0


def test_single_responsibility_demo(settings, run_lines):
    lines = run_lines(SingleResponsibilityDemo(settings, today=date(2021, 6, 1)))
    assert lines == [
        "Employee: John Doe (E123), joined 2020-02-01",
        "Is promotion due? False",
        "Income tax: 300000.0 xaf",
    ]


def test_computer_depends_on_display_module():
    class FakeDisplay:
        def display(self):
            return "fake"

    assert Computer(FakeDisplay()).display() == "fake"
    assert Computer(Monitor()).display() == "Display through Monitor"


def test_programming_to_interface_demo(run_lines):
    assert run_lines(ProgrammingToInterfaceDemo()) == ["Display through Monitor", "Display through Projector"]


def test_printer_delegates():
    assert Printer(PdfPrinter()).print("a.txt") == "The Delegate: saving 'a.txt' as PDF."


def test_delegation_demo(run_lines):
    lines = run_lines(DelegationDemo())
    assert lines[0] == "The Delegate: printing 'report.txt'."
    assert lines[1].endswith("as PDF.")
