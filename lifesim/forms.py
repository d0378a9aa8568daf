"""Form state behind the setup, expense and income screens, and the shared app state."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import ClassVar

from lifesim.models import Expense, Frequency, Income, Person
from lifesim.simulator import LifeSimulator

_U32_MAX = 0xFFFFFFFF


class AppTab(enum.Enum):
    """The screens of the application, valued by their tab label."""

    SETUP = "Setup"
    EXPENSES = "Expenses"
    INCOMES = "Incomes"
    SIMULATION = "Simulation"
    ANALYTICS = "Analytics"


@dataclass
class SharedState:
    """State shared between screens: the simulator, once created, and the open tab."""

    simulator: LifeSimulator | None = None
    current_tab: AppTab = AppTab.SETUP


def visible_tabs(state: SharedState) -> list[AppTab]:
    """Tabs to offer; Analytics appears only once there is balance history to show."""
    tabs = [AppTab.SETUP, AppTab.EXPENSES, AppTab.INCOMES, AppTab.SIMULATION]
    if state.simulator is not None and state.simulator.balance_history:
        tabs.append(AppTab.ANALYTICS)
    return tabs


def _parse_u32(text: str) -> int | None:
    digits = text[1:] if text.startswith("+") else text
    if not digits or not digits.isascii() or not digits.isdigit():
        return None
    value = int(digits)
    return value if value <= _U32_MAX else None


def _parse_float(text: str) -> float | None:
    if not text or not text.isascii() or "_" in text or text != text.strip():
        return None
    try:
        return float(text)
    except ValueError:
        return None


def describe_entry(index: int, entry: Expense | Income) -> str:
    """One listing line for an expense or income; ``index`` is the number shown."""
    end = "ongoing" if entry.end_age is None else str(entry.end_age)
    frequency = entry.frequency.name.capitalize()
    return (
        f"{index}. {entry.name}: {entry.amount:.2f} ({frequency}) "
        f"- Age {entry.start_age} to {end}"
    )


@dataclass
class SetupForm:
    """Text fields used to create the simulated person."""

    name: str = ""
    age: str = ""
    start_capital: str = ""

    def create_person(self, state: SharedState) -> bool:
        """Replace the state's simulator with a new person if the fields parse."""
        age = _parse_u32(self.age)
        capital = _parse_float(self.start_capital)
        if age is None or capital is None:
            return False
        state.simulator = LifeSimulator(Person(self.name, age, capital))
        return True

    def summary(self, state: SharedState) -> list[str]:
        """Lines describing the current person, or none if there is no person yet."""
        if state.simulator is None:
            return []
        person = state.simulator.person
        return [
            f"Current Person: {person.name}, Age: {person.age}, Capital: {person.capital:.2f}",
            f"Current Balance: {person.current_balance():.2f}",
        ]


@dataclass
class _EntryForm:
    """Text fields shared by the expense and income forms."""

    kind: ClassVar[str] = ""

    name: str = ""
    amount: str = ""
    frequency: Frequency = Frequency.YEARLY
    start_age: str = ""
    end_age: str = ""

    def _parsed(self) -> tuple[float, int, int | None] | None:
        amount = _parse_float(self.amount)
        start_age = _parse_u32(self.start_age)
        if amount is None or start_age is None:
            return None
        # An end age that does not parse is taken as ongoing.
        end_age = _parse_u32(self.end_age) if self.end_age else None
        return amount, start_age, end_age

    def _clear(self) -> None:
        self.name = ""
        self.amount = ""
        self.start_age = ""
        self.end_age = ""


@dataclass
class ExpenseForm(_EntryForm):
    """Fields for adding an expense to the simulated person."""

    def submit(self, state: SharedState) -> bool:
        """Add the expense if there is a person and the fields parse, then clear them."""
        simulator = state.simulator
        parsed = self._parsed()
        if simulator is None or parsed is None:
            return False
        amount, start_age, end_age = parsed
        simulator.add_expense(Expense(self.name, amount, self.frequency, start_age, end_age))
        self._clear()
        return True

    def listing(self, state: SharedState) -> list[str]:
        """Numbered descriptions of the person's expenses."""
        if state.simulator is None:
            return []
        return [
            describe_entry(number, expense)
            for number, expense in enumerate(state.simulator.person.expenses, start=1)
        ]


@dataclass
class IncomeForm(_EntryForm):
    """Fields for adding an income to the simulated person."""

    def submit(self, state: SharedState) -> bool:
        """Add the income if there is a person and the fields parse, then clear them."""
        simulator = state.simulator
        parsed = self._parsed()
        if simulator is None or parsed is None:
            return False
        amount, start_age, end_age = parsed
        simulator.add_income(Income(self.name, amount, self.frequency, start_age, end_age))
        self._clear()
        return True

    def listing(self, state: SharedState) -> list[str]:
        """Numbered descriptions of the person's incomes."""
        if state.simulator is None:
            return []
        return [
            describe_entry(number, income)
            for number, income in enumerate(state.simulator.person.incomes, start=1)
        ]