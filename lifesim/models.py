"""Core entities: a person, the expenses they pay and the incomes they earn."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class Frequency(enum.Enum):
    """How often an expense or income recurs."""

    YEARLY = "yearly"
    MONTHLY = "monthly"
    DAILY = "daily"

    def annualize(self, amount: float) -> float:
        """Return the total of ``amount`` over one year at this frequency."""
        return amount * _PERIODS_PER_YEAR[self]


_PERIODS_PER_YEAR = {
    Frequency.YEARLY: 1.0,
    Frequency.MONTHLY: 12.0,
    Frequency.DAILY: 365.0,
}


@dataclass
class Expense:
    """A recurring cost, paid from ``start_age`` until ``end_age`` (None means ongoing)."""

    name: str
    amount: float
    frequency: Frequency = Frequency.YEARLY
    start_age: int = 0
    end_age: int | None = None


@dataclass
class Income:
    """A recurring earning, received from ``start_age`` until ``end_age`` (None means ongoing)."""

    name: str
    amount: float
    frequency: Frequency = Frequency.YEARLY
    start_age: int = 0
    end_age: int | None = None


@dataclass
class Person:
    """A simulated person with a starting capital and a record of balances by age."""

    name: str
    age: int
    capital: float
    expenses: list[Expense] = field(default_factory=list)
    incomes: list[Income] = field(default_factory=list)
    balance_history: dict[int, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.balance_history[self.age] = self.capital

    def add_expense(self, expense: Expense) -> None:
        """Record another expense."""
        self.expenses.append(expense)

    def add_income(self, income: Income) -> None:
        """Record another income."""
        self.incomes.append(income)

    def current_balance(self) -> float:
        """Balance recorded for the current age, or 0.0 if none is known."""
        return self.balance_history.get(self.age, 0.0)