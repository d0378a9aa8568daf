"""Derived figures for the simulation plot and the analytics table."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from lifesim.forms import SharedState
from lifesim.models import Expense, Income, Person
from lifesim.simulator import LifeSimulator

SIMULATION_TARGET_AGE = 100

Point = tuple[float, float]


@dataclass(frozen=True)
class AnalyticsRow:
    """One line of the analytics table: the yearly figures at a given age."""

    age: int
    balance: float
    total_expenses: float
    total_incomes: float
    net_change: float


@dataclass
class SimulationSeries:
    """The three plotted lines: balance, yearly expenses and yearly incomes by age."""

    BALANCE_LABEL: ClassVar[str] = "Balance over time"
    EXPENSES_LABEL: ClassVar[str] = "Total Expenses"
    INCOMES_LABEL: ClassVar[str] = "Total Income"

    balance: list[Point] = field(default_factory=list)
    expenses: list[Point] = field(default_factory=list)
    incomes: list[Point] = field(default_factory=list)


def _active(entry: Expense | Income, age: int) -> bool:
    # The end age is inclusive here, unlike in the balance projection.
    return entry.start_age <= age and (entry.end_age is None or entry.end_age >= age)


def yearly_totals(person: Person, age: int) -> tuple[float, float]:
    """Annualized expenses and incomes that are active at ``age``."""
    expenses = sum(
        (e.frequency.annualize(e.amount) for e in person.expenses if _active(e, age)),
        0.0,
    )
    incomes = sum(
        (i.frequency.annualize(i.amount) for i in person.incomes if _active(i, age)),
        0.0,
    )
    return expenses, incomes


def analytics_rows(simulator: LifeSimulator) -> list[AnalyticsRow]:
    """Rows for every age in the balance history, in age order."""
    person = simulator.person
    history = simulator.balance_history
    rows = []
    for age, balance in sorted(history.items()):
        expenses, incomes = yearly_totals(person, age)
        previous = history.get(age - 1, 0.0) if age > 0 else person.capital
        rows.append(AnalyticsRow(age, balance, expenses, incomes, balance - previous))
    return rows


def simulation_series(simulator: LifeSimulator) -> SimulationSeries:
    """Plot points for every age in the balance history, in age order."""
    person = simulator.person
    series = SimulationSeries()
    for age, balance in sorted(simulator.balance_history.items()):
        expenses, incomes = yearly_totals(person, age)
        x = float(age)
        series.balance.append((x, balance))
        series.expenses.append((x, expenses))
        series.incomes.append((x, incomes))
    return series


def run_simulation(state: SharedState) -> float | None:
    """Project the balance to age 100; None when no person has been created."""
    if state.simulator is None:
        return None
    return state.simulator.calculate_balance_at_age(SIMULATION_TARGET_AGE)