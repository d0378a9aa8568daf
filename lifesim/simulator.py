"""Year-by-year projection of a person's balance."""

from __future__ import annotations

from lifesim.models import Expense, Income, Person


class LifeSimulator:
    """Projects the balance of one person across ages, caching every year it computes."""

    def __init__(self, person: Person) -> None:
        self.person = person

    def add_expense(self, expense: Expense) -> None:
        """Record an expense for the simulated person."""
        self.person.add_expense(expense)

    def add_income(self, income: Income) -> None:
        """Record an income for the simulated person."""
        self.person.add_income(income)

    def calculate_balance_at_age(self, target_age: int) -> float:
        """Return the balance at ``target_age``, computing and caching it if needed."""
        if target_age < 0:
            raise ValueError(f"age must not be negative: {target_age}")
        person = self.person
        if target_age == person.age:
            return person.current_balance()
        history = person.balance_history
        if target_age in history:
            return history[target_age]
        balance = self._project(target_age)
        history[target_age] = balance
        return balance

    @property
    def balance_history(self) -> dict[int, float]:
        """Known balances keyed by age."""
        return self.person.balance_history

    @property
    def current_age(self) -> int:
        """The simulated person's current age."""
        return self.person.age

    @current_age.setter
    def current_age(self, age: int) -> None:
        self.person.age = age

    def _project(self, target_age: int) -> float:
        person = self.person
        balance = person.current_balance()
        if target_age < person.age:
            # Past years are not reconstructed; fall back to the current balance.
            return person.balance_history.get(target_age, balance)
        for age in range(person.age, target_age):
            balance = self._advance_year(age, balance)
            person.balance_history[age + 1] = balance
        return balance

    def _advance_year(self, age: int, balance: float) -> float:
        expenses = sum(
            expense.frequency.annualize(expense.amount)
            for expense in self.person.expenses
            if _expense_applies(expense, age)
        )
        incomes = sum(
            income.frequency.annualize(income.amount)
            for income in self.person.incomes
            if _income_applies(income, age)
        )
        return balance - expenses + incomes


def _expense_applies(expense: Expense, age: int) -> bool:
    if age < expense.start_age:
        return False
    return expense.end_age is None or age < expense.end_age


def _income_applies(income: Income, age: int) -> bool:
    # The start age only gates the end check: an income counts in every year
    # except those at or past its end once it has started.
    if age >= income.start_age and income.end_age is not None:
        return age < income.end_age
    return True