import pytest

from lifesim.models import Expense, Frequency, Income, Person
from lifesim.simulator import LifeSimulator


def _with_salary(name, age, salary):
    simulator = LifeSimulator(Person(name, age, 0.0))
    simulator.add_income(Income("Salary", salary, Frequency.YEARLY, age))
    return simulator


def test_basic_functionality():
    simulator = _with_salary("John Doe", 25, 50000.0)
    simulator.add_expense(Expense("Rent", 1000.0, Frequency.MONTHLY, 25, None))
    assert simulator.calculate_balance_at_age(30) == 250000.0 - 60000.0


def test_with_ending_expense():
    simulator = _with_salary("Jane Smith", 30, 60000.0)
    simulator.add_expense(Expense("Car Payment", 300.0, Frequency.MONTHLY, 30, 40))
    assert simulator.calculate_balance_at_age(45) == 900000.0 - 36000.0


def test_multiple_expenses():
    simulator = _with_salary("Bob Johnson", 20, 40000.0)
    simulator.add_expense(Expense("Rent", 800.0, Frequency.MONTHLY, 20, None))
    simulator.add_expense(Expense("Food", 300.0, Frequency.MONTHLY, 20, None))
    assert simulator.calculate_balance_at_age(25) == 200000.0 - 66000.0


def test_daily_expense():
    simulator = _with_salary("Alice Brown", 22, 45000.0)
    simulator.add_expense(Expense("Coffee", 5.0, Frequency.DAILY, 22, None))
    assert simulator.calculate_balance_at_age(23) == 45000.0 - 1825.0


def test_capital_is_only_the_starting_balance():
    simulator = LifeSimulator(Person("John Doe", 25, 50000.0))
    simulator.add_expense(Expense("Rent", 1000.0, Frequency.MONTHLY, 25, None))
    assert simulator.calculate_balance_at_age(30) == 50000.0 - 60000.0


def test_same_age_returns_current_balance():
    simulator = LifeSimulator(Person("A", 40, 1234.0))
    simulator.add_expense(Expense("Rent", 100.0, Frequency.YEARLY, 0))
    assert simulator.calculate_balance_at_age(40) == 1234.0


def test_intermediate_years_are_recorded():
    simulator = LifeSimulator(Person("A", 30, 1000.0))
    simulator.add_expense(Expense("Fee", 100.0, Frequency.YEARLY, 30))
    simulator.calculate_balance_at_age(33)
    assert simulator.balance_history == {30: 1000.0, 31: 900.0, 32: 800.0, 33: 700.0}


def test_cached_balance_is_reused():
    simulator = LifeSimulator(Person("A", 30, 1000.0))
    first = simulator.calculate_balance_at_age(35)
    simulator.add_expense(Expense("Fee", 100.0, Frequency.YEARLY, 30))
    assert simulator.calculate_balance_at_age(35) == first
    assert simulator.calculate_balance_at_age(34) == 1000.0


def test_expense_not_counted_before_start():
    simulator = LifeSimulator(Person("A", 20, 0.0))
    simulator.add_expense(Expense("Mortgage", 10.0, Frequency.YEARLY, 22))
    assert simulator.calculate_balance_at_age(22) == 0.0
    assert simulator.calculate_balance_at_age(24) == -20.0


def test_expense_stops_at_end_age():
    simulator = LifeSimulator(Person("A", 20, 0.0))
    simulator.add_expense(Expense("Loan", 10.0, Frequency.YEARLY, 20, 22))
    assert simulator.calculate_balance_at_age(25) == -20.0


def test_income_before_its_start_age_still_counts():
    simulator = LifeSimulator(Person("A", 25, 0.0))
    simulator.add_income(Income("Pension", 100.0, Frequency.YEARLY, 30))
    assert simulator.calculate_balance_at_age(27) == 200.0


def test_income_stops_at_end_age():
    simulator = LifeSimulator(Person("A", 25, 0.0))
    simulator.add_income(Income("Job", 100.0, Frequency.YEARLY, 25, 27))
    assert simulator.calculate_balance_at_age(30) == 200.0


def test_past_age_falls_back_to_current_balance():
    simulator = LifeSimulator(Person("A", 30, 500.0))
    assert simulator.calculate_balance_at_age(20) == 500.0
    assert simulator.balance_history[20] == 500.0


def test_current_age_tracks_person():
    simulator = LifeSimulator(Person("A", 30, 500.0))
    assert simulator.current_age == 30
    simulator.current_age = 31
    assert simulator.person.age == 31


def test_progression_restarts_from_new_current_age():
    simulator = LifeSimulator(Person("A", 30, 1000.0))
    simulator.add_expense(Expense("Fee", 100.0, Frequency.YEARLY, 30))
    assert simulator.calculate_balance_at_age(35) == 500.0
    simulator.current_age = 35
    assert simulator.calculate_balance_at_age(36) == 400.0


def test_unknown_current_age_projects_from_zero():
    simulator = LifeSimulator(Person("A", 30, 1000.0))
    simulator.current_age = 50
    assert simulator.calculate_balance_at_age(50) == 0.0


def test_negative_age_is_rejected():
    simulator = LifeSimulator(Person("A", 30, 1000.0))
    with pytest.raises(ValueError):
        simulator.calculate_balance_at_age(-1)