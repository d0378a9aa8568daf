"""Interactive text menu for building and projecting a life simulation."""

from __future__ import annotations

import argparse
import re
import sys
from typing import TextIO

from lifesim.models import Expense, Frequency, Person
from lifesim.simulator import LifeSimulator

_U32_MAX = 0xFFFFFFFF
_UNSIGNED = re.compile(r"\+?[0-9]+")
_FREQUENCY_CHOICES = {2: Frequency.MONTHLY, 3: Frequency.DAILY}


def _parse_unsigned(text: str) -> int | None:
    if not _UNSIGNED.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _U32_MAX else None


def _parse_age(text: str) -> int:
    value = _parse_unsigned(text)
    if value is None:
        raise ValueError("Invalid age")
    return value


def _parse_amount(text: str, message: str) -> float:
    if "_" in text or text != text.strip():
        raise ValueError(message)
    try:
        return float(text)
    except ValueError:
        raise ValueError(message) from None


class Cli:
    """Menu-driven session over a text input and output stream."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout

        self._say("Welcome to Life Simulator!")
        self._say("Let's create your character.")
        name = self._prompt("Enter your name: ")
        age = _parse_age(self._prompt("Enter your current age: "))
        income = _parse_amount(
            self._prompt("Enter your current annual income: "), "Invalid income"
        )
        self.simulator = LifeSimulator(Person(name, age, income))

    def run(self) -> None:
        """Show the menu until the user exits or input ends."""
        actions = {
            1: self._view_current_status,
            2: self._add_expense,
            3: self._view_balance_at_age,
            4: self._show_balance_history,
        }
        while True:
            self._say("\n--- Life Simulator Menu ---")
            self._say("1. View current status")
            self._say("2. Add expense")
            self._say("3. View balance at specific age")
            self._say("4. Show balance history")
            self._say("5. Exit")
            self._write("Choose an option: ")

            line = self._read_line()
            if line is None:
                break
            choice = _parse_unsigned(line.strip()) or 0
            if choice == 5:
                self._say("Thanks for using Life Simulator!")
                break
            action = actions.get(choice)
            if action is None:
                self._say("Invalid option. Please try again.")
            else:
                action()

    def _view_current_status(self) -> None:
        person = self.simulator.person
        self._say("\n--- Current Status ---")
        self._say(f"Name: {person.name}")
        self._say(f"Age: {person.age}")
        self._say(f"Current Income: ${person.capital:.2f}")
        self._say(f"Current Balance: ${person.current_balance():.2f}")
        self._say(f"Number of Expenses: {len(person.expenses)}")

    def _add_expense(self) -> None:
        self._say("\n--- Add Expense ---")
        name = self._prompt("Expense name: ")
        amount = _parse_amount(self._prompt("Amount per period: "), "Invalid amount")

        self._say("Select frequency:")
        self._say("1. Yearly")
        self._say("2. Monthly")
        self._say("3. Daily")
        choice = _parse_unsigned(self._prompt("Choose frequency: "))
        frequency = _FREQUENCY_CHOICES.get(choice, Frequency.YEARLY)

        start_age = _parse_age(self._prompt("Start age for this expense: "))
        end_text = self._prompt("End age for this expense (leave empty for ongoing): ")
        end_age = _parse_age(end_text) if end_text else None

        self.simulator.add_expense(Expense(name, amount, frequency, start_age, end_age))
        self._say("Expense added successfully!")

    def _view_balance_at_age(self) -> None:
        target_age = _parse_age(self._prompt("Enter age to view balance: "))
        balance = self.simulator.calculate_balance_at_age(target_age)
        self._say(f"Projected balance at age {target_age}: ${balance:.2f}")

    def _show_balance_history(self) -> None:
        history = self.simulator.balance_history
        if not history:
            self._say("No balance history available.")
            return
        self._say("\n--- Balance History ---")
        for age, balance in sorted(history.items()):
            self._say(f"Age {age}: ${balance:.2f}")

    def _say(self, text: str) -> None:
        self._out.write(text + "\n")

    def _write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def _read_line(self) -> str | None:
        line = self._in.readline()
        return line if line else None

    def _prompt(self, prompt: str) -> str:
        self._write(prompt)
        line = self._read_line()
        return line.strip() if line is not None else ""


def main(argv: list[str] | None = None) -> int:
    """Run the interactive life simulator on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="lifesim", description="Project a balance over a lifetime."
    )
    parser.parse_args(argv)
    try:
        Cli(sys.stdin, sys.stdout).run()
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())