# lifesim

lifesim projects how a person's balance changes from year to year. You start
from an age and a starting capital, then add recurring expenses and incomes.
Each one is paid yearly, monthly or daily, starts at a given age and may end at
a later one. Balances are worked out one year at a time, and every age that has
been computed is kept in a balance history.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Interactive use

```
lifesim
```

The program first asks for your name, current age and starting capital. It then
shows a menu:

1. View current status
2. Add expense
3. View balance at specific age
4. Show balance history
5. Exit

When you add an expense you give its name, its amount per period, its
frequency (1 yearly, 2 monthly, 3 daily; any other answer means yearly), its
start age, and an optional end age. Leave the end age empty for an expense that
never ends.

An age or amount that cannot be read ends the program with an error message
and exit status 1. An unknown menu choice just shows the menu again, and the
program also stops when its input ends.

## Library use

```python
from lifesim.models import Expense, Frequency, Person
from lifesim.simulator import LifeSimulator

simulator = LifeSimulator(Person("Jane Smith", 30, 60000.0))
simulator.add_expense(Expense("Car Payment", 300.0, Frequency.MONTHLY, 30, 40))

print(simulator.calculate_balance_at_age(45))
print(sorted(simulator.balance_history.items()))
```

`Frequency.annualize(amount)` turns a per-period amount into a yearly one, with
12 months or 365 days to the year.

`LifeSimulator.calculate_balance_at_age(age)` steps forward one year at a time
from the person's current age, storing every intermediate balance in
`balance_history`. A negative age raises `ValueError`. For an age before the
current one that is not already known, the current balance is returned.

In the projection, an expense counts in each year from its start age up to, but
not including, its end age. An income counts in every year except those at or
after its end age; its start age does not hold it back in earlier years.

Other modules hold the logic behind the desktop views, with no drawing code:

- `lifesim.forms` holds the shared application state (`SharedState`, `AppTab`,
  `visible_tabs`), the `SetupForm`, `ExpenseForm` and `IncomeForm` entry forms,
  and `describe_entry` for listing lines.
- `lifesim.analytics` holds `analytics_rows` for the per-age table,
  `simulation_series` for the balance, expense and income charts, and
  `run_simulation`, which projects to age 100. Its yearly totals count an entry
  in its end age as well.
- `lifesim.settings` holds `Settings`, the display scale and `Theme` choice;
  the system theme is treated as dark.

## What it does not do

- There is no graphical window: the forms, analytics and settings modules keep
  state and compute figures, but nothing draws them.
- The interactive menu adds expenses only; incomes can be added through the
  library or `IncomeForm`.
- Nothing is saved: a session's person, entries and balances are lost when it
  ends.