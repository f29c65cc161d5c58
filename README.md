# menudrills

A set of small console programs, each driven by a numbered menu, meant as
practice material for basic data structures and object-oriented modelling.
Every program can also be used as a library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Commands

| Command                  | What it does                                                          |
|--------------------------|-----------------------------------------------------------------------|
| `menudrills-calculator`  | Choose an operation (+, -, *, /, %) and apply it to two integers, once |
| `menudrills-bank`        | Open saving, current and fixed-deposit accounts; deposit and withdraw  |
| `menudrills-stack`       | Push, pop and inspect a stack that holds at most 5 integers            |
| `menudrills-linked-list` | Insert, delete, look up and view items in a linked list                |
| `menudrills-students`    | Add, list, remove and search students by id                            |

Each command prints its menu and reads from standard input.
`menudrills-calculator` asks for a choice and two numbers, prints one result
and exits (choice `0` just says goodbye). The other commands keep showing
their menu until you enter `0` or input ends. `menudrills-bank` first asks
how many accounts of each kind it may hold.

## Library use

### `menudrills.calculator`

```python
from menudrills.calculator import addition, subtraction, multiplication, division, modulus

addition(2, 3)        # 5
subtraction(3, 7)     # 4 -- always the larger minus the smaller
multiplication(4, 5)  # 20
division(-7, 2)       # -3 -- truncated toward zero
modulus(-7, 2)        # -1 -- takes the sign of the first operand
```

`division` and `modulus` raise `ZeroDivisionError` when the divisor is 0.

### `menudrills.banking`

`BankAccount` is a dataclass with `number`, `holder` and `balance`, and
methods `deposit(amount)`, `withdraw(amount)` and `details()`. A withdrawal
only succeeds if the balance is strictly larger than the amount; otherwise it
raises `ValueError`. `SavingAccount` and `FixedDepositAccount` add
`calculate_interest()` (5.5 % once, or 5.5 % over 6 periods, respectively);
`CurrentAccount` earns no interest.

`Bank(capacity)` holds up to `capacity` accounts of each kind:

```python
from menudrills.banking import AccountKind, Bank

bank = Bank(2)
bank.open_account(AccountKind.SAVING, 1001, "Ada", 500.0)
bank.deposit(1001, 100.0)   # returns the accounts that were changed
bank.withdraw(1001, 50.0)
```

`open_account` raises `OverflowError` when that kind is full. `deposit` and
`withdraw` act on every account with the given number and return them; a
number that matches nothing gives an empty list.

### `menudrills.stack`

`Stack(size)` with `push`, `pop`, `is_empty`, `is_full` and `render`.
`push` on a full stack raises `OverflowError`; `pop` on an empty one raises
`IndexError`. `render()` lists items top first as `|item|` lines.

### `menudrills.linked_list`

`LinkedList` with `insert_at_start`, `insert_at_end`, `delete_at`, `get`
and `render`. It supports `len()` and iteration. `render()` gives
`1->2->3->NULL`. `delete_at(pos)` returns the removed value; position 0 (the
head) cannot be deleted this way, and any position outside the list raises
`IndexError`, as does `get` with an invalid position.

### `menudrills.students`

`Student` (a dataclass with `student_id` and `name`, plus `render()`) and
`StudentRegistry` with `add(student_id, name)`, `remove(student_id)` and
`find(student_id)`. Ids need not be unique: `remove` and `find` work on
every student with the id. `remove` raises `KeyError` if there is none.

## Limitations

Everything is kept in memory only: accounts, stack items, list items and
students are lost when a command exits, and nothing is read from or saved to
files.