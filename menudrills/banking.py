"""Bank accounts of three kinds and a menu-driven bank."""

from __future__ import annotations

import enum
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import ClassVar

_RULE = "\n--------------------------------------------------------\n"


def _money(value: float) -> str:
    return f"{value:g}"


@dataclass
class BankAccount:
    """An account with a number, a holder and a balance."""

    number: int = 0
    holder: str = ""
    balance: float = 0.0

    def deposit(self, amount: float) -> None:
        """Add ``amount`` to the balance."""
        self.balance += amount

    def withdraw(self, amount: float) -> None:
        """Take ``amount`` out; the balance must be strictly larger."""
        if self.balance > amount:
            self.balance -= amount
        else:
            raise ValueError("The value entered for withdraw is invalid")

    def details(self) -> str:
        """Return a printable summary of the account."""
        return (
            f"{_RULE}"
            f"The accountHolderName : {self.holder}\n"
            f"The accountNumber : {self.number}\n"
            f"Balance in the account : {_money(self.balance)}\n"
            f"{_RULE}"
        )


@dataclass
class SavingAccount(BankAccount):
    """Savings account that earns simple interest once per call."""

    interest: ClassVar[float] = 5.5

    def calculate_interest(self) -> None:
        """Credit one period of interest to the balance."""
        self.balance += self.balance * self.interest / 100


@dataclass
class CurrentAccount(BankAccount):
    """Current account without interest."""


@dataclass
class FixedDepositAccount(BankAccount):
    """Fixed deposit that earns interest over a fixed number of periods."""

    interest: ClassVar[float] = 5.5
    time: ClassVar[float] = 6.0

    def calculate_interest(self) -> None:
        """Credit the interest for the whole term to the balance."""
        self.balance += self.balance * self.interest / 100 * self.time


class AccountKind(enum.Enum):
    SAVING = 1
    CURRENT = 2
    FIXED_DEPOSIT = 3


_ACCOUNT_TYPES: dict[AccountKind, type[BankAccount]] = {
    AccountKind.SAVING: SavingAccount,
    AccountKind.CURRENT: CurrentAccount,
    AccountKind.FIXED_DEPOSIT: FixedDepositAccount,
}


class Bank:
    """Holds up to ``capacity`` accounts of each kind."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._accounts: dict[AccountKind, list[BankAccount]] = {
            kind: [] for kind in AccountKind
        }

    def __iter__(self) -> Iterator[BankAccount]:
        for kind in AccountKind:
            yield from self._accounts[kind]

    def __len__(self) -> int:
        return sum(len(accounts) for accounts in self._accounts.values())

    def open_account(
        self, kind: AccountKind | int, number: int, holder: str, balance: float
    ) -> BankAccount:
        """Create an account of ``kind`` and return it."""
        kind = AccountKind(kind)
        accounts = self._accounts[kind]
        if len(accounts) >= self.capacity:
            raise OverflowError(f"no room for another {kind.name.lower()} account")
        account = _ACCOUNT_TYPES[kind](number, holder, balance)
        accounts.append(account)
        return account

    def _matching(self, number: int) -> list[BankAccount]:
        return [account for account in self if account.number == number]

    def deposit(self, number: int, amount: float) -> list[BankAccount]:
        """Deposit into every account with ``number``; return those accounts."""
        matches = self._matching(number)
        for account in matches:
            account.deposit(amount)
        return matches

    def withdraw(self, number: int, amount: float) -> list[BankAccount]:
        """Withdraw from every account with ``number``; return those accounts."""
        matches = self._matching(number)
        for account in matches:
            account.withdraw(amount)
        return matches


_MENU = (
    "1.Press for Creating Saving account....",
    "2.Press for Creating  Current account....",
    "3.Press for Creating Fixed Deposit account....",
    "4.Press for Depositing ....",
    "5.Press for Withdrawing ....",
    "0.Press for exiting the program",
)


def _print_balances(bank: Bank) -> None:
    for account in bank:
        print(f"Updated Balance :{_money(account.balance)}")


def _run_choice(bank: Bank, choice: int) -> None:
    if choice in (1, 2, 3):
        holder = input("Enter accountholdername : \n")
        number = int(input("Enter the accountNumber : \n"))
        balance = float(input("Enter the balance : \n"))
        bank.open_account(AccountKind(choice), number, holder, balance)
    elif choice in (4, 5):
        number = int(input("Enter the accountNumber : \n"))
        verb = "deposit" if choice == 4 else "withdraw"
        amount = float(input(f"Enter the amount u want to {verb}:\n"))
        try:
            if choice == 4:
                bank.deposit(number, amount)
            else:
                bank.withdraw(number, amount)
        finally:
            _print_balances(bank)
    elif choice == 0:
        print("Thank you for visiting again...............")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive bank until the user chooses 0."""
    try:
        bank = Bank(int(input("Enter the size : ")))
    except (ValueError, EOFError):
        print("Invalid size", file=sys.stderr)
        return 1

    while True:
        print(_RULE, end="")
        for line in _MENU:
            print(line)
        print(_RULE, end="")
        try:
            choice = int(input("Enter the choice : \n"))
        except EOFError:
            return 0
        except ValueError:
            print("Invalid choice", file=sys.stderr)
            continue
        try:
            _run_choice(bank, choice)
        except EOFError:
            return 0
        except (ValueError, OverflowError) as exc:
            print(exc)
        if choice == 0:
            return 0


if __name__ == "__main__":
    sys.exit(main())