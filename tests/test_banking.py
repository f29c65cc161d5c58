import io

import pytest

from menudrills.banking import (
    AccountKind,
    Bank,
    BankAccount,
    CurrentAccount,
    FixedDepositAccount,
    SavingAccount,
    main,
)


def test_default_account_is_empty():
    account = BankAccount()
    assert (account.number, account.holder, account.balance) == (0, "", 0.0)


def test_deposit_then_withdraw_round_trip():
    account = CurrentAccount(7, "Alice", 100.0)
    account.deposit(40.0)
    assert account.balance == pytest.approx(140.0)
    account.withdraw(40.0)
    assert account.balance == pytest.approx(100.0)


def test_withdraw_whole_balance_is_refused():
    account = CurrentAccount(7, "Alice", 100.0)
    with pytest.raises(ValueError, match="invalid"):
        account.withdraw(100.0)
    assert account.balance == 100.0


def test_saving_interest():
    account = SavingAccount(1, "Bob", 200.0)
    account.calculate_interest()
    assert account.balance == pytest.approx(211.0)


def test_fixed_deposit_interest():
    account = FixedDepositAccount(2, "Carol", 100.0)
    account.calculate_interest()
    assert account.balance == pytest.approx(133.0)


def test_details_contains_fields():
    text = SavingAccount(42, "Dana", 10.5).details()
    assert "The accountHolderName : Dana" in text
    assert "The accountNumber : 42" in text
    assert "Balance in the account : 10.5" in text


def test_open_account_creates_right_kind():
    bank = Bank(2)
    assert isinstance(bank.open_account(AccountKind.SAVING, 1, "A", 1.0), SavingAccount)
    assert isinstance(bank.open_account(2, 2, "B", 1.0), CurrentAccount)
    assert isinstance(bank.open_account(3, 3, "C", 1.0), FixedDepositAccount)
    assert len(bank) == 3


def test_open_account_respects_capacity():
    bank = Bank(1)
    bank.open_account(AccountKind.CURRENT, 1, "A", 1.0)
    with pytest.raises(OverflowError):
        bank.open_account(AccountKind.CURRENT, 2, "B", 1.0)
    bank.open_account(AccountKind.SAVING, 3, "C", 1.0)
    assert len(bank) == 2


def test_bank_deposit_affects_only_matching_accounts():
    bank = Bank(3)
    first = bank.open_account(AccountKind.SAVING, 1, "A", 10.0)
    second = bank.open_account(AccountKind.CURRENT, 2, "B", 10.0)
    matches = bank.deposit(1, 5.0)
    assert matches == [first]
    assert first.balance == pytest.approx(15.0)
    assert second.balance == pytest.approx(10.0)


def test_bank_deposit_unknown_number():
    bank = Bank(1)
    account = bank.open_account(AccountKind.SAVING, 1, "A", 10.0)
    assert bank.deposit(99, 5.0) == []
    assert account.balance == 10.0


def test_bank_withdraw_too_much_raises():
    bank = Bank(1)
    account = bank.open_account(AccountKind.FIXED_DEPOSIT, 5, "E", 10.0)
    with pytest.raises(ValueError):
        bank.withdraw(5, 20.0)
    assert account.balance == 10.0


def test_main_runs_session(monkeypatch, capsys):
    script = "5\n1\nAlice Smith\n7\n100\n4\n7\n50\n0\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(script))
    assert main() == 0
    out = capsys.readouterr().out
    assert "Updated Balance :" in out
    assert "Thank you for visiting again" in out


def test_main_rejects_bad_size(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("many\n"))
    assert main() == 1