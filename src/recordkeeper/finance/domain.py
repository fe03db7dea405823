"""Finance domain: transactions, accounts and the policies that apply one to the other."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Callable, Protocol

from recordkeeper.domain import ValueObject


def format_money(amount: Decimal) -> str:
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


@dataclass(frozen=True)
class Transaction(ValueObject):
    id: int
    date: datetime
    amount: Decimal
    category: str

    def __str__(self) -> str:
        return (
            f"Transaction(Id={self.id}, Date={self.date:%Y-%m-%d}, "
            f"Amount={format_money(self.amount)}, Category={self.category})"
        )


class PaymentChannel(str, Enum):
    BANK_TRANSFER = "bank_transfer"
    MOBILE_MONEY = "mobile_money"
    CRYPTO_WALLET = "crypto_wallet"


class TransactionProcessor(Protocol):
    def process(self, transaction: Transaction) -> str:
        ...


class AccountKind(str, Enum):
    STANDARD = "standard"
    SAVINGS = "savings"


@dataclass
class Account:
    account_number: str
    balance: Decimal
    kind: AccountKind = AccountKind.STANDARD


@dataclass(frozen=True)
class TransactionOutcome(ValueObject):
    applied: bool
    balance: Decimal
    message: str


def _apply_standard(account: Account, transaction: Transaction) -> TransactionOutcome:
    account.balance -= transaction.amount
    return TransactionOutcome(
        applied=True,
        balance=account.balance,
        message=f"Transaction of {format_money(transaction.amount)} applied. New balance: {format_money(account.balance)}",
    )


def _apply_savings(account: Account, transaction: Transaction) -> TransactionOutcome:
    if transaction.amount > account.balance:
        return TransactionOutcome(applied=False, balance=account.balance, message="Insufficient funds")
    account.balance -= transaction.amount
    return TransactionOutcome(
        applied=True,
        balance=account.balance,
        message=f"Transaction of {format_money(transaction.amount)} applied. Updated balance: {format_money(account.balance)}",
    )


ACCOUNT_POLICIES: dict[AccountKind, Callable[[Account, Transaction], TransactionOutcome]] = {
    AccountKind.STANDARD: _apply_standard,
    AccountKind.SAVINGS: _apply_savings,
}


def apply_transaction(account: Account, transaction: Transaction) -> TransactionOutcome:
    """Debit account by the transaction amount using the policy for account.kind."""
    return ACCOUNT_POLICIES[account.kind](account, transaction)


def savings_account(account_number: str, initial_balance: Decimal) -> Account:
    return Account(account_number=account_number, balance=initial_balance, kind=AccountKind.SAVINGS)
