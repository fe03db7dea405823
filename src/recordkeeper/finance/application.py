"""Finance application: process, apply and record transactions."""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import structlog
import typer

from recordkeeper.domain import KeyedRepository

from .domain import (
    Account,
    PaymentChannel,
    Transaction,
    TransactionOutcome,
    apply_transaction,
    savings_account,
)
from .infrastructure import ProcessorTable

logger = structlog.get_logger(__name__)


class FinanceService:
    def __init__(self, processors: ProcessorTable):
        self._processors = processors
        self._transactions: KeyedRepository[Transaction] = KeyedRepository(name="transactions")

    @property
    def transactions(self) -> list[Transaction]:
        return self._transactions.get_all()

    def process(self, channel: PaymentChannel, transaction: Transaction) -> None:
        typer.echo(self._processors.for_channel(channel).process(transaction))

    def apply(self, account: Account, transaction: Transaction) -> TransactionOutcome:
        outcome = apply_transaction(account, transaction)
        if not outcome.applied:
            logger.info("transaction_rejected", account=account.account_number, id=transaction.id)
        typer.echo(outcome.message)
        return outcome

    def record(self, transaction: Transaction) -> None:
        """Store transaction; raises DuplicateKeyError for a reused id."""
        self._transactions.add(transaction)

    def run(self) -> Account:
        account = savings_account("SA123456", Decimal("1000"))

        now = datetime.now()
        batch = [
            (PaymentChannel.MOBILE_MONEY, Transaction(1, now, Decimal("120.00"), "Groceries")),
            (PaymentChannel.BANK_TRANSFER, Transaction(2, now, Decimal("250.00"), "Utilities")),
            (PaymentChannel.CRYPTO_WALLET, Transaction(3, now, Decimal("90.00"), "Entertainment")),
        ]

        for channel, transaction in batch:
            self.process(channel, transaction)
        for _, transaction in batch:
            self.apply(account, transaction)
        for _, transaction in batch:
            self.record(transaction)

        typer.echo("All transactions recorded:")
        for transaction in self.transactions:
            typer.echo(f"\t{transaction}")
        return account
