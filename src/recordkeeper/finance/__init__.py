from recordkeeper.finance.application import FinanceService
from recordkeeper.finance.domain import (
    Account,
    AccountKind,
    PaymentChannel,
    Transaction,
    TransactionOutcome,
    apply_transaction,
    savings_account,
)
from recordkeeper.finance.module import finance_module

__all__ = [
    "Account",
    "AccountKind",
    "FinanceService",
    "PaymentChannel",
    "Transaction",
    "TransactionOutcome",
    "apply_transaction",
    "finance_module",
    "savings_account",
]
