"""Finance: payment processor implementations, one per channel."""
from __future__ import annotations

from .domain import PaymentChannel, Transaction, TransactionProcessor, format_money


class BankTransferProcessor:
    def process(self, transaction: Transaction) -> str:
        return (
            f"[BankTransfer] Processing {format_money(transaction.amount)} for {transaction.category} "
            f"on {transaction.date:%Y-%m-%d} (Id: {transaction.id})."
        )


class MobileMoneyProcessor:
    def process(self, transaction: Transaction) -> str:
        return (
            f"[MobileMoney] {format_money(transaction.amount)} spent on {transaction.category} "
            f"(Id: {transaction.id}) via Mobile Money."
        )


class CryptoWalletProcessor:
    def process(self, transaction: Transaction) -> str:
        return (
            f"[CryptoWallet] {format_money(transaction.amount)} spent on {transaction.category} "
            f"(Id: {transaction.id}) via Crypto Wallet."
        )


class ProcessorTable:
    """Channel -> processor lookup."""

    def __init__(self) -> None:
        self._processors: dict[PaymentChannel, TransactionProcessor] = {
            PaymentChannel.BANK_TRANSFER: BankTransferProcessor(),
            PaymentChannel.MOBILE_MONEY: MobileMoneyProcessor(),
            PaymentChannel.CRYPTO_WALLET: CryptoWalletProcessor(),
        }

    def for_channel(self, channel: PaymentChannel) -> TransactionProcessor:
        return self._processors[channel]
