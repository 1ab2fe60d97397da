"""Simple wallets identified by a random hex address."""

from __future__ import annotations

import secrets

from hellocoin.transaction import Transaction


class Wallet:
    """A wallet with an address, a local balance and a transaction history."""

    def __init__(self, public_key: str | None = None) -> None:
        self.public_key = secrets.token_hex(32) if public_key is None else public_key
        self.balance = 0.0
        self.transaction_history: list[Transaction] = []

    def add_transaction(self, transaction: Transaction) -> None:
        """Record a transaction in the history."""
        self.transaction_history.append(transaction)

    def update_balance(self, amount: float) -> None:
        """Add ``amount`` (which may be negative) to the balance."""
        self.balance += amount