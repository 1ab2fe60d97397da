"""Blocks of transactions with proof-of-work mining."""

from __future__ import annotations

import time
from collections.abc import Iterable

from hellocoin.transaction import Transaction, format_amount, sha256_hex


class Block:
    """A block holding a copy of its transactions and linked to its predecessor."""

    def __init__(
        self,
        index: int,
        previous_hash: str,
        transactions: Iterable[Transaction],
        timestamp: int | None = None,
    ) -> None:
        self.index = index
        self.previous_hash = previous_hash
        self.transactions: list[Transaction] = list(transactions)
        self.timestamp = int(time.time()) if timestamp is None else timestamp
        self.nonce = 0
        self.hash = self.calculate_hash()

    def calculate_hash(self) -> str:
        """Hash the header fields and every transaction's summary."""
        parts = [str(self.index), self.previous_hash, str(self.timestamp), str(self.nonce)]
        parts.extend(
            f"{tx.sender}{tx.recipient}{format_amount(tx.amount)}{tx.timestamp}"
            for tx in self.transactions
        )
        return sha256_hex("".join(parts))

    def mine_block(self, difficulty: int) -> str:
        """Raise the nonce until the hash starts with ``difficulty`` zeros."""
        if difficulty < 0:
            raise ValueError(f"difficulty must not be negative, got {difficulty}")
        target = "0" * difficulty
        while not self.hash.startswith(target):
            self.nonce += 1
            self.hash = self.calculate_hash()
        return self.hash

    def __repr__(self) -> str:
        return f"Block(index={self.index}, hash={self.hash[:12]}..., nonce={self.nonce})"