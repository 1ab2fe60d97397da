"""Transactions with UTXO-style inputs and outputs."""

from __future__ import annotations

import hashlib
import time


def format_amount(value: float) -> str:
    """Render an amount the way it enters hashed data (six significant digits)."""
    return f"{value:g}"


def sha256_hex(text: str) -> str:
    """Return the lowercase hex SHA-256 digest of ``text``."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


class Transaction:
    """A transfer from ``sender`` to ``recipient``.

    Inputs are ``(transaction_id, output_index)`` pairs naming the UTXOs
    being spent; outputs are ``(recipient, amount)`` pairs. The id is
    computed on construction and only refreshed by
    :meth:`calculate_transaction_id`.
    """

    def __init__(
        self,
        sender: str,
        recipient: str,
        amount: float,
        timestamp: int | None = None,
    ) -> None:
        self.sender = sender
        self.recipient = recipient
        self.amount = amount
        self.timestamp = int(time.time()) if timestamp is None else timestamp
        self.inputs: list[tuple[str, int]] = []
        self.outputs: list[tuple[str, float]] = []
        self.transaction_id = ""
        self.calculate_transaction_id()

    def add_input(self, tx_id: str, output_index: int) -> None:
        """Reference an output of an earlier transaction as an input."""
        self.inputs.append((tx_id, output_index))

    def add_output(self, recipient: str, amount: float) -> None:
        """Add an output paying ``amount`` to ``recipient``."""
        self.outputs.append((recipient, amount))

    def calculate_transaction_id(self) -> str:
        """Recompute, store and return the transaction id."""
        parts = [
            self.sender,
            self.recipient,
            format_amount(self.amount),
            str(self.timestamp),
        ]
        parts.extend(f"{tx_id}{index}" for tx_id, index in self.inputs)
        parts.extend(f"{who}{format_amount(value)}" for who, value in self.outputs)
        self.transaction_id = sha256_hex("".join(parts))
        return self.transaction_id

    def __repr__(self) -> str:
        return (
            f"Transaction(id={self.transaction_id[:12]}..., sender={self.sender!r}, "
            f"recipient={self.recipient!r}, amount={self.amount!r})"
        )