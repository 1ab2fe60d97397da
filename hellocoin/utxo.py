"""Unspent transaction outputs."""

from __future__ import annotations

from dataclasses import dataclass


def utxo_key(tx_id: str, output_index: int) -> str:
    """Return the pool key ``"<tx_id>:<output_index>"``."""
    return f"{tx_id}:{output_index}"


@dataclass
class UTXO:
    """An output of a transaction, owned by an address, possibly spent."""

    transaction_id: str
    output_index: int
    owner: str
    amount: float
    spent: bool = False

    def mark_as_spent(self) -> None:
        """Flag this output as spent."""
        self.spent = True

    @property
    def key(self) -> str:
        """The key under which this output is kept in a UTXO pool."""
        return utxo_key(self.transaction_id, self.output_index)