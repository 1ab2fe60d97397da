"""A proof-of-work chain with a UTXO pool."""

from __future__ import annotations

import logging
from itertools import pairwise

from hellocoin.block import Block
from hellocoin.transaction import Transaction
from hellocoin.utxo import UTXO, utxo_key

logger = logging.getLogger(__name__)


class Blockchain:
    """A chain of blocks, pending transactions and a pool of outputs."""

    def __init__(self, difficulty: int = 4, mining_reward: float = 100.0) -> None:
        self.difficulty = difficulty
        self.mining_reward = mining_reward
        self.chain: list[Block] = [Block(0, "0", [])]
        self.pending_transactions: list[Transaction] = []
        self.utxo_pool: dict[str, UTXO] = {}

    def add_transaction(self, transaction: Transaction) -> bool:
        """Queue a valid transaction and update the pool; return whether it was accepted."""
        if not self.validate_transaction(transaction):
            return False
        self.pending_transactions.append(transaction)
        for tx_id, output_index in transaction.inputs:
            self.spend_utxo(tx_id, output_index)
        for index, (recipient, amount) in enumerate(transaction.outputs):
            self.add_utxo(UTXO(transaction.transaction_id, index, recipient, amount))
        return True

    def mine_pending_transactions(self, miner_address: str) -> Block:
        """Mine the pending transactions plus a reward into a new block."""
        reward = Transaction("system", miner_address, self.mining_reward)
        reward.add_output(miner_address, self.mining_reward)
        self.pending_transactions.append(reward)

        block = Block(len(self.chain), self.chain[-1].hash, self.pending_transactions)
        block.mine_block(self.difficulty)
        self.chain.append(block)
        self.pending_transactions.clear()
        return block

    def get_balance_of_address(self, address: str) -> float:
        """Sum the unspent outputs owned by ``address``."""
        return sum((utxo.amount for utxo in self.get_utxos_for_address(address)), 0.0)

    def is_chain_valid(self) -> bool:
        """Check every block's hash and its link to the previous block."""
        return all(
            current.hash == current.calculate_hash()
            and current.previous_hash == previous.hash
            for previous, current in pairwise(self.chain)
        )

    def add_utxo(self, utxo: UTXO) -> None:
        """Put an output into the pool, replacing one with the same key."""
        self.utxo_pool[utxo.key] = utxo

    def spend_utxo(self, tx_id: str, output_index: int) -> None:
        """Mark an output as spent; unknown outputs are ignored."""
        utxo = self.utxo_pool.get(utxo_key(tx_id, output_index))
        if utxo is not None:
            utxo.mark_as_spent()

    def get_utxos_for_address(self, address: str) -> list[UTXO]:
        """Return the unspent outputs owned by ``address``, ordered by key."""
        return [
            utxo
            for _, utxo in sorted(self.utxo_pool.items())
            if utxo.owner == address and not utxo.spent
        ]

    def validate_transaction(self, transaction: Transaction) -> bool:
        """Check inputs exist, are unspent, belong to the sender and cover the outputs."""
        input_sum = 0.0
        for tx_id, output_index in transaction.inputs:
            key = utxo_key(tx_id, output_index)
            utxo = self.utxo_pool.get(key)
            if utxo is None:
                logger.warning("Invalid input UTXO: %s", key)
                return False
            if utxo.spent:
                logger.warning("UTXO already spent: %s", key)
                return False
            if utxo.owner != transaction.sender:
                logger.warning("UTXO owner mismatch")
                return False
            input_sum += utxo.amount

        output_sum = sum((amount for _, amount in transaction.outputs), 0.0)
        if input_sum < output_sum:
            logger.warning("Insufficient funds")
            return False
        return True