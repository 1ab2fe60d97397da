import pytest

from hellocoin.block import Block
from hellocoin.transaction import Transaction


def _tx(amount=5.0):
    return Transaction("alice", "bob", amount, timestamp=1000)


def test_hash_is_computed_on_construction():
    block = Block(0, "0", [], timestamp=1000)
    assert block.hash == block.calculate_hash()
    assert block.nonce == 0
    assert len(block.hash) == 64


def test_hash_is_deterministic():
    a = Block(1, "prev", [_tx()], timestamp=1000)
    b = Block(1, "prev", [_tx()], timestamp=1000)
    assert a.hash == b.hash


def test_hash_depends_on_transactions():
    empty = Block(1, "prev", [], timestamp=1000)
    full = Block(1, "prev", [_tx()], timestamp=1000)
    other = Block(1, "prev", [_tx(6.0)], timestamp=1000)
    assert len({empty.hash, full.hash, other.hash}) == 3


def test_mine_block_meets_difficulty():
    block = Block(1, "prev", [_tx()], timestamp=1000)
    mined = block.mine_block(2)
    assert mined == block.hash
    assert block.hash.startswith("00")
    assert block.hash == block.calculate_hash()


def test_mine_block_with_zero_difficulty_keeps_nonce():
    block = Block(1, "prev", [], timestamp=1000)
    original = block.hash
    block.mine_block(0)
    assert block.nonce == 0
    assert block.hash == original


def test_negative_difficulty_is_rejected():
    block = Block(1, "prev", [], timestamp=1000)
    with pytest.raises(ValueError):
        block.mine_block(-1)


def test_transactions_are_copied():
    txs = [_tx()]
    block = Block(1, "prev", txs, timestamp=1000)
    txs.append(_tx(9.0))
    assert len(block.transactions) == 1


def test_tampering_changes_calculated_hash():
    block = Block(1, "prev", [_tx()], timestamp=1000)
    block.mine_block(1)
    block.transactions[0].amount = 500.0
    assert block.calculate_hash() != block.hash