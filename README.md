# hellocoin

hellocoin is a small blockchain that you can read in one sitting. It covers these parts:

- transactions with inputs and outputs, identified by a SHA-256 hash (`hellocoin.transaction`),
- unspent transaction outputs, or UTXOs (`hellocoin.utxo`),
- blocks mined by proof of work (`hellocoin.block`),
- wallets with a random 64-character hex address (`hellocoin.wallet`),
- a chain that keeps a UTXO pool and can check that it is intact (`hellocoin.blockchain`).

It is meant for learning and experimenting. It is not secure, and it is not money.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running the demo

```
hellocoin
hellocoin --difficulty 2
```

`--difficulty` sets the number of leading zeros that a block hash must have. The default is 4, and the value must not be negative.

The demo does the following:

1. It creates a chain and two wallets, and prints their addresses.
2. It mines a block whose reward goes to the first wallet, and prints the block hash.
3. It builds a payment of 50 to the second wallet with 45 change. The payment's input is the reward transaction.
4. It mines a second block.
5. It prints each wallet's balance and its unspent outputs.
6. It reports whether the chain is valid.

A mining reward is recorded in its block, but it is **not** added to the UTXO pool. The payment in step 3 therefore names an output the pool does not know. It is rejected with the warning `Invalid input UTXO: ...`, and both balances come out as 0. The chain is still reported as valid.

## Using the library

To give an address spendable funds, put a UTXO into the pool yourself:

```python
from hellocoin.blockchain import Blockchain
from hellocoin.transaction import Transaction
from hellocoin.utxo import UTXO
from hellocoin.wallet import Wallet

chain = Blockchain(difficulty=2, mining_reward=100.0)
alice, bob = Wallet(), Wallet()

chain.add_utxo(UTXO("funding", 0, alice.public_key, 100.0))

tx = Transaction(alice.public_key, bob.public_key, 50.0)
tx.add_input("funding", 0)
tx.add_output(bob.public_key, 50.0)
tx.add_output(alice.public_key, 45.0)
accepted = chain.add_transaction(tx)   # True

block = chain.mine_pending_transactions(alice.public_key)

print(chain.get_balance_of_address(bob.public_key))    # 50.0
print(chain.get_balance_of_address(alice.public_key))  # 45.0
print(chain.is_chain_valid())                          # True
```

`Transaction` and `Block` take an optional `timestamp` argument, given in whole seconds. If you leave it out, the current time is used. Passing a fixed value makes ids and hashes reproducible.

### Transactions

A transaction's id is the SHA-256 of these fields, joined together:

- the sender,
- the recipient,
- the amount,
- the timestamp,
- its inputs,
- its outputs.

Amounts are written with six significant digits (`format_amount`). The id is computed when the transaction is created. After adding inputs or outputs, call `calculate_transaction_id()` to refresh it.

### Validation rules

`Blockchain.validate_transaction` accepts a transaction only if all of these hold:

- every input refers to a UTXO in the pool,
- none of those UTXOs has been spent,
- every one of them belongs to the sender,
- the inputs add up to at least the outputs.

A rejected transaction is logged as a warning on the `hellocoin.blockchain` logger, and `add_transaction` returns `False`. When a transaction is accepted, it is queued as pending. Its inputs are marked as spent, and each output becomes a new UTXO keyed `"<transaction id>:<output index>"`.

`get_utxos_for_address` returns an address's unspent outputs, ordered by key. `get_balance_of_address` returns their sum.

### Mining

`mine_pending_transactions` does the following:

1. It appends a reward transaction from `"system"` to the miner.
2. It puts all pending transactions into a new block linked to the last one.
3. It mines that block and clears the pending list.
4. It returns the new block.

A block's hash is the SHA-256 of these fields:

- its index,
- the previous block's hash,
- its timestamp,
- its nonce,
- for each transaction, the sender, recipient, amount and timestamp.

`Block.mine_block(difficulty)` raises the nonce until the hash begins with `difficulty` zeros. A negative difficulty raises `ValueError`.

`is_chain_valid` checks two things for every block after the first:

- its stored hash still matches its contents,
- it points to its predecessor's hash.

## What it does not do

- There is no network, peer-to-peer exchange or consensus between nodes. The chain lives in one process.
- Nothing is stored. The chain and the pool disappear when the program ends.
- Transactions are not signed. A wallet's address is a random hex string, not a key pair, and ownership is checked only by comparing addresses.
- A `Wallet`'s own `balance` and `transaction_history` are kept by hand through `update_balance` and `add_transaction`. They are not linked to the chain.