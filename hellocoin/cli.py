"""Command that walks through mining and spending on a fresh chain."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from hellocoin.blockchain import Blockchain
from hellocoin.transaction import Transaction, format_amount
from hellocoin.wallet import Wallet


def run_demo(out: TextIO | None = None, difficulty: int = 4) -> Blockchain:
    """Run the demonstration, writing its report to ``out``; return the chain."""
    out = sys.stdout if out is None else out
    handler = logging.StreamHandler(out)
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger = logging.getLogger("hellocoin")
    package_logger.addHandler(handler)
    try:
        return _demo(out, difficulty)
    finally:
        package_logger.removeHandler(handler)


def _demo(out: TextIO, difficulty: int) -> Blockchain:
    def say(text: str = "") -> None:
        print(text, file=out)
        out.flush()

    bitcoin = Blockchain(difficulty=difficulty)
    wallet1 = Wallet()
    wallet2 = Wallet()

    say(f"Wallet 1 address: {wallet1.public_key}")
    say(f"Wallet 2 address: {wallet2.public_key}")

    say("\nMining first block...")
    block = bitcoin.mine_pending_transactions(wallet1.public_key)
    say(f"Block mined: {block.hash}")

    say("\nCreating transaction from wallet1 to wallet2...")
    tx1 = Transaction(wallet1.public_key, wallet2.public_key, 50.0)
    tx1.add_input(block.transactions[0].transaction_id, 0)
    tx1.add_output(wallet2.public_key, 50.0)
    tx1.add_output(wallet1.public_key, 45.0)
    bitcoin.add_transaction(tx1)

    say("\nMining second block...")
    block = bitcoin.mine_pending_transactions(wallet1.public_key)
    say(f"Block mined: {block.hash}")

    say(
        "\nWallet 1 balance: "
        + format_amount(bitcoin.get_balance_of_address(wallet1.public_key))
    )
    say(
        "Wallet 2 balance: "
        + format_amount(bitcoin.get_balance_of_address(wallet2.public_key))
    )

    for label, wallet in (("Wallet 1", wallet1), ("Wallet 2", wallet2)):
        say(f"\nUTXOs for {label}:")
        for utxo in bitcoin.get_utxos_for_address(wallet.public_key):
            say(
                f"UTXO: {utxo.transaction_id}:{utxo.output_index} "
                f"Amount: {format_amount(utxo.amount)}"
            )

    say(f"\nIs blockchain valid? {'Yes' if bitcoin.is_chain_valid() else 'No'}")
    return bitcoin


def _difficulty(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError("difficulty must not be negative")
    return value


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and run the demonstration."""
    parser = argparse.ArgumentParser(
        prog="hellocoin",
        description="Mine two blocks and try a payment between two wallets.",
    )
    parser.add_argument(
        "--difficulty",
        type=_difficulty,
        default=4,
        help="number of leading zeros a block hash must have (default: 4)",
    )
    args = parser.parse_args(argv)
    run_demo(sys.stdout, args.difficulty)
    return 0


if __name__ == "__main__":
    sys.exit(main())