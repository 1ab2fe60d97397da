"""A small educational blockchain with proof-of-work mining and a UTXO pool."""

__version__ = "0.1.0"
__all__ = ["transaction", "utxo", "block", "wallet", "blockchain", "cli"]