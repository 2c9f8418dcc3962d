"""Storage models, query filters and ABI interface detection for a Starknet indexer."""

__version__ = "0.1.0"