"""Environment profiles, node status, sync decision logic and small helpers for a ledger node."""

__version__ = "0.1.0"