"""Mini README: Ledger persistence package for pfr.

The ``store`` module maps snapshot names such as ``current`` and ``backup``
to JSON files inside a single storage directory.
"""

from .store import BACKUP, CURRENT, RESERVED_NAMES, LedgerStore, validate_ledger_name

__all__ = ["BACKUP", "CURRENT", "RESERVED_NAMES", "LedgerStore", "validate_ledger_name"]
