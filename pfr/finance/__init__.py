"""Mini README: Finance model and reporting for pfr.

This package holds the pure, storage-free pieces: ``money`` for cent-based
amounts, ``ledger`` for recurring transactions keyed by name, and ``report``
for the monthly extrapolation. ``manager`` ties them to a ``LedgerStore`` and
is imported directly (``pfr.finance.manager``) because it depends on storage.
"""

from .ledger import Frequency, Ledger, LedgerEntry, Transaction, TransactionKind
from .money import Money, format_signed
from .report import LedgerReport, ReportRow, build_report

__all__ = [
    "Frequency",
    "Ledger",
    "LedgerEntry",
    "LedgerReport",
    "Money",
    "ReportRow",
    "Transaction",
    "TransactionKind",
    "build_report",
    "format_signed",
]
