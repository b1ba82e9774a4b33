"""Mini README: Command-level ledger operations.

Structure:
    * LedgerManager - one method per CLI command, each a full
      load / mutate-or-aggregate / save cycle against a ``LedgerStore``.

Nothing is cached between calls: every operation re-reads the ``current``
snapshot so the manager behaves the same whether it lives for one command or
for a whole test.
"""

from __future__ import annotations

from typing import List

from ..errors import InvalidLedgerNameError
from ..logging_utils import get_logger
from ..storage.store import BACKUP, CURRENT, RESERVED_NAMES, LedgerStore
from .ledger import LedgerEntry, Transaction
from .report import LedgerReport, build_report

LOGGER = get_logger(__name__)


class LedgerManager:
    """Apply user commands to the ``current`` ledger of a store."""

    def __init__(self, store: LedgerStore) -> None:
        self.store = store

    def init(self) -> None:
        """Create storage and start over with an empty ``current`` ledger."""

        self.store.initialize()

    def add(self, transaction: Transaction) -> None:
        """Insert and persist ``transaction``; duplicates never touch the file."""

        ledger = self.store.load_current()
        ledger.add(transaction)
        self.store.save_current(ledger)
        LOGGER.info("Recorded %s '%s'", transaction.kind.value, transaction.name)

    def remove(self, name: str) -> bool:
        """Remove ``name`` if present, always persisting. Returns whether it existed."""

        ledger = self.store.load_current()
        removed = ledger.remove(name)
        self.store.save_current(ledger)
        return removed is not None

    def list_entries(self, *, sort_by_name: bool = False) -> List[LedgerEntry]:
        entries = list(self.store.load_current().entries())
        if sort_by_name:
            entries.sort(key=lambda entry: entry.name)
        return entries

    def report(self, *, sort_by_name: bool = False) -> LedgerReport:
        return build_report(self.store.load_current(), sort_by_name=sort_by_name)

    def save_as(self, name: str) -> None:
        """Copy ``current`` into the user snapshot ``name``."""

        self.store.copy(CURRENT, _user_snapshot(name))

    def load_from(self, name: str) -> None:
        """Replace ``current`` with the user snapshot ``name``."""

        self.store.copy(_user_snapshot(name), CURRENT)

    def backup(self) -> None:
        self.store.copy(CURRENT, BACKUP)

    def restore(self) -> None:
        self.store.copy(BACKUP, CURRENT)

    def snapshots(self) -> List[str]:
        """Names of user snapshots, excluding ``current`` and ``backup``."""

        return [name for name in self.store.names() if name not in RESERVED_NAMES]


def _user_snapshot(name: str) -> str:
    if name in RESERVED_NAMES:
        raise InvalidLedgerNameError(name, "reserved; use backup/restore instead")
    return name
