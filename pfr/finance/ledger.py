"""Mini README: Recurring income and expense entries keyed by name.

Structure:
    * TransactionKind - enum representing income versus expense entries.
    * Frequency - how often an entry recurs, with its monthly multiplier.
    * Transaction - dataclass storing one recurring entry.
    * LedgerEntry - the (frequency, kind, name, amount) tuple used for listings.
    * Ledger - name-keyed container of transactions.

Iteration order of a ``Ledger`` is not part of its contract. The current
implementation yields entries in insertion order (which, after a load, is the
order they appear in the file), but callers that need a stable order must sort.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, Mapping, NamedTuple, Optional

from ..errors import DuplicateNameError
from ..logging_utils import get_logger
from .money import Money

LOGGER = get_logger(__name__)


class TransactionKind(str, Enum):
    """Enumerate the supported transaction kinds."""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def from_str(cls, value: str) -> "TransactionKind":
        """Coerce arbitrary casing into a valid transaction kind."""

        try:
            normalised = value.strip().lower()
            return cls(normalised)
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported transaction kind: {value}") from error


class Frequency(str, Enum):
    """Recurrence cadence of a transaction."""

    DAILY = "daily"
    WORKDAYS = "workdays"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"

    @property
    def monthly_multiplier(self) -> float:
        """Factor converting one occurrence into a 30-day month's worth."""

        return _MONTHLY_MULTIPLIERS[self]

    @classmethod
    def from_str(cls, value: str) -> "Frequency":
        """Coerce casing and the short aliases (``wkly`` etc.) into a frequency."""

        try:
            normalised = value.strip().lower()
            return cls(_FREQUENCY_ALIASES.get(normalised, normalised))
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported frequency: {value}") from error


_MONTHLY_MULTIPLIERS: Dict[Frequency, float] = {
    Frequency.DAILY: 30.0,
    Frequency.WORKDAYS: 21.4,
    Frequency.WEEKLY: 4.28,
    Frequency.MONTHLY: 1.0,
    Frequency.QUARTERLY: 1.0 / 3.0,
    Frequency.YEARLY: 1.0 / 12.0,
}

_FREQUENCY_ALIASES: Dict[str, str] = {
    "wkly": "weekly",
    "mthly": "monthly",
    "qtrly": "quarterly",
    "yrly": "yearly",
}


@dataclass(frozen=True, slots=True)
class Transaction:
    """Represent a recurring ledger entry with optional reporting tags."""

    kind: TransactionKind
    frequency: Frequency
    name: str
    amount: Money
    category: Optional[str] = None
    account: Optional[str] = None

    @property
    def monthly_amount(self) -> Money:
        """Amount extrapolated to a month, truncated toward zero."""

        return self.amount.scale(self.frequency.monthly_multiplier)

    def as_dict(self) -> Dict[str, object]:
        """Export the transaction with serialisable values."""

        return {
            "kind": self.kind.value,
            "frequency": self.frequency.value,
            "name": self.name,
            "amount": self.amount.cents,
            "category": self.category,
            "account": self.account,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Transaction":
        """Rebuild a transaction from ``as_dict`` output, validating each field."""

        amount = payload["amount"]
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise ValueError(f"Amount must be an integer number of cents, got {amount!r}")
        name = payload["name"]
        if not isinstance(name, str):
            raise ValueError(f"Name must be a string, got {name!r}")
        return cls(
            kind=TransactionKind(payload["kind"]),
            frequency=Frequency(payload["frequency"]),
            name=name,
            amount=Money(amount),
            category=_optional_str(payload.get("category"), "category"),
            account=_optional_str(payload.get("account"), "account"),
        )


def _optional_str(value: object, field_name: str) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    raise ValueError(f"{field_name} must be a string or null, got {value!r}")


class LedgerEntry(NamedTuple):
    """Row produced when listing a ledger."""

    frequency: Frequency
    kind: TransactionKind
    name: str
    amount: Money


class LedgerEntries:
    """Re-iterable, lazily evaluated view over a ledger's listing rows."""

    def __init__(self, ledger: "Ledger") -> None:
        self._ledger = ledger

    def __iter__(self) -> Iterator[LedgerEntry]:
        for transaction in self._ledger:
            yield LedgerEntry(
                transaction.frequency, transaction.kind, transaction.name, transaction.amount
            )

    def __len__(self) -> int:
        return len(self._ledger)


class Ledger:
    """Mapping from transaction name to transaction."""

    def __init__(self, transactions: Optional[Iterable[Transaction]] = None) -> None:
        self._transactions: Dict[str, Transaction] = {}
        for transaction in transactions or ():
            self.add(transaction)

    def __contains__(self, name: object) -> bool:
        return name in self._transactions

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self._transactions.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ledger):
            return NotImplemented
        return self._transactions == other._transactions

    def __repr__(self) -> str:
        return f"Ledger({list(self._transactions.values())!r})"

    def get(self, name: str) -> Optional[Transaction]:
        """Return the named transaction, or ``None`` when absent."""

        return self._transactions.get(name)

    def add(self, transaction: Transaction) -> None:
        """Insert a transaction, refusing names that are already taken."""

        if transaction.name in self._transactions:
            raise DuplicateNameError(transaction.name)
        self._transactions[transaction.name] = transaction
        LOGGER.debug("Added %s '%s'", transaction.kind.value, transaction.name)

    def remove(self, name: str) -> Optional[Transaction]:
        """Drop the named transaction if present and return it."""

        removed = self._transactions.pop(name, None)
        if removed is None:
            LOGGER.debug("No transaction named '%s' to remove", name)
        else:
            LOGGER.debug("Removed '%s'", name)
        return removed

    def entries(self) -> LedgerEntries:
        """Return the listing rows as a lazy view that can be iterated repeatedly."""

        return LedgerEntries(self)

    def as_dict(self) -> Dict[str, Dict[str, object]]:
        """Export the ledger as the JSON object written to disk."""

        return {name: transaction.as_dict() for name, transaction in self._transactions.items()}

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Ledger":
        """Rebuild a ledger from ``as_dict`` output."""

        ledger = cls()
        for key, record in payload.items():
            if not isinstance(record, Mapping):
                raise ValueError(f"Entry '{key}' must be an object")
            transaction = Transaction.from_dict(record)
            if transaction.name != key:
                raise ValueError(f"Entry '{key}' is stored under the wrong name '{transaction.name}'")
            ledger.add(transaction)
        return ledger
