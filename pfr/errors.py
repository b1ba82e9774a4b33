"""Mini README: Exception hierarchy shared by every pfr component.

Each error renders as the tail of the one-line diagnostic the CLI prints,
so ``f"An error occurred{error}"`` reads naturally for every subclass.
"""

from __future__ import annotations


class PfrError(Exception):
    """Base class for all failures a pfr command can report."""


class StorageUnavailableError(PfrError):
    """The storage directory could not be resolved."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            " while attempting to find the current user's home directory;"
            f" couldn't find it ({reason})"
        )


class StorageIOError(PfrError):
    """Opening, reading, or writing a ledger file failed."""

    def __init__(self, name: str, error: OSError) -> None:
        self.name = name
        super().__init__(f" while attempting to open the data file for '{name}': {error}")


class LedgerNotFoundError(StorageIOError):
    """The named ledger has never been saved."""


class LedgerDecodeError(PfrError):
    """Stored ledger content is malformed."""

    def __init__(self, name: str, reason: object) -> None:
        self.name = name
        super().__init__(f" while attempting to load from the data file for '{name}': {reason}")


class LedgerEncodeError(PfrError):
    """A ledger could not be serialised."""

    def __init__(self, name: str, reason: object) -> None:
        self.name = name
        super().__init__(f" while attempting to save to the data file for '{name}': {reason}")


class DuplicateNameError(PfrError):
    """A transaction with the same name is already in the ledger."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f": a transaction called {name} is already present in the ledger")


class InvalidLedgerNameError(PfrError, ValueError):
    """A snapshot name is not usable as a file name, or is reserved."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        super().__init__(f": '{name}' cannot be used as a ledger name ({reason})")


class MoneyParseError(PfrError, ValueError):
    """Text could not be interpreted as a non-negative currency amount."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f": '{text}' is not a valid amount")


class SettingsError(PfrError):
    """Environment or ``.env`` configuration failed validation."""

    def __init__(self, reason: str) -> None:
        super().__init__(f" while reading settings: {reason}")
