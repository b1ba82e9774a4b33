"""Mini README: Named ledger snapshots persisted as JSON files.

Structure:
    * LedgerStore - load, save, and copy ledgers under a storage root.
    * validate_ledger_name - guard snapshot names before they become paths.

Each snapshot lives at ``<root>/<name>.json``. ``current`` is the ledger every
command works on and ``backup`` is reserved for the backup/restore pair. Saves
truncate and rewrite the whole file; there is no locking and no atomic
rename, so concurrent writers race and the last one wins.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import List, Union

from ..errors import (
    InvalidLedgerNameError,
    LedgerDecodeError,
    LedgerEncodeError,
    LedgerNotFoundError,
    StorageIOError,
)
from ..finance.ledger import Ledger
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

CURRENT = "current"
BACKUP = "backup"
RESERVED_NAMES = frozenset({CURRENT, BACKUP})
LEDGER_SUFFIX = ".json"

_NAME_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_.-]*$")


def validate_ledger_name(name: str) -> str:
    """Return ``name`` unchanged if it is safe to use as a file stem."""

    if not _NAME_PATTERN.match(name):
        raise InvalidLedgerNameError(
            name, "use letters, digits, '.', '_' or '-', starting with a letter or digit"
        )
    if ".." in name:
        raise InvalidLedgerNameError(name, "'..' is not allowed")
    return name


class LedgerStore:
    """File-backed mapping from snapshot name to ledger."""

    def __init__(self, root: Union[str, Path]) -> None:
        self.root = Path(root)

    def path_for(self, name: str) -> Path:
        return self.root / f"{validate_ledger_name(name)}{LEDGER_SUFFIX}"

    def initialize(self) -> None:
        """Create the storage directory and reset ``current`` to an empty ledger."""

        try:
            self.root.mkdir(parents=True, exist_ok=True)
        except OSError as error:
            raise StorageIOError(CURRENT, error) from error
        LOGGER.info("Initialised ledger storage at %s", self.root)
        self.save_current(Ledger())

    def names(self) -> List[str]:
        """Return the stored snapshot names, sorted."""

        if not self.root.is_dir():
            return []
        return sorted(path.stem for path in self.root.glob(f"*{LEDGER_SUFFIX}") if path.is_file())

    def load(self, name: str) -> Ledger:
        """Read and decode the named ledger."""

        path = self.path_for(name)
        try:
            raw = path.read_bytes()
        except FileNotFoundError as error:
            raise LedgerNotFoundError(name, error) from error
        except OSError as error:
            raise StorageIOError(name, error) from error

        try:
            payload = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as error:
            raise LedgerDecodeError(name, error) from error
        if not isinstance(payload, dict):
            raise LedgerDecodeError(name, "top-level value must be an object")
        try:
            ledger = Ledger.from_dict(payload)
        except KeyError as error:
            raise LedgerDecodeError(name, f"missing field {error}") from error
        except (TypeError, ValueError) as error:
            raise LedgerDecodeError(name, error) from error

        LOGGER.info("Loaded %s transactions from '%s'", len(ledger), name)
        return ledger

    def save(self, name: str, ledger: Ledger) -> None:
        """Overwrite the named snapshot with ``ledger``."""

        path = self.path_for(name)
        try:
            text = json.dumps(ledger.as_dict(), indent=2)
        except (TypeError, ValueError) as error:
            raise LedgerEncodeError(name, error) from error

        try:
            with path.open("w", encoding="utf-8") as handle:
                handle.write(text)
                handle.write("\n")
        except OSError as error:
            raise StorageIOError(name, error) from error
        LOGGER.info("Saved %s transactions to '%s'", len(ledger), name)

    def load_current(self) -> Ledger:
        return self.load(CURRENT)

    def save_current(self, ledger: Ledger) -> None:
        self.save(CURRENT, ledger)

    def copy(self, source: str, target: str) -> None:
        """Copy one snapshot over another by loading then saving."""

        ledger = self.load(source)
        self.save(target, ledger)
        LOGGER.info("Copied ledger '%s' -> '%s'", source, target)
