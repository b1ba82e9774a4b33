"""Mini README: Tests for JSON ledger snapshots on disk.

Each test gets its own storage root under ``tmp_path`` so no state leaks
between runs or into the user's home directory.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from pfr.errors import (
    InvalidLedgerNameError,
    LedgerDecodeError,
    LedgerNotFoundError,
    StorageIOError,
)
from pfr.finance import Frequency, Ledger, Money, Transaction, TransactionKind
from pfr.storage import BACKUP, CURRENT, LedgerStore


@pytest.fixture()
def store(tmp_path: Path) -> LedgerStore:
    ledger_store = LedgerStore(tmp_path / "ledgers")
    ledger_store.initialize()
    return ledger_store


def _sample_ledger() -> Ledger:
    return Ledger(
        [
            Transaction(
                kind=TransactionKind.INCOME,
                frequency=Frequency.WORKDAYS,
                name="consulting",
                amount=Money(25000),
                account="business",
            ),
            Transaction(
                kind=TransactionKind.EXPENSE,
                frequency=Frequency.QUARTERLY,
                name="water bill",
                amount=Money(9999),
                category="utilities",
            ),
        ]
    )


def test_initialize_creates_empty_current(store: LedgerStore) -> None:
    assert store.root.is_dir()
    assert store.load_current() == Ledger()
    assert json.loads((store.root / "current.json").read_text(encoding="utf-8")) == {}


def test_initialize_resets_existing_current(store: LedgerStore) -> None:
    store.save_current(_sample_ledger())

    store.initialize()

    assert len(store.load_current()) == 0


def test_save_then_load_round_trips(store: LedgerStore) -> None:
    ledger = _sample_ledger()

    store.save("plan-2024", ledger)

    assert store.load("plan-2024") == ledger
    assert store.names() == [CURRENT, "plan-2024"]


def test_load_missing_snapshot_raises_not_found(store: LedgerStore) -> None:
    with pytest.raises(LedgerNotFoundError):
        store.load("nope")
    assert issubclass(LedgerNotFoundError, StorageIOError)


def test_load_before_initialize_raises_not_found(tmp_path: Path) -> None:
    with pytest.raises(LedgerNotFoundError):
        LedgerStore(tmp_path / "missing").load_current()


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        "[]",
        '{"a": {"kind": "income"}}',
        '{"a": {"kind": "income", "frequency": "hourly", "name": "a", "amount": 1}}',
    ],
)
def test_malformed_content_raises_decode_error(store: LedgerStore, content: str) -> None:
    (store.root / "broken.json").write_text(content, encoding="utf-8")

    with pytest.raises(LedgerDecodeError):
        store.load("broken")


def test_invalid_utf8_raises_decode_error(store: LedgerStore) -> None:
    (store.root / "broken.json").write_bytes(b'{"\xff": 1}')

    with pytest.raises(LedgerDecodeError):
        store.load("broken")


def test_save_into_missing_directory_raises_io_error(tmp_path: Path) -> None:
    with pytest.raises(StorageIOError):
        LedgerStore(tmp_path / "absent").save(CURRENT, Ledger())


@pytest.mark.parametrize("name", ["", "../escape", "a/b", ".hidden", "two..dots"])
def test_unsafe_names_are_rejected(store: LedgerStore, name: str) -> None:
    with pytest.raises(InvalidLedgerNameError):
        store.save(name, Ledger())


def test_copy_overwrites_target(store: LedgerStore) -> None:
    store.save_current(_sample_ledger())
    store.save(BACKUP, Ledger())

    store.copy(CURRENT, BACKUP)

    assert store.load(BACKUP) == _sample_ledger()


def test_copy_from_missing_source_leaves_target_unchanged(store: LedgerStore) -> None:
    store.save_current(_sample_ledger())

    with pytest.raises(LedgerNotFoundError):
        store.copy("ghost", CURRENT)

    assert store.load_current() == _sample_ledger()

