"""Mini README: Tests for the monthly extrapolation report.

These tests pin the signed total, the category breakdown, the account
coverage, and the rendered table lines for small hand-checked ledgers.
"""

from __future__ import annotations

from typing import Optional

import pytest

from pfr.finance import Frequency, Ledger, Money, Transaction, TransactionKind, build_report
from pfr.finance.report import render_breakdown, render_coverage, render_report, render_table


def _entry(
    kind: TransactionKind,
    frequency: Frequency,
    name: str,
    cents: int,
    category: Optional[str] = None,
    account: Optional[str] = None,
) -> Transaction:
    return Transaction(
        kind=kind,
        frequency=frequency,
        name=name,
        amount=Money(cents),
        category=category,
        account=account,
    )


def test_empty_ledger_reports_zero_rows() -> None:
    report = build_report(Ledger())

    assert report.rows == []
    assert report.total_cents == 0
    assert render_breakdown(report) == ["(other)\t0.00"]
    assert render_coverage(report) == ["(unallocated)\t0.00"]
    assert render_table(report) == ["total\t0.00"]


def test_income_and_untagged_expense_cancel_out() -> None:
    ledger = Ledger(
        [_entry(TransactionKind.INCOME, Frequency.MONTHLY, "salary", 100000)]
    )
    assert build_report(ledger).total_cents == 100000

    ledger.add(_entry(TransactionKind.EXPENSE, Frequency.MONTHLY, "rent", 100000))
    report = build_report(ledger)

    assert report.total_cents == 0
    assert report.other_expenses == Money(100000)
    assert report.unallocated == Money(100000)
    assert report.breakdown == {}
    assert report.coverage == {}


@pytest.mark.parametrize(
    ("frequency", "cents", "monthly"),
    [
        (Frequency.YEARLY, 120000, 10000),
        (Frequency.WEEKLY, 10000, 42800),
        (Frequency.DAILY, 1000, 30000),
        (Frequency.QUARTERLY, 30000, 10000),
        (Frequency.MONTHLY, 4321, 4321),
    ],
)
def test_expenses_extrapolate_to_monthly(frequency: Frequency, cents: int, monthly: int) -> None:
    report = build_report(Ledger([_entry(TransactionKind.EXPENSE, frequency, "bill", cents)]))

    assert report.rows[0].monthly_amount == Money(monthly)
    assert report.total_cents == -monthly


def test_breakdown_and_coverage_group_tagged_expenses() -> None:
    ledger = Ledger(
        [
            _entry(TransactionKind.INCOME, Frequency.MONTHLY, "salary", 500000, "ignored", "checking"),
            _entry(TransactionKind.EXPENSE, Frequency.MONTHLY, "rent", 150000, "housing", "checking"),
            _entry(TransactionKind.EXPENSE, Frequency.YEARLY, "insurance", 120000, "housing", "savings"),
            _entry(TransactionKind.EXPENSE, Frequency.WEEKLY, "groceries", 10000, "food"),
            _entry(TransactionKind.EXPENSE, Frequency.MONTHLY, "gym", 5000, account="checking"),
        ]
    )

    report = build_report(ledger)

    assert report.breakdown == {"housing": Money(160000), "food": Money(42800)}
    assert report.other_expenses == Money(5000)
    assert report.coverage == {"checking": Money(155000), "savings": Money(10000)}
    assert report.unallocated == Money(42800)
    assert report.total_cents == 500000 - 150000 - 10000 - 42800 - 5000
    assert render_breakdown(report) == [
        "food\t428.00",
        "housing\t1600.00",
        "(other)\t50.00",
    ]


def test_table_parenthesises_expenses_and_negative_total() -> None:
    ledger = Ledger(
        [
            _entry(TransactionKind.INCOME, Frequency.MONTHLY, "salary", 1000),
            _entry(TransactionKind.EXPENSE, Frequency.MONTHLY, "rent", 2550, "housing", "checking"),
        ]
    )

    lines = render_table(build_report(ledger, sort_by_name=True))

    assert lines == [
        "monthly\texpense\trent\thousing\tchecking\t(25.50)",
        "monthly\tincome\tsalary\t-\t-\t10.00",
        "total\t(15.50)",
    ]


def test_render_report_contains_all_sections() -> None:
    lines = render_report(build_report(Ledger()))

    assert lines[0] == "# monthly"
    assert "# breakdown" in lines
    assert "# coverage" in lines
