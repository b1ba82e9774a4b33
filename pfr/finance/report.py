"""Mini README: Monthly extrapolation report for a ledger.

Structure:
    * ReportRow - one transaction's monthly contribution.
    * LedgerReport - table rows, signed total, breakdown, and coverage.
    * build_report - run the aggregation over a ledger.
    * render_* helpers - turn a report into tab-separated output lines.

Every transaction is scaled to a monthly amount using its frequency's
multiplier. Income raises the signed total and expenses lower it; expenses are
also grouped by category (untagged ones land in ``(other)``) and by account
(untagged ones land in ``(unallocated)``). Breakdown and coverage dictionaries
make no ordering promise; the render helpers sort them by name.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..logging_utils import get_logger
from .ledger import Frequency, Ledger, TransactionKind
from .money import Money, format_signed

LOGGER = get_logger(__name__)

OTHER_LABEL = "(other)"
UNALLOCATED_LABEL = "(unallocated)"
TOTAL_LABEL = "total"
UNTAGGED = "-"


@dataclass(frozen=True, slots=True)
class ReportRow:
    """Monthly view of a single transaction."""

    frequency: Frequency
    kind: TransactionKind
    name: str
    category: Optional[str]
    account: Optional[str]
    monthly_amount: Money

    @property
    def signed_cents(self) -> int:
        if self.kind is TransactionKind.EXPENSE:
            return -self.monthly_amount.cents
        return self.monthly_amount.cents

    def formatted_amount(self) -> str:
        """Income renders plain, expenses in parentheses."""

        if self.kind is TransactionKind.EXPENSE:
            return f"({self.monthly_amount.format()})"
        return self.monthly_amount.format()


@dataclass(slots=True)
class LedgerReport:
    """Aggregated monthly figures for a ledger."""

    rows: List[ReportRow] = field(default_factory=list)
    total_cents: int = 0
    breakdown: Dict[str, Money] = field(default_factory=dict)
    other_expenses: Money = Money()
    coverage: Dict[str, Money] = field(default_factory=dict)
    unallocated: Money = Money()

    def breakdown_rows(self) -> List[tuple[str, Money]]:
        """Category totals sorted by name, followed by the uncategorised row."""

        return sorted(self.breakdown.items()) + [(OTHER_LABEL, self.other_expenses)]

    def coverage_rows(self) -> List[tuple[str, Money]]:
        """Account totals sorted by name, followed by the unallocated row."""

        return sorted(self.coverage.items()) + [(UNALLOCATED_LABEL, self.unallocated)]


def build_report(ledger: Ledger, *, sort_by_name: bool = False) -> LedgerReport:
    """Extrapolate every transaction to a month and aggregate the results."""

    report = LedgerReport()
    transactions = sorted(ledger, key=lambda item: item.name) if sort_by_name else list(ledger)
    for transaction in transactions:
        monthly = transaction.monthly_amount
        row = ReportRow(
            frequency=transaction.frequency,
            kind=transaction.kind,
            name=transaction.name,
            category=transaction.category,
            account=transaction.account,
            monthly_amount=monthly,
        )
        report.rows.append(row)
        report.total_cents += row.signed_cents
        if transaction.kind is not TransactionKind.EXPENSE:
            continue

        if transaction.category is None:
            report.other_expenses += monthly
        else:
            report.breakdown[transaction.category] = (
                report.breakdown.get(transaction.category, Money()) + monthly
            )

        if transaction.account is None:
            report.unallocated += monthly
        else:
            report.coverage[transaction.account] = (
                report.coverage.get(transaction.account, Money()) + monthly
            )

    LOGGER.debug(
        "Built report over %s transactions, total=%s cents", len(report.rows), report.total_cents
    )
    return report


def render_table(report: LedgerReport) -> List[str]:
    lines = [
        "\t".join(
            [
                row.frequency.value,
                row.kind.value,
                row.name,
                row.category or UNTAGGED,
                row.account or UNTAGGED,
                row.formatted_amount(),
            ]
        )
        for row in report.rows
    ]
    lines.append(f"{TOTAL_LABEL}\t{format_signed(report.total_cents)}")
    return lines


def render_breakdown(report: LedgerReport) -> List[str]:
    return [f"{label}\t{amount.format()}" for label, amount in report.breakdown_rows()]


def render_coverage(report: LedgerReport) -> List[str]:
    return [f"{label}\t{amount.format()}" for label, amount in report.coverage_rows()]


def render_report(report: LedgerReport) -> List[str]:
    """Render the three report views separated by headed sections."""

    return (
        ["# monthly"]
        + render_table(report)
        + ["", "# breakdown"]
        + render_breakdown(report)
        + ["", "# coverage"]
        + render_coverage(report)
    )
