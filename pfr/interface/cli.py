"""Mini README: Typer command line for the personal finance reporter.

Structure:
    * cli - the Typer application, installed as the ``pfr`` console script.
    * main - global options; builds the ``LedgerManager`` for subcommands.
    * init/add/rm/list/report/save/load/backup/restore/snapshots - commands.

Domain failures (``PfrError``) are printed as a single ``An error occurred...``
line on standard output and the process exits with status 1.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, Optional, TypeVar

import typer

from ..configuration import get_settings, resolve_storage_root
from ..errors import PfrError
from ..finance.ledger import Frequency, Transaction, TransactionKind
from ..finance.manager import LedgerManager
from ..finance.money import Money
from ..finance.report import render_report
from ..logging_utils import configure_root_logger, get_logger
from ..storage.store import LedgerStore

LOGGER = get_logger(__name__)

ERROR_EXIT_CODE = 1

cli = typer.Typer(help="Personal finance reporter: track recurring income and expenses.")

T = TypeVar("T")


def _parse_kind(value: str) -> TransactionKind:
    try:
        return TransactionKind.from_str(value)
    except ValueError as error:
        raise typer.BadParameter(str(error)) from error


def _parse_frequency(value: str) -> Frequency:
    try:
        return Frequency.from_str(value)
    except ValueError as error:
        raise typer.BadParameter(str(error)) from error


def _run(ctx: typer.Context, action: Callable[[LedgerManager], T]) -> T:
    """Invoke ``action`` with the context's manager, reporting domain errors."""

    try:
        manager = _manager(ctx)
        return action(manager)
    except PfrError as error:
        LOGGER.debug("Command failed", exc_info=True)
        typer.echo(f"An error occurred{error}")
        raise typer.Exit(code=ERROR_EXIT_CODE) from error


def _manager(ctx: typer.Context) -> LedgerManager:
    if ctx.obj is None:
        ctx.obj = LedgerManager(LedgerStore(resolve_storage_root(get_settings().data_directory)))
    return ctx.obj


def _echo_lines(lines: Iterable[str]) -> None:
    for line in lines:
        typer.echo(line)


@cli.callback()
def main(
    ctx: typer.Context,
    data_dir: Optional[Path] = typer.Option(
        None, "--data-dir", help="Ledger storage directory (overrides PFR_DATA_DIRECTORY)."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debugging detail to stderr."),
) -> None:
    """Track recurring income and expenses and report them per month."""

    try:
        settings = get_settings()
        configure_root_logger("DEBUG" if verbose else settings.log_level)
        if data_dir is not None:
            ctx.obj = LedgerManager(LedgerStore(resolve_storage_root(data_dir)))
    except PfrError as error:
        typer.echo(f"An error occurred{error}")
        raise typer.Exit(code=ERROR_EXIT_CODE) from error


@cli.command()
def init(ctx: typer.Context) -> None:
    """Init the list of entries."""

    _run(ctx, lambda manager: manager.init())


@cli.command()
def add(
    ctx: typer.Context,
    kind: str = typer.Argument(..., help="income or expense."),
    frequency: str = typer.Argument(
        ..., help="daily, workdays, weekly, monthly, quarterly or yearly."
    ),
    name: str = typer.Argument(..., help="Unique name of the transaction."),
    amount: str = typer.Argument(..., help="Amount per occurrence, e.g. 12.50."),
    category: Optional[str] = typer.Option(None, "--category", help="Expense category."),
    account: Optional[str] = typer.Option(None, "--account", help="Account paying the expense."),
) -> None:
    """Add a new entry."""

    parsed_kind = _parse_kind(kind)
    parsed_frequency = _parse_frequency(frequency)

    def action(manager: LedgerManager) -> None:
        manager.add(
            Transaction(
                kind=parsed_kind,
                frequency=parsed_frequency,
                name=name,
                amount=Money.parse(amount),
                category=category,
                account=account,
            )
        )

    _run(ctx, action)


@cli.command()
def rm(ctx: typer.Context, name: str = typer.Argument(..., help="Entry to remove.")) -> None:
    """Remove an existing entry."""

    _run(ctx, lambda manager: manager.remove(name))


@cli.command("list")
def list_entries(
    ctx: typer.Context,
    sort: bool = typer.Option(False, "--sort", help="Order entries by name."),
) -> None:
    """List the current entries."""

    entries = _run(ctx, lambda manager: manager.list_entries(sort_by_name=sort))
    _echo_lines(
        f"{entry.frequency.value}\t{entry.kind.value}\t{entry.name}\t{entry.amount.format()}"
        for entry in entries
    )


@cli.command()
def report(
    ctx: typer.Context,
    sort: bool = typer.Option(False, "--sort", help="Order table rows by name."),
) -> None:
    """Generate a monthly report."""

    ledger_report = _run(ctx, lambda manager: manager.report(sort_by_name=sort))
    _echo_lines(render_report(ledger_report))


@cli.command()
def save(ctx: typer.Context, name: str = typer.Argument(..., help="Snapshot name.")) -> None:
    """Save the current entries under a name."""

    _run(ctx, lambda manager: manager.save_as(name))


@cli.command()
def load(ctx: typer.Context, name: str = typer.Argument(..., help="Snapshot name.")) -> None:
    """Replace the current entries with a saved snapshot."""

    _run(ctx, lambda manager: manager.load_from(name))


@cli.command()
def backup(ctx: typer.Context) -> None:
    """Copy the current entries to the backup slot."""

    _run(ctx, lambda manager: manager.backup())


@cli.command()
def restore(ctx: typer.Context) -> None:
    """Replace the current entries with the backup."""

    _run(ctx, lambda manager: manager.restore())


@cli.command()
def snapshots(ctx: typer.Context) -> None:
    """List saved snapshot names."""

    _echo_lines(_run(ctx, lambda manager: manager.snapshots()))
