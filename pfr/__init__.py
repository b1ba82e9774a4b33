"""Mini README: Core package initializer for pfr, the personal finance reporter.

The package records recurring income and expense entries, keeps them in JSON
ledger files, and extrapolates them into a monthly report. Subpackages:

    * finance - money values, the ledger model, reporting, and commands.
    * storage - named ledger snapshots on disk.
    * interface - the Typer command line.
"""

from .logging_utils import get_logger

__version__ = "0.3.0"

__all__ = ["__version__", "get_logger"]
