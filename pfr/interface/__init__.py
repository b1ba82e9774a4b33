"""Mini README: User-facing interfaces for pfr.

Exports the Typer ``cli`` application defined in ``cli.py``.
"""

from .cli import cli

__all__ = ["cli"]
