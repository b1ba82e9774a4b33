"""Mini README: Centralised configuration models and helpers for pfr.

Structure:
    * PfrSettings - Pydantic settings model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read ``PFR_*`` environment variables (or a
    ``.env`` file). The storage directory is resolved lazily through
    ``PfrSettings.storage_root`` so a missing home directory surfaces as a
    ``StorageUnavailableError`` rather than a validation failure.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import SettingsError, StorageUnavailableError

DEFAULT_DATA_DIRECTORY = Path("~") / ".pfr"


class PfrSettings(BaseSettings):
    """Runtime configuration for the personal finance reporter."""

    model_config = SettingsConfigDict(
        env_prefix="PFR_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    data_directory: Optional[Path] = Field(
        None,
        description=(
            "Directory holding one JSON file per named ledger."
            " Defaults to ~/.pfr when unset."
        ),
    )
    log_level: str = Field(
        "WARNING",
        description="Logging level name applied to the root logger by the CLI.",
    )

    @field_validator("log_level")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        """Accept any casing but reject names the logging module does not know."""

        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    def storage_root(self) -> Path:
        """Return the expanded storage directory."""

        return resolve_storage_root(self.data_directory)


def resolve_storage_root(directory: Optional[Path]) -> Path:
    """Expand ``~`` in ``directory`` (or the default), failing if home is unknown."""

    path = Path(directory) if directory is not None else DEFAULT_DATA_DIRECTORY
    try:
        return path.expanduser()
    except RuntimeError as error:
        raise StorageUnavailableError(str(error)) from error


@lru_cache()
def get_settings() -> PfrSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    try:
        return PfrSettings()
    except ValidationError as error:
        first = error.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise SettingsError(f"{location}: {first['msg']}") from error
