"""Runtime configuration — env-driven via pydantic-settings.

Reads from a ``.env`` file and ``CONTRACT_METADATA_*`` environment variables.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from rich.logging import RichHandler

from contract_metadata.models.artifacts import GenerateArtifacts


class Verbosity(str, Enum):
    """Output verbosity for build reporting."""

    QUIET = "quiet"
    VERBOSE = "verbose"
    NOT_SPECIFIED = "not_specified"

    @classmethod
    def from_flags(cls, quiet: bool, verbose: bool) -> Verbosity:
        """Combine ``--quiet``/``--verbose`` style flags into one verbosity."""
        if quiet and verbose:
            raise ValueError("Cannot pass both quiet and verbose flags")
        if quiet:
            return cls.QUIET
        if verbose:
            return cls.VERBOSE
        return cls.NOT_SPECIFIED


class MetadataSettings(BaseSettings):
    """Settings for metadata generation with environment variable overrides.

    Examples
    --------
    Override via environment::

        export CONTRACT_METADATA_TARGET_DIRECTORY=target/ink
        export CONTRACT_METADATA_GENERATE=code-only
        export CONTRACT_METADATA_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="CONTRACT_METADATA_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"

    # Output
    target_directory: Path = Path("target/ink")
    generate: GenerateArtifacts = GenerateArtifacts.ALL
    json_indent: int | None = 2

    # Reporting
    quiet: bool = False
    verbose: bool = False

    @model_validator(mode="after")
    def _check_verbosity(self) -> MetadataSettings:
        Verbosity.from_flags(self.quiet, self.verbose)
        return self

    @property
    def verbosity(self) -> Verbosity:
        return Verbosity.from_flags(self.quiet, self.verbose)


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Attach a Rich handler to the package logger.

    ``level`` defaults to the configured ``log_level``. Calling this again
    only updates the level.
    """
    logger = logging.getLogger("contract_metadata")
    if level is None:
        level = settings.log_level
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(show_path=False))
    return logger


# Module-level singleton — import as `from contract_metadata.config import settings`
settings = MetadataSettings()
