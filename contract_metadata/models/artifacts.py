"""Build artifact models: which artifacts to generate and what was written."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict


class MissingOptimizationResultError(RuntimeError):
    """Raised when an optimization summary is requested but none was recorded."""


class GenerateArtifacts(str, Enum):
    """Describes which artifacts to generate."""

    # The Wasm, the metadata and a bundled ``<name>.contract`` file.
    ALL = "all"
    # Only the Wasm; metadata and bundle generation is skipped.
    CODE_ONLY = "code-only"

    @classmethod
    def parse(cls, text: str) -> GenerateArtifacts:
        """Parse ``"all"`` or ``"code-only"``."""
        try:
            return cls(text)
        except ValueError:
            raise ValueError("Could not parse build artifact") from None

    @property
    def steps(self) -> int:
        """Number of build steps needed to produce these artifacts."""
        return 5 if self is GenerateArtifacts.ALL else 3

    @property
    def includes_metadata(self) -> bool:
        return self is GenerateArtifacts.ALL


class OptimizationResult(BaseModel):
    """Wasm sizes, in KiB, before and after optimization."""

    model_config = ConfigDict(frozen=True)

    original_size: float
    optimized_size: float


class GenerationResult(BaseModel):
    """Result of the artifact generation process.

    Each ``dest_*`` path is ``None`` when that artifact was not written.
    """

    model_config = ConfigDict(frozen=True)

    target_directory: Path
    dest_metadata: Path | None = None
    dest_wasm: Path | None = None
    dest_bundle: Path | None = None
    optimization_result: OptimizationResult | None = None

    @staticmethod
    def display_name(path: Path) -> str:
        """Return the base name of ``path``."""
        return Path(path).name

    def display_optimization(self) -> tuple[float, float]:
        """Return ``(original_size, optimized_size)``.

        Raises ``MissingOptimizationResultError`` if no optimization ran.
        """
        if self.optimization_result is None:
            raise MissingOptimizationResultError("optimization result must exist")
        return (
            self.optimization_result.original_size,
            self.optimization_result.optimized_size,
        )
