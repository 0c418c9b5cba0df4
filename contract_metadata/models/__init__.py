"""Contract metadata models — all Pydantic v2, frozen once constructed."""

from contract_metadata.models.artifacts import (
    GenerateArtifacts,
    GenerationResult,
    MissingOptimizationResultError,
    OptimizationResult,
)
from contract_metadata.models.contract import Contract, User
from contract_metadata.models.metadata import METADATA_VERSION, ContractMetadata
from contract_metadata.models.source import (
    CodeHash,
    Compiler,
    Language,
    Source,
    SourceCompiler,
    SourceLanguage,
    SourceWasm,
)
from contract_metadata.models.versioning import Version, parse_version

__all__ = [
    # versioning
    "Version",
    "parse_version",
    # source
    "CodeHash",
    "Compiler",
    "Language",
    "Source",
    "SourceCompiler",
    "SourceLanguage",
    "SourceWasm",
    # contract
    "Contract",
    "User",
    # document
    "METADATA_VERSION",
    "ContractMetadata",
    # artifacts
    "GenerateArtifacts",
    "GenerationResult",
    "MissingOptimizationResultError",
    "OptimizationResult",
]
