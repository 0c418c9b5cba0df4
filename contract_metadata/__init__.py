"""contract-metadata: canonical metadata documents for compiled smart contracts.

A metadata document records where a contract came from (language, compiler,
code hash and optionally the Wasm code itself), descriptive contract fields,
free-form user metadata and the raw ABI produced by contract compilation.
"""

__version__ = "0.1.0"

from contract_metadata.core.builder import (
    BuilderContractError,
    ContractBuilder,
    EmptyAuthorsError,
    FieldAlreadySetError,
    MissingFieldsError,
)
from contract_metadata.core.writer import MetadataWriter
from contract_metadata.models import (
    METADATA_VERSION,
    CodeHash,
    Compiler,
    Contract,
    ContractMetadata,
    GenerateArtifacts,
    GenerationResult,
    Language,
    OptimizationResult,
    Source,
    SourceCompiler,
    SourceLanguage,
    SourceWasm,
    User,
)

__all__ = [
    "__version__",
    "METADATA_VERSION",
    "BuilderContractError",
    "CodeHash",
    "Compiler",
    "Contract",
    "ContractBuilder",
    "ContractMetadata",
    "EmptyAuthorsError",
    "FieldAlreadySetError",
    "GenerateArtifacts",
    "GenerationResult",
    "Language",
    "MetadataWriter",
    "MissingFieldsError",
    "OptimizationResult",
    "Source",
    "SourceCompiler",
    "SourceLanguage",
    "SourceWasm",
    "User",
]
