"""Source provenance models: code hash, Wasm bytes, language and compiler.

All models are frozen. ``CodeHash`` and ``SourceWasm`` serialize through the
canonical byte encoding, while ``str()`` yields the ``0x``-prefixed display
form.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    RootModel,
    SerializerFunctionWrapHandler,
    field_validator,
    model_serializer,
)

from contract_metadata.core.encoding import (
    CODE_HASH_SIZE,
    blake2_256,
    display_bytes,
    serialize_as_byte_str,
)
from contract_metadata.models.versioning import Version


def _coerce_bytes(value: Any) -> Any:
    if isinstance(value, str):
        raise ValueError("expected raw bytes, not a string; decode hex input first")
    if isinstance(value, (bytearray, memoryview, list, tuple)):
        return bytes(value)
    return value


class CodeHash(RootModel[Annotated[bytes, Field(min_length=CODE_HASH_SIZE, max_length=CODE_HASH_SIZE)]]):
    """The 32-byte content hash of the compiled Wasm code."""

    model_config = ConfigDict(frozen=True)

    @field_validator("root", mode="before")
    @classmethod
    def _to_bytes(cls, value: Any) -> Any:
        return _coerce_bytes(value)

    @classmethod
    def from_wasm(cls, wasm: bytes) -> CodeHash:
        """Hash Wasm code with BLAKE2b-256."""
        return cls(blake2_256(bytes(wasm)))

    @model_serializer
    def _serialize(self) -> str:
        return serialize_as_byte_str(self.root)

    def __str__(self) -> str:
        return display_bytes(self.root)


class SourceWasm(RootModel[bytes]):
    """The bytes of the compiled Wasm smart contract."""

    model_config = ConfigDict(frozen=True)

    @field_validator("root", mode="before")
    @classmethod
    def _to_bytes(cls, value: Any) -> Any:
        return _coerce_bytes(value)

    @model_serializer
    def _serialize(self) -> str:
        return serialize_as_byte_str(self.root)

    def __str__(self) -> str:
        return display_bytes(self.root)


class Language(str, Enum):
    """The language in which the smart contract is written."""

    INK = "ink"
    SOLIDITY = "solidity"
    ASSEMBLY_SCRIPT = "assembly_script"

    @property
    def label(self) -> str:
        return _LANGUAGE_LABELS[self]

    def __str__(self) -> str:
        return self.label


class Compiler(str, Enum):
    """Compilers used to compile a smart contract."""

    RUSTC = "rustc"
    SOLANG = "solang"

    @property
    def label(self) -> str:
        return _COMPILER_LABELS[self]

    def __str__(self) -> str:
        return self.label


_LANGUAGE_LABELS: dict[Language, str] = {
    Language.INK: "ink!",
    Language.SOLIDITY: "Solidity",
    Language.ASSEMBLY_SCRIPT: "AssemblyScript",
}

_COMPILER_LABELS: dict[Compiler, str] = {
    Compiler.RUSTC: "rustc",
    Compiler.SOLANG: "solang",
}


class SourceLanguage(BaseModel):
    """The language and version in which a smart contract is written.

    Serializes as a single ``"<label> <version>"`` string.
    """

    model_config = ConfigDict(frozen=True)

    language: Language
    version: Version

    @model_serializer
    def _serialize(self) -> str:
        return str(self)

    def __str__(self) -> str:
        return f"{self.language.label} {self.version}"


class SourceCompiler(BaseModel):
    """A compiler used to compile a smart contract, with its version."""

    model_config = ConfigDict(frozen=True)

    compiler: Compiler
    version: Version

    @model_serializer
    def _serialize(self) -> str:
        return str(self)

    def __str__(self) -> str:
        return f"{self.compiler.label} {self.version}"


class Source(BaseModel):
    """Provenance of the compiled contract.

    ``hash``, ``language`` and ``compiler`` are required. ``wasm`` is absent
    when metadata is emitted separately from the binary, and is then omitted
    from the serialized form.
    """

    model_config = ConfigDict(frozen=True)

    hash: CodeHash
    language: SourceLanguage
    compiler: SourceCompiler
    wasm: SourceWasm | None = None

    @model_serializer(mode="wrap")
    def _omit_missing_wasm(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        if data.get("wasm") is None:
            data.pop("wasm", None)
        return data

    def without_wasm(self) -> Source:
        """Return a copy of this source with the Wasm payload removed."""
        if self.wasm is None:
            return self
        return self.model_copy(update={"wasm": None})
