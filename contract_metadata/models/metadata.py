"""The contract metadata document.

A document combines a built ``Contract``, a ``Source``, optional ``User``
metadata and the raw ABI JSON generated during contract compilation. The ABI
keys are flattened into the top level of the serialized document, after the
fixed ``metadataVersion``, ``source``, ``contract`` and ``user`` keys.

Example
-------
>>> source = Source(
...     hash=CodeHash(bytes(32)),
...     language=SourceLanguage(language=Language.INK, version="2.1.0"),
...     compiler=SourceCompiler(compiler=Compiler.RUSTC, version="1.46.0-nightly"),
...     wasm=SourceWasm(b"\\x00"),
... )
>>> contract = Contract.builder().name("incrementer").version("2.1.0").authors(["A"]).build()
>>> metadata = ContractMetadata.new(source, contract, None, {"spec": {}})
>>> metadata.to_json_dict()["source"]["wasm"]
'0x00'
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    ValidationError,
    model_serializer,
)

from contract_metadata.core.encoding import canonical_json_bytes
from contract_metadata.models.contract import Contract, User
from contract_metadata.models.source import Source
from contract_metadata.models.versioning import Version, parse_version

logger = logging.getLogger(__name__)

METADATA_VERSION = "0.1.0"

# Keys written by the document itself; flattened ABI keys may not replace them.
RESERVED_KEYS: frozenset[str] = frozenset(
    {"metadataVersion", "metadata_version", "source", "contract", "user"}
)


def checked_metadata_version() -> str:
    """Return the document schema version, asserting it is valid semver."""
    try:
        return parse_version(METADATA_VERSION)
    except ValidationError as exc:
        raise AssertionError("METADATA_VERSION is a valid semver string") from exc


class ContractMetadata(BaseModel):
    """Smart contract metadata document.

    The document is frozen except for :meth:`remove_source_wasm_attribute`,
    which strips the Wasm payload when emitting a metadata-only artifact.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    metadata_version: Version = Field(
        default_factory=checked_metadata_version, serialization_alias="metadataVersion"
    )
    source: Source
    contract: Contract
    user: User | None = None
    # Raw JSON of the contract ABI, generated during contract compilation.
    abi: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def new(
        cls,
        source: Source,
        contract: Contract,
        user: User | None,
        abi: dict[str, Any],
    ) -> ContractMetadata:
        """Construct new contract metadata from already validated parts."""
        return cls(
            metadata_version=checked_metadata_version(),
            source=source,
            contract=contract,
            user=user,
            abi=abi,
        )

    def remove_source_wasm_attribute(self) -> None:
        """Remove the Wasm payload from the source, in place.

        Calling this on a document without Wasm is a no-op.
        """
        if self.source.wasm is None:
            return
        # The document is frozen; this is its single permitted mutation.
        object.__setattr__(self, "source", self.source.without_wasm())

    @model_serializer(mode="wrap")
    def _flatten_abi(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = {
            ("metadataVersion" if key == "metadata_version" else key): value
            for key, value in handler(self).items()
        }
        abi = data.pop("abi", None) or {}
        if data.get("user") is None:
            data.pop("user", None)
        for key, value in abi.items():
            if key in RESERVED_KEYS or key in data:
                logger.warning(
                    "Dropping ABI key '%s': it collides with a metadata field", key
                )
                continue
            data[key] = value
        return data

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def to_json_dict(self) -> dict[str, Any]:
        """Return the JSON-compatible document in canonical key order."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json_bytes(self, indent: int | None = 2) -> bytes:
        """Render the document as UTF-8 JSON bytes, preserving key order."""
        return canonical_json_bytes(self.to_json_dict(), indent=indent)

    def to_json(self, indent: int | None = 2) -> str:
        """Render the document as a JSON string, preserving key order."""
        return self.to_json_bytes(indent=indent).decode("utf-8")

    @property
    def name(self) -> str:
        """The contract name, used to name output artifacts."""
        return self.contract.name
