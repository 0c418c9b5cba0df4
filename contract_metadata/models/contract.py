"""Contract-level descriptive metadata and free-form user metadata."""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Any

from pydantic import (
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field,
    RootModel,
    SerializerFunctionWrapHandler,
    model_serializer,
)

from contract_metadata.models.versioning import Version

if TYPE_CHECKING:
    from contract_metadata.core.builder import ContractBuilder


class Contract(BaseModel):
    """Metadata about a smart contract.

    ``name``, ``version`` and a non-empty ``authors`` list are required.
    Optional fields that are unset are omitted from the serialized form
    rather than written as ``null``. Construct through :meth:`builder`.
    """

    model_config = ConfigDict(frozen=True)

    name: Annotated[str, Field(min_length=1)]
    version: Version
    authors: Annotated[tuple[str, ...], Field(min_length=1)]
    description: str | None = None
    documentation: AnyUrl | None = None
    repository: AnyUrl | None = None
    homepage: AnyUrl | None = None
    license: str | None = None

    @classmethod
    def builder(cls) -> ContractBuilder:
        """Return a fresh builder for contract metadata."""
        from contract_metadata.core.builder import ContractBuilder

        return ContractBuilder()

    @model_serializer(mode="wrap")
    def _omit_unset(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        return {key: value for key, value in data.items() if value is not None}


class User(RootModel[dict[str, Any]]):
    """Additional user defined metadata, can be any valid JSON object."""

    model_config = ConfigDict(frozen=True)
