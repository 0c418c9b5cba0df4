"""Write-once builder for :class:`~contract_metadata.models.contract.Contract`.

Each setter may be called at most once. Setting a field twice, passing an
empty authors list, an invalid version or an invalid URL are caller bugs
and raise :class:`BuilderContractError` immediately; the previously stored
value is never overwritten.

Missing required fields are only reported by :meth:`ContractBuilder.build`,
which raises the recoverable :class:`MissingFieldsError`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from pydantic import AnyUrl, TypeAdapter, ValidationError

from contract_metadata.models.contract import Contract
from contract_metadata.models.versioning import parse_version

logger = logging.getLogger(__name__)

_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)

# Order in which missing required fields are reported.
REQUIRED_FIELDS: tuple[str, ...] = ("name", "version", "authors")


class BuilderContractError(RuntimeError):
    """Raised when the builder is misused by the calling code."""


class FieldAlreadySetError(BuilderContractError):
    """Raised when a write-once builder field is set a second time."""

    def __init__(self, field: str) -> None:
        super().__init__(f"{field} has already been set")
        self.field = field


class EmptyAuthorsError(BuilderContractError):
    """Raised when an empty authors collection is supplied."""

    def __init__(self) -> None:
        super().__init__("must have at least one author")


class MissingFieldsError(ValueError):
    """Raised by ``build()`` when required fields have not been supplied.

    ``missing`` lists every missing field in the order name, version, authors.
    """

    def __init__(self, missing: list[str]) -> None:
        self.missing = list(missing)
        super().__init__(
            f"Missing required non-default fields: {', '.join(self.missing)}"
        )


class ContractBuilder:
    """Accumulates contract fields and produces a frozen ``Contract``.

    Usage
    -----
    >>> contract = (
    ...     Contract.builder()
    ...     .name("incrementer")
    ...     .version("2.1.0")
    ...     .authors(["Parity Technologies <admin@parity.io>"])
    ...     .build()
    ... )
    """

    def __init__(self) -> None:
        self._fields: dict[str, Any] = {}

    def _ensure_unset(self, field: str) -> None:
        if field in self._fields:
            logger.error("Rejected second assignment of contract field '%s'", field)
            raise FieldAlreadySetError(field)

    def _set_once(self, field: str, value: Any) -> ContractBuilder:
        self._ensure_unset(field)
        self._fields[field] = value
        return self

    # ------------------------------------------------------------------
    # Required fields
    # ------------------------------------------------------------------

    def name(self, name: str) -> ContractBuilder:
        """Set the contract name (required)."""
        name = str(name)
        if not name:
            raise BuilderContractError("name must not be empty")
        return self._set_once("name", name)

    def version(self, version: str) -> ContractBuilder:
        """Set the contract version (required, semantic version)."""
        try:
            parsed = parse_version(str(version))
        except ValidationError as exc:
            raise BuilderContractError(
                f"version {version!r} is not a valid semantic version"
            ) from exc
        return self._set_once("version", parsed)

    def authors(self, authors: Iterable[str]) -> ContractBuilder:
        """Set the contract authors (required, at least one)."""
        self._ensure_unset("authors")
        collected = tuple(str(author) for author in authors)
        if not collected:
            raise EmptyAuthorsError()
        return self._set_once("authors", collected)

    # ------------------------------------------------------------------
    # Optional fields
    # ------------------------------------------------------------------

    def description(self, description: str) -> ContractBuilder:
        """Set the contract description (optional)."""
        return self._set_once("description", str(description))

    def documentation(self, documentation: str | AnyUrl) -> ContractBuilder:
        """Set the contract documentation URL (optional)."""
        return self._set_once("documentation", self._parse_url("documentation", documentation))

    def repository(self, repository: str | AnyUrl) -> ContractBuilder:
        """Set the contract repository URL (optional)."""
        return self._set_once("repository", self._parse_url("repository", repository))

    def homepage(self, homepage: str | AnyUrl) -> ContractBuilder:
        """Set the contract homepage URL (optional)."""
        return self._set_once("homepage", self._parse_url("homepage", homepage))

    def license(self, license: str) -> ContractBuilder:
        """Set the contract license identifier (optional)."""
        return self._set_once("license", str(license))

    @staticmethod
    def _parse_url(field: str, value: str | AnyUrl) -> AnyUrl:
        try:
            return _URL_ADAPTER.validate_python(str(value))
        except ValidationError as exc:
            raise BuilderContractError(
                f"{field} {value!r} is not a valid absolute URL"
            ) from exc

    # ------------------------------------------------------------------
    # Finalize
    # ------------------------------------------------------------------

    def missing_fields(self) -> list[str]:
        """Return the required fields not yet supplied, in report order."""
        return [field for field in REQUIRED_FIELDS if field not in self._fields]

    def build(self) -> Contract:
        """Finalize construction of the ``Contract``.

        The builder is left untouched, so ``build()`` may be retried after
        supplying missing fields.

        Raises ``MissingFieldsError`` if any required field is missing.
        """
        missing = self.missing_fields()
        if missing:
            raise MissingFieldsError(missing)
        return Contract(**self._fields)
