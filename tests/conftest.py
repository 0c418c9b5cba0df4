"""Shared test fixtures for contract-metadata."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from contract_metadata.models.contract import Contract, User
from contract_metadata.models.metadata import ContractMetadata
from contract_metadata.models.source import (
    CodeHash,
    Compiler,
    Language,
    Source,
    SourceCompiler,
    SourceLanguage,
    SourceWasm,
)

AUTHOR = "Parity Technologies <admin@parity.io>"


@pytest.fixture
def tmp_dir(tmp_path: Path) -> Path:
    """Provide a temporary directory for written artifacts."""
    return tmp_path


@pytest.fixture
def language() -> SourceLanguage:
    return SourceLanguage(language=Language.INK, version="2.1.0")


@pytest.fixture
def compiler() -> SourceCompiler:
    return SourceCompiler(compiler=Compiler.RUSTC, version="1.46.0-nightly")


@pytest.fixture
def abi_json() -> dict[str, Any]:
    """Raw ABI JSON as produced by contract compilation."""
    return {"spec": {}, "storage": {}, "types": []}


@pytest.fixture
def user_json() -> dict[str, Any]:
    return {
        "more-user-provided-fields": ["and", "their", "values"],
        "some-user-provided-field": "and-its-value",
    }


# ---------------------------------------------------------------------------
# Factories — shared across test modules
# ---------------------------------------------------------------------------


@pytest.fixture
def make_source(
    language: SourceLanguage, compiler: SourceCompiler
) -> Callable[..., Source]:
    """Factory fixture: build a Source with a zero hash and optional Wasm."""

    def _factory(wasm: bytes | None = b"\x00\x01\x02", **overrides: Any) -> Source:
        defaults: dict[str, Any] = {
            "hash": CodeHash(bytes(32)),
            "language": language,
            "compiler": compiler,
            "wasm": SourceWasm(wasm) if wasm is not None else None,
        }
        defaults.update(overrides)
        return Source(**defaults)

    return _factory


@pytest.fixture
def make_contract() -> Callable[..., Contract]:
    """Factory fixture: build a Contract, optionally with every optional field."""

    def _factory(name: str = "incrementer", full: bool = False) -> Contract:
        builder = Contract.builder().name(name).version("2.1.0").authors([AUTHOR])
        if full:
            (
                builder.description("increment a value")
                .documentation("http://docs.rs/")
                .repository("http://github.com/paritytech/ink/")
                .homepage("http://example.com/")
                .license("Apache-2.0")
            )
        return builder.build()

    return _factory


@pytest.fixture
def make_metadata(
    make_source: Callable[..., Source],
    make_contract: Callable[..., Contract],
    abi_json: dict[str, Any],
) -> Callable[..., ContractMetadata]:
    """Factory fixture: assemble a ContractMetadata document."""

    def _factory(
        wasm: bytes | None = b"\x00\x01\x02",
        user: dict[str, Any] | None = None,
        abi: dict[str, Any] | None = None,
        full: bool = False,
        name: str = "incrementer",
    ) -> ContractMetadata:
        return ContractMetadata.new(
            make_source(wasm=wasm),
            make_contract(name=name, full=full),
            User(user) if user is not None else None,
            abi if abi is not None else dict(abi_json),
        )

    return _factory
