"""Tests for ContractBuilder — write-once fields, required-field reporting."""

from __future__ import annotations

import pytest

from contract_metadata.core.builder import (
    BuilderContractError,
    ContractBuilder,
    EmptyAuthorsError,
    FieldAlreadySetError,
    MissingFieldsError,
)
from contract_metadata.models.contract import Contract

AUTHOR = "Parity Technologies <admin@parity.io>"


class TestMissingFields:
    def test_missing_name(self):
        builder = Contract.builder().version("2.1.0").authors([AUTHOR])
        with pytest.raises(MissingFieldsError) as exc_info:
            builder.build()
        assert exc_info.value.missing == ["name"]
        assert str(exc_info.value) == "Missing required non-default fields: name"

    def test_missing_version(self):
        builder = Contract.builder().name("incrementer").authors([AUTHOR])
        with pytest.raises(MissingFieldsError) as exc_info:
            builder.build()
        assert str(exc_info.value) == "Missing required non-default fields: version"

    def test_missing_authors(self):
        builder = Contract.builder().name("incrementer").version("2.1.0")
        with pytest.raises(MissingFieldsError) as exc_info:
            builder.build()
        assert exc_info.value.missing == ["authors"]

    def test_missing_all_in_fixed_order(self):
        with pytest.raises(MissingFieldsError) as exc_info:
            Contract.builder().build()
        assert exc_info.value.missing == ["name", "version", "authors"]
        assert (
            str(exc_info.value)
            == "Missing required non-default fields: name, version, authors"
        )

    def test_missing_name_and_version(self):
        with pytest.raises(MissingFieldsError) as exc_info:
            Contract.builder().authors([AUTHOR]).build()
        assert str(exc_info.value) == "Missing required non-default fields: name, version"

    def test_missing_fields_is_value_error(self):
        with pytest.raises(ValueError):
            ContractBuilder().build()

    def test_build_can_be_retried(self):
        builder = Contract.builder().name("incrementer").version("2.1.0")
        with pytest.raises(MissingFieldsError):
            builder.build()
        builder.authors([AUTHOR])
        contract = builder.build()
        assert contract.authors == (AUTHOR,)
        assert builder.build() == contract


class TestWriteOnce:
    @pytest.mark.parametrize(
        ("setter", "first", "second"),
        [
            ("name", "a", "b"),
            ("version", "1.0.0", "2.0.0"),
            ("authors", ["a"], ["b"]),
            ("description", "a", "b"),
            ("documentation", "http://a.example/", "http://b.example/"),
            ("repository", "http://a.example/", "http://b.example/"),
            ("homepage", "http://a.example/", "http://b.example/"),
            ("license", "MIT", "Apache-2.0"),
        ],
    )
    def test_second_set_raises(self, setter: str, first, second):
        builder = ContractBuilder()
        getattr(builder, setter)(first)
        with pytest.raises(FieldAlreadySetError) as exc_info:
            getattr(builder, setter)(second)
        assert exc_info.value.field == setter
        assert "already been set" in str(exc_info.value)

    def test_first_value_kept(self):
        builder = Contract.builder().name("first").version("1.0.0").authors(["a"])
        with pytest.raises(FieldAlreadySetError):
            builder.name("second")
        assert builder.build().name == "first"

    def test_contract_errors_are_runtime_errors(self):
        builder = ContractBuilder().name("a")
        with pytest.raises(RuntimeError):
            builder.name("b")


class TestValidation:
    def test_empty_authors(self):
        with pytest.raises(EmptyAuthorsError):
            ContractBuilder().authors([])

    def test_empty_authors_leaves_field_unset(self):
        builder = ContractBuilder().name("a").version("1.0.0")
        with pytest.raises(EmptyAuthorsError):
            builder.authors(iter(()))
        assert builder.missing_fields() == ["authors"]

    def test_authors_from_any_iterable(self):
        contract = (
            ContractBuilder().name("a").version("1.0.0").authors(a for a in ("x", "y")).build()
        )
        assert contract.authors == ("x", "y")

    def test_empty_name(self):
        with pytest.raises(BuilderContractError):
            ContractBuilder().name("")

    @pytest.mark.parametrize("version", ["1", "1.0", "v1.0.0", "01.0.0", ""])
    def test_invalid_version(self, version: str):
        with pytest.raises(BuilderContractError):
            ContractBuilder().version(version)

    @pytest.mark.parametrize("version", ["0.1.0", "1.46.0-nightly", "1.0.0-rc.1+build.5"])
    def test_valid_version(self, version: str):
        builder = ContractBuilder().version(version)
        assert builder.missing_fields() == ["name", "authors"]

    @pytest.mark.parametrize("url", ["not a url", "docs.rs", ""])
    def test_invalid_url(self, url: str):
        with pytest.raises(BuilderContractError):
            ContractBuilder().documentation(url)

    def test_invalid_url_leaves_field_unset(self):
        builder = ContractBuilder()
        with pytest.raises(BuilderContractError):
            builder.homepage("example")
        builder.homepage("http://example.com/")


class TestBuiltContract:
    def test_required_only(self):
        contract = Contract.builder().name("incrementer").version("2.1.0").authors([AUTHOR]).build()
        assert contract.description is None
        assert contract.model_dump(mode="json") == {
            "name": "incrementer",
            "version": "2.1.0",
            "authors": [AUTHOR],
        }

    def test_all_fields_in_declaration_order(self, make_contract):
        data = make_contract(full=True).model_dump(mode="json")
        assert list(data) == [
            "name",
            "version",
            "authors",
            "description",
            "documentation",
            "repository",
            "homepage",
            "license",
        ]
        assert data["documentation"] == "http://docs.rs/"
        assert data["repository"] == "http://github.com/paritytech/ink/"
        assert data["homepage"] == "http://example.com/"
        assert data["license"] == "Apache-2.0"

    def test_partial_optional_fields(self):
        contract = (
            Contract.builder()
            .name("flipper")
            .version("0.1.0")
            .authors(["A"])
            .license("MIT")
            .build()
        )
        assert list(contract.model_dump(mode="json")) == ["name", "version", "authors", "license"]

    def test_contract_frozen(self, make_contract):
        contract = make_contract()
        with pytest.raises(Exception):
            contract.name = "changed"
