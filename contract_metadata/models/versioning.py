"""Semantic version type shared by contract and toolchain models."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, TypeAdapter

# SemVer 2.0: MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]
SEMVER_PATTERN = (
    r"^(?:0|[1-9]\d*)\.(?:0|[1-9]\d*)\.(?:0|[1-9]\d*)"
    r"(?:-(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*)?"
    r"(?:\+[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*)?$"
)

Version = Annotated[
    str,
    Field(
        pattern=SEMVER_PATTERN,
        description="Semantic version (MAJOR.MINOR.PATCH), optional pre-release/build.",
    ),
]

_VERSION_ADAPTER: TypeAdapter[str] = TypeAdapter(Version)


def parse_version(text: str) -> str:
    """Validate ``text`` as a semantic version and return it.

    Raises ``pydantic.ValidationError`` when the string is not valid semver.
    """
    return _VERSION_ADAPTER.validate_python(text)
