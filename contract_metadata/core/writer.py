"""Artifact writer — persists metadata documents next to the contract code.

Layout, for a contract named ``<name>``::

    {target_directory}/<name>.contract   full document, Wasm included
    {target_directory}/<name>.json       metadata only, Wasm stripped
    {target_directory}/<name>.wasm       raw contract code

With ``GenerateArtifacts.CODE_ONLY`` only the ``.wasm`` file is written.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from contract_metadata import config
from contract_metadata.models.artifacts import (
    GenerateArtifacts,
    GenerationResult,
    OptimizationResult,
)
from contract_metadata.models.metadata import ContractMetadata

logger = logging.getLogger(__name__)

_FROM_SETTINGS: Any = object()


class MetadataWriter:
    """Writes contract artifacts into a target directory.

    Parameters
    ----------
    target_directory:
        Directory receiving the output files. Created if missing. Defaults
        to the configured ``target_directory``.
    indent:
        JSON indentation for the ``.contract`` and ``.json`` files. Defaults
        to the configured ``json_indent``; ``None`` writes compact JSON.
    settings:
        Settings to read defaults from. Defaults to the module singleton.
    """

    def __init__(
        self,
        target_directory: Path | str | None = None,
        *,
        indent: int | None = _FROM_SETTINGS,
        settings: config.MetadataSettings | None = None,
    ) -> None:
        self._settings = settings or config.settings
        self._target = Path(
            target_directory if target_directory is not None else self._settings.target_directory
        )
        self._indent = self._settings.json_indent if indent is _FROM_SETTINGS else indent

    @property
    def target_directory(self) -> Path:
        return self._target

    def write(
        self,
        metadata: ContractMetadata,
        artifacts: GenerateArtifacts | None = None,
        *,
        wasm: bytes | None = None,
        optimization_result: OptimizationResult | None = None,
    ) -> GenerationResult:
        """Write the requested artifacts for ``metadata``.

        For ``ALL`` the bundle is written first, then the Wasm payload is
        removed from ``metadata`` in place before writing the metadata-only
        file. ``artifacts`` defaults to the configured ``generate`` value.

        Raises ``ValueError`` if the contract name is not a plain file name.
        """
        if artifacts is None:
            artifacts = self._settings.generate
        name = _artifact_stem(metadata.name)
        self._target.mkdir(parents=True, exist_ok=True)

        dest_wasm: Path | None = None
        if wasm is not None:
            dest_wasm = self._target / f"{name}.wasm"
            dest_wasm.write_bytes(wasm)
            logger.debug("MetadataWriter: wrote %d bytes of code to %s", len(wasm), dest_wasm)

        if not artifacts.includes_metadata:
            return GenerationResult(
                target_directory=self._target,
                dest_wasm=dest_wasm,
                optimization_result=optimization_result,
            )

        dest_bundle = self._target / f"{name}.contract"
        dest_bundle.write_bytes(metadata.to_json_bytes(indent=self._indent))
        logger.debug("MetadataWriter: wrote bundle to %s", dest_bundle)

        metadata.remove_source_wasm_attribute()
        dest_metadata = self._target / f"{name}.json"
        dest_metadata.write_bytes(metadata.to_json_bytes(indent=self._indent))
        logger.debug("MetadataWriter: wrote metadata to %s", dest_metadata)

        logger.info("Wrote artifacts for contract '%s' to %s", name, self._target)
        return GenerationResult(
            target_directory=self._target,
            dest_metadata=dest_metadata,
            dest_wasm=dest_wasm,
            dest_bundle=dest_bundle,
            optimization_result=optimization_result,
        )


def _artifact_stem(name: str) -> str:
    """Return ``name`` if it can be used as a file name inside the target directory."""
    if name in {".", ".."} or Path(name).name != name or "\\" in name:
        raise ValueError(f"Contract name {name!r} cannot be used as an artifact file name")
    return name
