"""Rich rendering of build artifact summaries.

Turns a ``GenerationResult`` into the human-readable summary shown after a
build: the Wasm size before and after optimization, followed by the list of
written files.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from contract_metadata.models.artifacts import GenerateArtifacts, GenerationResult


def _bold(text: str) -> str:
    return f"[bold]{escape(text)}[/bold]"


def render_size_diff(result: GenerationResult) -> str:
    """Render the original/optimized size line, or ``""`` if not optimized."""
    if result.optimization_result is None:
        return ""
    original, optimized = result.display_optimization()
    return (
        f"\nOriginal wasm size: {_bold(f'{original:.1f}K')}, "
        f"Optimized: {_bold(f'{optimized:.1f}K')}\n\n"
    )


def render_generation_result(
    artifacts: GenerateArtifacts, result: GenerationResult
) -> str:
    """Render the build summary as Rich markup."""
    size_diff = render_size_diff(result)

    if artifacts is GenerateArtifacts.CODE_ONLY:
        if result.dest_wasm is None:
            raise ValueError("wasm path must exist")
        return (
            f"{size_diff}Your contract's code is ready. You can find it here:\n"
            f"{_bold(str(result.dest_wasm))}"
        )

    lines = [
        f"{size_diff}Your contract artifacts are ready. You can find them in:\n"
        f"{_bold(str(result.target_directory))}\n"
    ]
    if result.dest_bundle is not None:
        lines.append(
            f"  - {_bold(GenerationResult.display_name(result.dest_bundle))} (code + metadata)"
        )
    if result.dest_wasm is not None:
        lines.append(
            f"  - {_bold(GenerationResult.display_name(result.dest_wasm))} (the contract's code)"
        )
    if result.dest_metadata is not None:
        lines.append(
            f"  - {_bold(GenerationResult.display_name(result.dest_metadata))} (the contract's metadata)"
        )
    return "\n".join(lines)


def print_generation_result(
    artifacts: GenerateArtifacts,
    result: GenerationResult,
    console: Console | None = None,
) -> None:
    """Print the build summary through a Rich console."""
    console = console or Console()
    console.print(render_generation_result(artifacts, result))
