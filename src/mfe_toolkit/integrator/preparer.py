"""Integration-preparation orchestrator.

Copies ``src/microfrontends/<name>`` into ``integration-ready/<name>``,
replaces its ``package.json`` with the host-project variant and adds an
integration checklist.  An existing output directory is merged into.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from rich.markup import escape

from ..config import ToolkitConfig
from ..results import CommandResult, ToolkitError, UsageError
from ..scaffolder.materializer import ensure_present, materialize_directory
from ..scaffolder.resolver import validate_name
from ..utils import console, print_next_steps, print_success
from .checklist import CHECKLIST_FILE, ChecklistEmitter
from .manifest import MANIFEST_FILE, read_manifest, transform_manifest, write_manifest


class IntegrationPreparer:
    """Prepares one existing microfrontend for the host project."""

    def __init__(self, config: ToolkitConfig, checklist: ChecklistEmitter | None = None) -> None:
        self.config = config
        self.checklist = checklist or ChecklistEmitter(config.manifest)
        self.written: list[str] = []

    async def prepare(self, name: str) -> Path:
        """Run every step in order and return the output directory.

        Raises:
            SourceMissingError: ``src/microfrontends/<name>`` does not exist.
            OSError, ValueError: Reading, parsing or writing failed.
        """
        self.written = []
        source_dir = self.config.target_path(name)
        output_dir = self.config.integration_target_path(name)

        console.print(f'[bold]Preparing microfrontend "{escape(name)}" for integration[/bold]')
        console.print(f"[dim]Source directory:[/dim] {escape(str(source_dir))}", highlight=False)
        console.print(f"[dim]Output directory:[/dim] {escape(str(output_dir))}", highlight=False)

        await ensure_present(source_dir, "Microfrontend directory")

        manifest = await read_manifest(source_dir)
        console.print(f"[green]Read[/green] {MANIFEST_FILE}")

        updated = transform_manifest(manifest, name, self.config.manifest)
        console.print(f"[green]Updated[/green] {MANIFEST_FILE} for integration")

        copied = await materialize_directory(source_dir, output_dir)
        self.written.extend(p.relative_to(output_dir).as_posix() for p in copied)
        console.print(f"[green]Copied[/green] {len(copied)} microfrontend file(s)")

        await write_manifest(output_dir, updated)
        console.print(f"[green]Wrote[/green] updated {MANIFEST_FILE}")

        await self.checklist.write(name, output_dir)
        self.written.append(CHECKLIST_FILE)
        console.print(f"[green]Created[/green] {CHECKLIST_FILE}")

        return output_dir

    async def run(self, name: str) -> CommandResult:
        """Run :meth:`prepare` and fold any failure into a result."""
        output_dir = self.config.integration_target_path(name)
        try:
            await self.prepare(name)
        except Exception as exc:
            return CommandResult.from_error(exc, target=output_dir, written=self.written)

        console.print()
        print_success("Microfrontend is ready for integration!")
        print_next_steps([
            f"Review the files in: {output_dir}",
            f"Read the integration checklist: {CHECKLIST_FILE}",
            "Copy the directory into the host project",
            "Follow the checklist",
        ])
        return CommandResult(target=output_dir, written=list(self.written))


async def prepare_integration(args: Sequence[str], config: ToolkitConfig) -> CommandResult:
    """Validate *args* (``[name]``) and prepare that microfrontend."""
    try:
        name = _parse_name(args)
    except ToolkitError as exc:
        return CommandResult.from_error(exc)
    return await IntegrationPreparer(config).run(name)


def _parse_name(args: Sequence[str]) -> str:
    if len(args) > 1:
        raise UsageError(f"Too many arguments: {' '.join(args[1:])}")
    return validate_name(args[0] if args else "")
