"""New-microfrontend orchestrator.

Takes a resolved :class:`GenerationConfig` and instantiates the template
root (``src/microfrontends/_template`` by default) into
``src/microfrontends/<name>``: guard the target, render each entry of the
copy specification in order, then print the follow-up steps.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from rich.markup import escape

from ..config import ToolkitConfig
from ..results import CommandResult, ToolkitError
from ..utils import (
    console,
    print_next_steps,
    print_success,
    print_summary_table,
    print_warning,
)
from .materializer import (
    DEFAULT_COPY_SPEC,
    CopyEntry,
    ensure_absent,
    ensure_present,
    materialize_file,
)
from .placeholders import build_placeholder_map, substitute
from .resolver import ChoiceProvider, GenerationConfig, resolve_generation_config


class MicrofrontendGenerator:
    """Creates one microfrontend from the template root.

    Attributes:
        config: Toolkit configuration (paths, strictness).
        copy_spec: Ordered ``(template, target)`` pairs to render.
        written: Target-relative paths written by the latest run, kept so a
            failed run can report what it left on disk.
    """

    def __init__(
        self,
        config: ToolkitConfig,
        copy_spec: Sequence[CopyEntry] = DEFAULT_COPY_SPEC,
    ) -> None:
        self.config = config
        self.copy_spec = tuple(copy_spec)
        self.written: list[str] = []

    # -- Public API --------------------------------------------------------

    async def generate(self, gen: GenerationConfig) -> Path:
        """Materialize every file of the copy specification.

        Returns:
            Path to the new microfrontend directory.

        Raises:
            TargetExistsError: The target directory is already present.
            SourceMissingError: The template root does not exist.
            UnresolvedPlaceholderError: Strict mode and a rendered file kept
                an unknown token.
            OSError: Any read or write failure; earlier files stay on disk.
        """
        self.written = []
        target_dir = self.config.target_path(gen.name)
        template_dir = self.config.template_path

        console.print(f"[bold]Creating microfrontend:[/bold] {escape(gen.name)}")
        console.print(f"[dim]Target directory:[/dim] {escape(str(target_dir))}", highlight=False)

        await ensure_absent(target_dir, gen.name)
        await ensure_present(template_dir, "Template directory")

        placeholders = build_placeholder_map(gen)
        for entry in self.copy_spec:
            relative_target = substitute(entry.target, placeholders)
            leftovers = await materialize_file(
                template_dir / entry.template,
                target_dir / relative_target,
                placeholders,
                strict=self.config.strict_placeholders,
            )
            self.written.append(relative_target)
            console.print(f"[green]Created file:[/green] {escape(relative_target)}", highlight=False)
            if leftovers:
                print_warning(
                    f"{relative_target} still contains unknown placeholder(s): "
                    f"{', '.join(leftovers)}"
                )

        return target_dir

    async def run(self, gen: GenerationConfig) -> CommandResult:
        """Run :meth:`generate` and fold any failure into a result."""
        target_dir = self.config.target_path(gen.name)
        try:
            await self.generate(gen)
        except Exception as exc:
            # ToolkitError keeps its reason; anything else counts as I/O.
            return CommandResult.from_error(exc, target=target_dir, written=self.written)

        console.print()
        print_success("Microfrontend created successfully!")
        print_summary_table(
            {
                "Name": gen.name,
                "Component": gen.component_name,
                "Description": gen.description,
                "Author": gen.author,
                "Platform": gen.platform.value if gen.platform else "-",
            },
            title="Microfrontend",
        )
        print_next_steps(self.next_steps(gen))
        return CommandResult(target=target_dir, written=list(self.written))

    def next_steps(self, gen: GenerationConfig) -> list[str]:
        relative = Path(self.config.microfrontends_dir) / gen.name
        return [
            f"Change to the directory: cd {relative.as_posix()}",
            "Install dependencies: npm install",
            f"Implement the {gen.component_name} component logic",
            "Add tests and stories",
            "Start Storybook: npm run storybook",
        ]


async def create_microfrontend(
    args: Sequence[str],
    config: ToolkitConfig,
    choice_provider: ChoiceProvider | None = None,
) -> CommandResult:
    """Resolve *args* and create the microfrontend.

    This is the whole creation command minus process exit handling.
    """
    try:
        gen = resolve_generation_config(args, choice_provider)
    except ToolkitError as exc:
        return CommandResult.from_error(exc)
    return await MicrofrontendGenerator(config).run(gen)
