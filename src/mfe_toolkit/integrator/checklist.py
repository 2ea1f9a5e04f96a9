"""Integration checklist document.

Writes ``INTEGRATION_CHECKLIST.md`` next to the prepared microfrontend.  The
text depends only on the microfrontend name and the manifest defaults, never
on how earlier steps went.
"""

from __future__ import annotations

from pathlib import Path

from ..config import ManifestDefaults
from ..scaffolder.materializer import write_path
from ..templates import TemplateRenderer

CHECKLIST_FILE = "INTEGRATION_CHECKLIST.md"
CHECKLIST_TEMPLATE = "integration_checklist.md.j2"


class ChecklistEmitter:
    """Renders the bundled checklist template for one microfrontend."""

    def __init__(
        self,
        defaults: ManifestDefaults | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.defaults = defaults or ManifestDefaults()
        self.renderer = renderer or TemplateRenderer()

    def render(self, microfrontend_name: str) -> str:
        """Return the checklist text for *microfrontend_name*."""
        return self.renderer.render(CHECKLIST_TEMPLATE, self._context(microfrontend_name))

    async def write(self, microfrontend_name: str, output_dir: Path) -> Path:
        """Write the :meth:`render` output into *output_dir* and return its path."""
        return await write_path(output_dir / CHECKLIST_FILE, self.render(microfrontend_name))

    def _context(self, microfrontend_name: str) -> dict[str, object]:
        return {
            "microfrontend_name": microfrontend_name,
            "package_name": self.defaults.package_name(microfrontend_name),
            "stub_version": self.defaults.stub_version,
            "peer_dependencies": self.defaults.peer_dependencies,
        }
