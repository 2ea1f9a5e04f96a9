"""Microfrontend toolkit configuration.

Typed settings for both command-line tools. All settings use Pydantic v2
models so they can be validated at construction time and filled from
environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

_TRUTHY = {"1", "true", "yes", "on"}


class ManifestDefaults(BaseModel):
    """Fixed values written into a manifest prepared for the host project."""

    package_scope: str = Field(default="@growth-blocks", description="npm scope of the host monorepo")
    stub_version: str = Field(default="0.0.0-stub")
    repository: dict[str, str] = Field(
        default_factory=lambda: {
            "type": "git",
            "url": "https://gitlab.tcsbank.ru/ded-pwa-forms/growth-blocks",
        }
    )
    boxy_config: dict[str, Any] = Field(
        default_factory=lambda: {"schema": {"version": "1.0"}},
        description="Nested build-tool block, written as ``boxyConfig``",
    )
    peer_dependencies: dict[str, str] = Field(
        default_factory=lambda: {
            "@growth-blocks/mocks": "^0.0.0-stub",
            "classnames": "^0.0.0-stub",
        },
        description="Entries merged into ``peerDependencies``",
    )

    def package_name(self, microfrontend_name: str) -> str:
        """Scoped package identifier, e.g. ``@growth-blocks/my-page``."""
        return f"{self.package_scope}/{microfrontend_name}"


class ToolkitConfig(BaseModel):
    """Global toolkit configuration.

    Instances are created once by a CLI entry point (usually through
    :meth:`from_env`) and handed to the generator or the integration
    preparer.
    """

    project_root: Path = Field(default=Path("."))
    microfrontends_dir: str = Field(default="src/microfrontends")
    template_dir_name: str = Field(default="_template")
    integration_dir: str = Field(default="integration-ready")
    strict_placeholders: bool = Field(
        default=False,
        description="Fail instead of warn when a template leaves unknown tokens behind",
    )
    manifest: ManifestDefaults = Field(default_factory=ManifestDefaults)

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def microfrontends_path(self) -> Path:
        """Directory holding every microfrontend of the monorepo."""
        return self.project_root / self.microfrontends_dir

    @property
    def template_path(self) -> Path:
        """Template root used to seed new microfrontends."""
        return self.microfrontends_path / self.template_dir_name

    @property
    def integration_path(self) -> Path:
        """Directory receiving integration-ready copies."""
        return self.project_root / self.integration_dir

    def target_path(self, name: str) -> Path:
        return self.microfrontends_path / name

    def integration_target_path(self, name: str) -> Path:
        return self.integration_path / name

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls, **overrides: Any) -> "ToolkitConfig":
        """Build a ``ToolkitConfig`` from environment variables.

        Recognised variables (all optional):
            MFE_PROJECT_ROOT, MFE_MICROFRONTENDS_DIR, MFE_TEMPLATE_DIR,
            MFE_INTEGRATION_DIR, MFE_PACKAGE_SCOPE, MFE_STRICT_PLACEHOLDERS.

        Keyword *overrides* win over the environment; ``None`` values are
        ignored so CLI options can be passed through unconditionally.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("MFE_PROJECT_ROOT"):
            kwargs["project_root"] = Path(os.environ["MFE_PROJECT_ROOT"])
        if os.environ.get("MFE_MICROFRONTENDS_DIR"):
            kwargs["microfrontends_dir"] = os.environ["MFE_MICROFRONTENDS_DIR"]
        if os.environ.get("MFE_TEMPLATE_DIR"):
            kwargs["template_dir_name"] = os.environ["MFE_TEMPLATE_DIR"]
        if os.environ.get("MFE_INTEGRATION_DIR"):
            kwargs["integration_dir"] = os.environ["MFE_INTEGRATION_DIR"]
        if os.environ.get("MFE_STRICT_PLACEHOLDERS"):
            kwargs["strict_placeholders"] = (
                os.environ["MFE_STRICT_PLACEHOLDERS"].strip().lower() in _TRUTHY
            )
        if os.environ.get("MFE_PACKAGE_SCOPE"):
            kwargs["manifest"] = ManifestDefaults(package_scope=os.environ["MFE_PACKAGE_SCOPE"])

        kwargs.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**kwargs)
