"""Microfrontend scaffolder -- instantiates the template root for a new microfrontend.

Quick usage::

    from pathlib import Path

    from mfe_toolkit.config import ToolkitConfig
    from mfe_toolkit.scaffolder import StaticChoiceProvider, create_microfrontend

    result = await create_microfrontend(
        ["billing-form"],
        ToolkitConfig(project_root=Path(".")),
        StaticChoiceProvider("desktop"),
    )
    # result.written -> ["package.json", ..., "src/desktop-billing-form.tsx"]
"""

from mfe_toolkit.scaffolder.generator import MicrofrontendGenerator, create_microfrontend
from mfe_toolkit.scaffolder.materializer import (
    DEFAULT_COPY_SPEC,
    CopyEntry,
    materialize_directory,
    materialize_file,
)
from mfe_toolkit.scaffolder.placeholders import Placeholder, build_placeholder_map, substitute
from mfe_toolkit.scaffolder.resolver import (
    GenerationConfig,
    Platform,
    RichChoiceProvider,
    StaticChoiceProvider,
    resolve_generation_config,
)

__all__ = [
    "DEFAULT_COPY_SPEC",
    "CopyEntry",
    "GenerationConfig",
    "MicrofrontendGenerator",
    "Placeholder",
    "Platform",
    "RichChoiceProvider",
    "StaticChoiceProvider",
    "build_placeholder_map",
    "create_microfrontend",
    "materialize_directory",
    "materialize_file",
    "resolve_generation_config",
    "substitute",
]
