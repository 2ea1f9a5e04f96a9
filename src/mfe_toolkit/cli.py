"""Command-line entry points.

Usage::

    create-microfrontend <name> [description] [author] [--platform P | --no-platform]
    prepare-integration <microfrontend-name>

Both commands accept ``--root`` to point at the monorepo root (default: the
``MFE_PROJECT_ROOT`` environment variable, then the current directory).
These functions are the only place that turns a failed
:class:`~mfe_toolkit.results.CommandResult` into a process exit status.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import NoReturn

from .config import ToolkitConfig
from .integrator import prepare_integration
from .results import CommandResult, ExitReason
from .scaffolder import RichChoiceProvider, StaticChoiceProvider, create_microfrontend
from .scaffolder.resolver import ChoiceProvider, Platform
from .utils import print_error, print_usage

CREATE_USAGE = "create-microfrontend <name> [description] [author]"
CREATE_EXAMPLES = [
    'create-microfrontend my-page "My page" "Jane Doe"',
    'create-microfrontend product-catalog "Product catalog"',
    "create-microfrontend billing-form --platform desktop",
]

INTEGRATE_USAGE = "prepare-integration <microfrontend-name>"
INTEGRATE_EXAMPLES = [
    "prepare-integration my-page",
    "prepare-integration product-catalog",
]


class _ArgumentParser(argparse.ArgumentParser):
    """argparse, but invalid options exit with status 1 like every other failure."""

    def error(self, message: str) -> NoReturn:
        print_error(message)
        print_usage(self.format_usage().strip().removeprefix("usage: "), [])
        sys.exit(1)


# ---------------------------------------------------------------------------
# create-microfrontend
# ---------------------------------------------------------------------------


def build_create_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="create-microfrontend",
        description="Create a new microfrontend from the template directory",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Examples:\n" + "\n".join(f"  {e}" for e in CREATE_EXAMPLES),
    )
    parser.add_argument(
        "positionals",
        nargs="*",
        metavar="name [description] [author]",
        help="Microfrontend name, optional description and author",
    )
    platform = parser.add_mutually_exclusive_group()
    platform.add_argument(
        "--platform",
        choices=[p.value for p in Platform],
        default=None,
        help="Target platform (prompted for when omitted)",
    )
    platform.add_argument(
        "--no-platform",
        action="store_true",
        help="Do not ask for a platform; use the name without a prefix",
    )
    _add_common_options(parser)
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Fail when a template leaves unknown {{PLACEHOLDERS}} behind",
    )
    return parser


def create_main(argv: Sequence[str] | None = None) -> None:
    """Entry point for ``create-microfrontend``."""
    args = build_create_parser().parse_args(argv)
    config = ToolkitConfig.from_env(
        project_root=args.root,
        strict_placeholders=args.strict,
    )

    provider: ChoiceProvider | None
    if args.no_platform:
        provider = None
    elif args.platform:
        provider = StaticChoiceProvider(args.platform)
    else:
        provider = RichChoiceProvider()

    result = asyncio.run(create_microfrontend(args.positionals, config, provider))
    _exit(result, "Failed to create microfrontend", CREATE_USAGE, CREATE_EXAMPLES)


# ---------------------------------------------------------------------------
# prepare-integration
# ---------------------------------------------------------------------------


def build_integrate_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="prepare-integration",
        description="Prepare a microfrontend for integration into the host project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Examples:\n" + "\n".join(f"  {e}" for e in INTEGRATE_EXAMPLES),
    )
    parser.add_argument(
        "positionals",
        nargs="*",
        metavar="microfrontend-name",
        help="Name of the directory under src/microfrontends",
    )
    _add_common_options(parser)
    return parser


def integrate_main(argv: Sequence[str] | None = None) -> None:
    """Entry point for ``prepare-integration``."""
    args = build_integrate_parser().parse_args(argv)
    config = ToolkitConfig.from_env(project_root=args.root)
    result = asyncio.run(prepare_integration(args.positionals, config))
    _exit(result, "Failed to prepare for integration", INTEGRATE_USAGE, INTEGRATE_EXAMPLES)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Monorepo root (default: $MFE_PROJECT_ROOT or the current directory)",
    )


def _exit(result: CommandResult, failure_title: str, usage: str, examples: list[str]) -> None:
    if result.success:
        return
    if result.reason is ExitReason.IO_ERROR:
        print_error(f"{failure_title}: {result.message}")
    else:
        print_error(result.message)
    if result.reason in (ExitReason.USAGE, ExitReason.ABORTED):
        print_usage(usage, examples)
    if result.reason is not ExitReason.USAGE and result.written:
        print_error(
            f"{len(result.written)} file(s) already written under {result.target} were left in place"
        )
    sys.exit(result.exit_code)
