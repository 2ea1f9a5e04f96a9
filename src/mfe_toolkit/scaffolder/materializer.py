"""Guarded file materialization.

Two operations share one primitive, :func:`write_path`:

- :func:`materialize_file` renders a single template through the
  substitution engine and writes the text.
- :func:`materialize_directory` mirrors a whole tree byte-for-byte.

Existence guards (:func:`ensure_absent`, :func:`ensure_present`) run once,
before any write, and are not repeated per file.  Nothing is rolled back
when a later write fails.
"""

from __future__ import annotations

import asyncio
import os
from collections.abc import Mapping
from pathlib import Path
from typing import NamedTuple

from ..results import SourceMissingError, TargetExistsError, UnresolvedPlaceholderError
from .placeholders import Placeholder, find_unresolved, substitute


# ---------------------------------------------------------------------------
# Copy specification
# ---------------------------------------------------------------------------

class CopyEntry(NamedTuple):
    """One template file and where it lands, both relative paths.

    The target may itself contain placeholder tokens.
    """

    template: str
    target: str


COMPONENT_TEMPLATE = f"src/{Placeholder.COMPONENT_FILE_NAME.token}.tsx"

DEFAULT_COPY_SPEC: tuple[CopyEntry, ...] = (
    CopyEntry("package.json", "package.json"),
    CopyEntry("src/index.ts", "src/index.ts"),
    CopyEntry("src/types.ts", "src/types.ts"),
    CopyEntry("src/styles.module.css", "src/styles.module.css"),
    CopyEntry(
        "src/__stories__/index.stories.tsx.template",
        "src/__stories__/index.stories.tsx",
    ),
    CopyEntry(COMPONENT_TEMPLATE, COMPONENT_TEMPLATE),
)


# ---------------------------------------------------------------------------
# Guards
# ---------------------------------------------------------------------------

async def ensure_absent(path: Path, name: str) -> None:
    """Raise :class:`TargetExistsError` if anything exists at *path*."""
    if await asyncio.to_thread(os.path.lexists, path):
        raise TargetExistsError(path, name)


async def ensure_present(path: Path, what: str = "Directory") -> None:
    """Raise :class:`SourceMissingError` unless *path* is a directory."""
    if not await asyncio.to_thread(path.is_dir):
        raise SourceMissingError(path, what)


# ---------------------------------------------------------------------------
# Writing
# ---------------------------------------------------------------------------

async def write_path(path: Path, data: str | bytes) -> Path:
    """Create missing parent directories, then write *data* to *path*."""
    await asyncio.to_thread(_write_path, path, data)
    return path


async def materialize_file(
    template_path: Path,
    target_path: Path,
    placeholders: Mapping[str, str],
    *,
    strict: bool = False,
) -> list[str]:
    """Render *template_path* into *target_path*.

    Returns the unknown tokens still present in the rendered text, which the
    caller may report.  With *strict* set they raise
    :class:`UnresolvedPlaceholderError` instead and nothing is written.
    """
    content = await asyncio.to_thread(template_path.read_text, encoding="utf-8")
    rendered = substitute(content, placeholders)
    leftovers = find_unresolved(rendered)
    if leftovers and strict:
        raise UnresolvedPlaceholderError(str(target_path), leftovers)
    await write_path(target_path, rendered)
    return leftovers


async def materialize_directory(source_dir: Path, dest_dir: Path) -> list[Path]:
    """Mirror *source_dir* into *dest_dir*, copying file bytes unchanged.

    Symlinks are recreated as symlinks with the same target and never
    followed, so a link to a directory (or a link cycle) is not descended
    into.

    Returns the destination paths of every copied file and link, in traversal
    order.
    """
    await asyncio.to_thread(dest_dir.mkdir, parents=True, exist_ok=True)
    entries = await asyncio.to_thread(lambda: sorted(source_dir.iterdir()))

    copied: list[Path] = []
    for entry in entries:
        destination = dest_dir / entry.name
        if await asyncio.to_thread(entry.is_symlink):
            await asyncio.to_thread(_copy_symlink, entry, destination)
            copied.append(destination)
        elif await asyncio.to_thread(entry.is_dir):
            copied.extend(await materialize_directory(entry, destination))
        else:
            data = await asyncio.to_thread(entry.read_bytes)
            copied.append(await write_path(destination, data))
    return copied


def _write_path(path: Path, data: str | bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(data, bytes):
        path.write_bytes(data)
    else:
        path.write_text(data, encoding="utf-8")


def _copy_symlink(source: Path, destination: Path) -> None:
    target = os.readlink(source)
    if os.path.lexists(destination):
        destination.unlink()
    os.symlink(target, destination, target_is_directory=source.is_dir())
