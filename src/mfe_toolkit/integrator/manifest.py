"""``package.json`` rewriting for host-project integration."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from ..config import ManifestDefaults
from ..scaffolder.materializer import write_path
from ..utils import dump_json, load_json

MANIFEST_FILE = "package.json"


def transform_manifest(
    manifest: Mapping[str, Any],
    microfrontend_name: str,
    defaults: ManifestDefaults | None = None,
) -> dict[str, Any]:
    """Derive the integration manifest from a microfrontend's own one.

    Overwrites identity and release fields, merges the fixed peer
    dependencies over any existing ones, and drops ``dependencies``.  Every
    other key passes through untouched and in its original position.  The
    input mapping is not modified.
    """
    defaults = defaults or ManifestDefaults()
    updated: dict[str, Any] = copy.deepcopy(dict(manifest))

    updated.update({
        "name": defaults.package_name(microfrontend_name),
        "version": defaults.stub_version,
        "description": manifest.get("description") or f"Microfrontend {microfrontend_name}",
        "repository": dict(defaults.repository),
        "boxyConfig": copy.deepcopy(defaults.boxy_config),
        "author": manifest.get("author") or "unknown",
        "released": True,
    })

    existing_peers = updated.get("peerDependencies")
    updated["peerDependencies"] = {
        **(existing_peers if isinstance(existing_peers, dict) else {}),
        **defaults.peer_dependencies,
    }

    updated.pop("dependencies", None)
    return updated


async def read_manifest(directory: Path) -> dict[str, Any]:
    return await load_json(directory / MANIFEST_FILE)


async def write_manifest(directory: Path, manifest: Mapping[str, Any]) -> Path:
    return await write_path(directory / MANIFEST_FILE, dump_json(dict(manifest)))
