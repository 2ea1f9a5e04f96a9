"""Shared pytest fixtures for the microfrontend toolkit test suite.

Provides reusable fixtures for:
- A temporary monorepo seeded with the template tree from ``fixtures/template``
- Toolkit configuration pointing at that monorepo
- Resolved generation configs
- An existing microfrontend ready for integration preparation
"""

from __future__ import annotations

import json
import os
import shutil
from pathlib import Path

import pytest

from mfe_toolkit.config import ToolkitConfig
from mfe_toolkit.scaffolder.resolver import GenerationConfig, Platform

FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clean_mfe_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer ``MFE_*`` variables from leaking into tests."""
    for key in list(os.environ):
        if key.startswith("MFE_"):
            monkeypatch.delenv(key, raising=False)


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def template_source() -> Path:
    """The pristine template tree shipped with the tests."""
    path = FIXTURES_DIR / "template"
    assert path.is_dir(), f"Template fixture not found at {path}"
    return path


@pytest.fixture
def project_root(tmp_path: Path, template_source: Path) -> Path:
    """Temporary monorepo with ``src/microfrontends/_template`` in place."""
    root = tmp_path / "monorepo"
    shutil.copytree(template_source, root / "src" / "microfrontends" / "_template")
    return root


@pytest.fixture
def toolkit_config(project_root: Path) -> ToolkitConfig:
    return ToolkitConfig(project_root=project_root)


@pytest.fixture
def microfrontends_dir(project_root: Path) -> Path:
    return project_root / "src" / "microfrontends"


# ---------------------------------------------------------------------------
# Generation configs
# ---------------------------------------------------------------------------

@pytest.fixture
def billing_form_config() -> GenerationConfig:
    """What ``billing-form`` resolves to with the desktop platform."""
    return GenerationConfig(
        name="desktop-billing-form",
        description="Microfrontend desktop-billing-form",
        author="unknown",
        component_name="DesktopBillingForm",
        component_file_name="desktop-billing-form",
        microfrontend_name="desktop-billing-form",
        category="pages",
        platform=Platform.DESKTOP,
    )


@pytest.fixture
def plain_config() -> GenerationConfig:
    """A config from the non-interactive variant (no platform prefix)."""
    return GenerationConfig(
        name="product-catalog",
        description="Product catalog",
        author="Jane Doe",
        component_name="ProductCatalog",
        component_file_name="product-catalog",
        microfrontend_name="product-catalog",
    )


# ---------------------------------------------------------------------------
# Existing microfrontend (integration source)
# ---------------------------------------------------------------------------

SAMPLE_MANIFEST = {
    "name": "my-page",
    "version": "1.2.3",
    "description": "My page",
    "main": "src/index.ts",
    "scripts": {"test": "jest"},
    "dependencies": {"classnames": "^2.5.1", "lodash": "^4.17.21"},
    "peerDependencies": {"react": "^18.2.0"},
}


@pytest.fixture
def sample_manifest() -> dict:
    return json.loads(json.dumps(SAMPLE_MANIFEST))


@pytest.fixture
def existing_microfrontend(microfrontends_dir: Path, sample_manifest: dict) -> Path:
    """``src/microfrontends/my-page`` with a manifest, sources and an asset."""
    root = microfrontends_dir / "my-page"
    (root / "src" / "__stories__").mkdir(parents=True)
    (root / "src" / "assets").mkdir()
    (root / "package.json").write_text(json.dumps(sample_manifest, indent=2), encoding="utf-8")
    (root / "src" / "index.ts").write_text(
        "export { MyPage } from './my-page';\n", encoding="utf-8"
    )
    (root / "src" / "my-page.tsx").write_text(
        "export const MyPage = () => <div style={{ padding: 8 }}>{{COMPONENT_NAME}}</div>;\n",
        encoding="utf-8",
    )
    (root / "src" / "__stories__" / "index.stories.tsx").write_text(
        "export default { title: 'pages/MyPage' };\n", encoding="utf-8"
    )
    (root / "src" / "assets" / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n\x00\xff\xfe")
    return root
