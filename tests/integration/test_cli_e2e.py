"""End-to-end runs of both commands against a temporary monorepo.

Each test drives the real console entry points, so argument parsing, the
template on disk and the exit status are all exercised together.
"""

from __future__ import annotations

import json

import pytest

from mfe_toolkit.cli import create_main, integrate_main

pytestmark = pytest.mark.integration

EXPECTED_FILES = [
    "package.json",
    "src/__stories__/index.stories.tsx",
    "src/desktop-billing-form.tsx",
    "src/index.ts",
    "src/styles.module.css",
    "src/types.ts",
]


def _tree(root):
    return sorted(p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file())


class TestCreateThenIntegrate:
    def test_create_billing_form(self, project_root, microfrontends_dir):
        create_main(["billing-form", "--platform", "desktop", "--root", str(project_root)])

        target = microfrontends_dir / "desktop-billing-form"
        assert _tree(target) == EXPECTED_FILES

        manifest = json.loads((target / "package.json").read_text(encoding="utf-8"))
        assert manifest["name"] == "desktop-billing-form"
        assert manifest["description"] == "Microfrontend desktop-billing-form"
        assert manifest["author"] == "unknown"
        assert manifest["keywords"] == ["microfrontend", "pages"]

        component = (target / "src" / "desktop-billing-form.tsx").read_text(encoding="utf-8")
        assert "export const DesktopBillingForm" in component
        assert "style={{ minHeight: 120 }}" in component
        assert "{{" not in component.replace("{{ minHeight", "")

        story = (target / "src" / "__stories__" / "index.stories.tsx").read_text(encoding="utf-8")
        assert "title: 'pages/DesktopBillingForm'" in story
        assert "from '../desktop-billing-form'" in story

    def test_template_is_left_untouched(self, project_root, template_source):
        create_main(["billing-form", "--platform", "desktop", "--root", str(project_root)])

        template = project_root / "src" / "microfrontends" / "_template"
        assert _tree(template) == _tree(template_source)
        for rel in _tree(template_source):
            assert (template / rel).read_bytes() == (template_source / rel).read_bytes()

    def test_integrate_created_microfrontend(self, project_root):
        create_main(["billing-form", "Billing", "Jane Doe", "--platform", "desktop", "--root", str(project_root)])
        integrate_main(["desktop-billing-form", "--root", str(project_root)])

        output = project_root / "integration-ready" / "desktop-billing-form"
        assert _tree(output) == sorted(EXPECTED_FILES + ["INTEGRATION_CHECKLIST.md"])

        manifest = json.loads((output / "package.json").read_text(encoding="utf-8"))
        assert manifest["name"] == "@growth-blocks/desktop-billing-form"
        assert manifest["version"] == "0.0.0-stub"
        assert manifest["description"] == "Billing"
        assert manifest["author"] == "Jane Doe"
        assert manifest["released"] is True
        assert "dependencies" not in manifest
        assert manifest["peerDependencies"] == {
            "react": "^18.2.0",
            "react-dom": "^18.2.0",
            "@growth-blocks/mocks": "^0.0.0-stub",
            "classnames": "^0.0.0-stub",
        }

        source_manifest = json.loads(
            (project_root / "src" / "microfrontends" / "desktop-billing-form" / "package.json")
            .read_text(encoding="utf-8")
        )
        assert source_manifest["name"] == "desktop-billing-form"

    def test_second_create_fails(self, project_root, capsys):
        create_main(["billing-form", "--platform", "desktop", "--root", str(project_root)])
        capsys.readouterr()

        with pytest.raises(SystemExit) as excinfo:
            create_main(["billing-form", "--platform", "desktop", "--root", str(project_root)])

        assert excinfo.value.code == 1
        assert "desktop-billing-form" in capsys.readouterr().err


class TestIntegrateMissing:
    def test_missing_source_directory(self, project_root, capsys):
        with pytest.raises(SystemExit) as excinfo:
            integrate_main(["nonexistent", "--root", str(project_root)])

        assert excinfo.value.code == 1
        err = capsys.readouterr().err
        assert str(project_root / "src" / "microfrontends" / "nonexistent") in err
        assert not (project_root / "integration-ready").exists()
