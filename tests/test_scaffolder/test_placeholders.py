"""Tests for placeholder tokens and literal substitution."""

from __future__ import annotations

from itertools import permutations

import pytest

from mfe_toolkit.scaffolder.placeholders import (
    Placeholder,
    build_placeholder_map,
    find_unresolved,
    substitute,
)

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Placeholder vocabulary
# ---------------------------------------------------------------------------


class TestPlaceholder:
    def test_token_is_double_curly(self):
        assert Placeholder.MICROFRONTEND_NAME.token == "{{MICROFRONTEND_NAME}}"

    def test_vocabulary(self):
        assert {p.value for p in Placeholder} == {
            "MICROFRONTEND_NAME",
            "MICROFRONTEND_DESCRIPTION",
            "AUTHOR_NAME",
            "COMPONENT_NAME",
            "COMPONENT_FILE_NAME",
            "MICROFRONTEND_CATEGORY",
        }


class TestBuildPlaceholderMap:
    def test_maps_every_token(self, billing_form_config):
        mapping = build_placeholder_map(billing_form_config)
        assert set(mapping) == {p.token for p in Placeholder}

    def test_values(self, billing_form_config):
        mapping = build_placeholder_map(billing_form_config)
        assert mapping["{{MICROFRONTEND_NAME}}"] == "desktop-billing-form"
        assert mapping["{{COMPONENT_NAME}}"] == "DesktopBillingForm"
        assert mapping["{{COMPONENT_FILE_NAME}}"] == "desktop-billing-form"
        assert mapping["{{AUTHOR_NAME}}"] == "unknown"
        assert mapping["{{MICROFRONTEND_CATEGORY}}"] == "pages"
        assert mapping["{{MICROFRONTEND_DESCRIPTION}}"] == "Microfrontend desktop-billing-form"


# ---------------------------------------------------------------------------
# substitute
# ---------------------------------------------------------------------------


class TestSubstitute:
    def test_replaces_all_occurrences(self):
        text = "{{COMPONENT_NAME}} = () => <{{COMPONENT_NAME}}Inner />"
        result = substitute(text, {"{{COMPONENT_NAME}}": "MyPage"})
        assert result == "MyPage = () => <MyPageInner />"

    def test_multiple_keys(self, billing_form_config):
        text = '{"name": "{{MICROFRONTEND_NAME}}", "author": "{{AUTHOR_NAME}}"}'
        result = substitute(text, build_placeholder_map(billing_form_config))
        assert result == '{"name": "desktop-billing-form", "author": "unknown"}'

    def test_text_without_tokens_is_unchanged(self, billing_form_config):
        text = "export const answer = 42;\nconst style = {{ color: 'red' }};\n"
        assert substitute(text, build_placeholder_map(billing_form_config)) == text

    def test_empty_mapping(self):
        assert substitute("{{COMPONENT_NAME}}", {}) == "{{COMPONENT_NAME}}"

    def test_empty_text(self):
        assert substitute("", {"{{COMPONENT_NAME}}": "X"}) == ""

    def test_inserted_values_are_not_rescanned(self):
        mapping = {"{{AUTHOR_NAME}}": "{{COMPONENT_NAME}}", "{{COMPONENT_NAME}}": "Oops"}
        assert substitute("by {{AUTHOR_NAME}}", mapping) == "by {{COMPONENT_NAME}}"

    def test_regex_metacharacters_in_values(self):
        mapping = {"{{MICROFRONTEND_DESCRIPTION}}": r"a+b (c) \1 $0"}
        assert substitute("{{MICROFRONTEND_DESCRIPTION}}", mapping) == r"a+b (c) \1 $0"

    def test_order_independent(self):
        items = [
            ("{{MICROFRONTEND_NAME}}", "my-page"),
            ("{{COMPONENT_NAME}}", "MyPage"),
            ("{{COMPONENT_FILE_NAME}}", "my-page"),
        ]
        text = "import { {{COMPONENT_NAME}} } from './{{COMPONENT_FILE_NAME}}'; // {{MICROFRONTEND_NAME}}"
        outputs = {substitute(text, dict(order)) for order in permutations(items)}
        assert outputs == {"import { MyPage } from './my-page'; // my-page"}

    def test_unknown_tokens_left_verbatim(self):
        result = substitute("{{UNKNOWN}} {{COMPONENT_NAME}}", {"{{COMPONENT_NAME}}": "X"})
        assert result == "{{UNKNOWN}} X"


# ---------------------------------------------------------------------------
# find_unresolved
# ---------------------------------------------------------------------------


class TestFindUnresolved:
    def test_finds_unknown_tokens(self):
        text = "{{PAGE_TITLE}} and {{PAGE_TITLE}} and {{API_URL}}"
        assert find_unresolved(text) == ["{{API_URL}}", "{{PAGE_TITLE}}"]

    def test_ignores_jsx_double_braces(self):
        text = "<div style={{ minHeight: 120 }} /> <p style={{color}} />"
        assert find_unresolved(text) == []

    def test_clean_text(self):
        assert find_unresolved("export const MyPage = () => null;") == []
