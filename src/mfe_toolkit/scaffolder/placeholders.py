"""Placeholder tokens and literal substitution.

Template files (and one template file *name*) carry tokens such as
``{{MICROFRONTEND_NAME}}``.  The recognised vocabulary is the closed
:class:`Placeholder` enumeration; anything else that looks like a token is
reported by :func:`find_unresolved` so the caller can warn or fail.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .resolver import GenerationConfig


class Placeholder(str, Enum):
    """Token kinds understood by the substitution engine."""

    MICROFRONTEND_NAME = "MICROFRONTEND_NAME"
    MICROFRONTEND_DESCRIPTION = "MICROFRONTEND_DESCRIPTION"
    AUTHOR_NAME = "AUTHOR_NAME"
    COMPONENT_NAME = "COMPONENT_NAME"
    COMPONENT_FILE_NAME = "COMPONENT_FILE_NAME"
    MICROFRONTEND_CATEGORY = "MICROFRONTEND_CATEGORY"

    @property
    def token(self) -> str:
        """The literal marker as it appears in template text."""
        return "{{" + self.value + "}}"


# Anything shaped like a token, known or not.
_TOKEN_RE = re.compile(r"\{\{[A-Z][A-Z0-9_]*\}\}")


def build_placeholder_map(config: "GenerationConfig") -> dict[str, str]:
    """Derive the ``token -> replacement`` mapping for one microfrontend."""
    return {
        Placeholder.MICROFRONTEND_NAME.token: config.microfrontend_name,
        Placeholder.MICROFRONTEND_DESCRIPTION.token: config.description,
        Placeholder.AUTHOR_NAME.token: config.author,
        Placeholder.COMPONENT_NAME.token: config.component_name,
        Placeholder.COMPONENT_FILE_NAME.token: config.component_file_name,
        Placeholder.MICROFRONTEND_CATEGORY.token: config.category,
    }


def substitute(text: str, placeholders: Mapping[str, str]) -> str:
    """Replace every occurrence of every placeholder key in *text*.

    Matching is literal and done in a single left-to-right pass, so inserted
    values are never scanned again and the result does not depend on the
    order of *placeholders*.
    """
    keys = sorted((k for k in placeholders if k), key=len, reverse=True)
    if not keys or not text:
        return text
    pattern = re.compile("|".join(re.escape(k) for k in keys))
    return pattern.sub(lambda m: placeholders[m.group(0)], text)


def find_unresolved(text: str) -> list[str]:
    """Return the distinct token-shaped markers left in *text*, sorted."""
    return sorted(set(_TOKEN_RE.findall(text)))

