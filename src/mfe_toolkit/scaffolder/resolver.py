"""Command-line input to :class:`GenerationConfig` resolution.

Positional arguments give the microfrontend name, an optional description
and an optional author.  In the interactive variant the operator also picks a
target platform, which prefixes the name.  The prompt sits behind the
:class:`ChoiceProvider` protocol so the derivation can run without a
terminal.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Optional, Protocol, TextIO

from pydantic import BaseModel, ConfigDict, Field
from rich.console import Console
from rich.prompt import Prompt

from ..results import PromptAbortedError, UsageError

DEFAULT_AUTHOR = "unknown"
DEFAULT_CATEGORY = "pages"
NAME_SEPARATOR = "-"


# ---------------------------------------------------------------------------
# Platform
# ---------------------------------------------------------------------------

class Platform(str, Enum):
    """Target platform of a new microfrontend."""

    DESKTOP = "desktop"
    MOBILE = "mobile"
    COMMON = "common"

    @property
    def prefix(self) -> str:
        """Name prefix; shared code lives under ``independent-*``."""
        if self is Platform.COMMON:
            return "independent"
        return self.value


# ---------------------------------------------------------------------------
# Configuration model
# ---------------------------------------------------------------------------

class GenerationConfig(BaseModel):
    """Everything needed to instantiate the template for one microfrontend."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Final (possibly prefixed) microfrontend name")
    description: str = Field(..., description="Human description for package.json and docs")
    author: str = Field(default=DEFAULT_AUTHOR)
    component_name: str = Field(..., description="PascalCase React component identifier")
    component_file_name: str = Field(..., description="Base name of the main component file")
    microfrontend_name: str = Field(..., description="Package-level microfrontend name")
    category: str = Field(default=DEFAULT_CATEGORY)
    platform: Optional[Platform] = Field(default=None)


# ---------------------------------------------------------------------------
# Choice providers
# ---------------------------------------------------------------------------

class ChoiceProvider(Protocol):
    """Asks the operator to pick one of a closed set of options.

    Returns ``None`` when the operator aborts without choosing.
    """

    def choose(self, question: str, options: Sequence[str]) -> Optional[str]:
        ...


class ChoicePrompt(Prompt):
    """A :class:`~rich.prompt.Prompt` where a blank line means "no choice".

    Stock ``Prompt`` re-asks on a blank line that is not among the choices;
    here it comes back as ``""`` so the caller can treat it as an abort.
    Any other answer is still checked against the choices.
    """

    def process_response(self, value: str) -> str:
        if not value.strip():
            return ""
        return super().process_response(value)


class RichChoiceProvider:
    """Interactive provider backed by :class:`ChoicePrompt`.

    There is no default answer: an empty line, end of input or Ctrl-C all
    abort.

    Args:
        console: Console to prompt on (rich's global console when ``None``).
        stream: Read answers from this file instead of standard input.
    """

    def __init__(self, console: Console | None = None, stream: TextIO | None = None) -> None:
        self.console = console
        self.stream = stream

    def choose(self, question: str, options: Sequence[str]) -> Optional[str]:
        try:
            answer = ChoicePrompt.ask(
                question,
                choices=list(options),
                console=self.console,
                stream=self.stream,
            )
        except (KeyboardInterrupt, EOFError):
            return None
        return answer or None


class StaticChoiceProvider:
    """Always answers with a preset value (``--platform`` and tests)."""

    def __init__(self, answer: Optional[str]) -> None:
        self.answer = answer
        self.questions: list[str] = []

    def choose(self, question: str, options: Sequence[str]) -> Optional[str]:
        self.questions.append(question)
        return self.answer


# ---------------------------------------------------------------------------
# Derivation
# ---------------------------------------------------------------------------

def to_component_name(name: str) -> str:
    """``desktop-product-catalog`` -> ``DesktopProductCatalog``.

    Only the first letter of each segment is touched; the rest keeps its case.
    """
    return "".join(word[:1].upper() + word[1:] for word in name.split(NAME_SEPARATOR))


def validate_name(name: str) -> str:
    """Strip *name* and reject empty values and path-like values."""
    name = name.strip()
    if not name:
        raise UsageError("A microfrontend name is required")
    if "/" in name or "\\" in name or name in {".", ".."}:
        raise UsageError(f"Invalid microfrontend name: {name!r}")
    return name


def apply_platform(raw_name: str, platform: Platform | None) -> str:
    if platform is None:
        return raw_name
    return f"{platform.prefix}{NAME_SEPARATOR}{raw_name}"


def ask_platform(provider: ChoiceProvider) -> Platform:
    """Prompt for the target platform, raising on abort."""
    options = [p.value for p in Platform]
    answer = provider.choose("Target platform", options)
    if answer is None:
        raise PromptAbortedError("No platform selected")
    try:
        return Platform(answer)
    except ValueError:
        raise UsageError(
            f"Unknown platform {answer!r} (expected one of: {', '.join(options)})"
        ) from None


def resolve_generation_config(
    args: Sequence[str],
    choice_provider: ChoiceProvider | None = None,
) -> GenerationConfig:
    """Turn positional CLI arguments into a :class:`GenerationConfig`.

    Args:
        args: ``[name, description?, author?]``.  Empty strings count as
            missing for the optional entries.
        choice_provider: When given, the operator is asked for a platform and
            the name is prefixed accordingly.  ``None`` selects the plain,
            non-interactive variant.

    Raises:
        UsageError: If the name is missing, blank, or contains a path
            separator, or more than three positionals were passed.
        PromptAbortedError: If the operator aborts the platform prompt.
    """
    if len(args) > 3:
        raise UsageError(f"Too many arguments: {' '.join(args[3:])}")
    raw_name = validate_name(args[0] if args else "")

    platform = ask_platform(choice_provider) if choice_provider is not None else None
    name = apply_platform(raw_name, platform)

    description = args[1] if len(args) > 1 and args[1] else f"Microfrontend {name}"
    author = args[2] if len(args) > 2 and args[2] else DEFAULT_AUTHOR

    return GenerationConfig(
        name=name,
        description=description,
        author=author,
        component_name=to_component_name(name),
        component_file_name=name,
        microfrontend_name=name,
        category=DEFAULT_CATEGORY,
        platform=platform,
    )
