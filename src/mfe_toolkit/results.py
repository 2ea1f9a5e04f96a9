"""Command outcomes and the error taxonomy shared by both tools.

Pipeline components raise :class:`ToolkitError` subclasses; the orchestrators
turn them into a :class:`CommandResult`, and only the CLI entry points map a
result onto a process exit status.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, computed_field


# ---------------------------------------------------------------------------
# Failure reasons
# ---------------------------------------------------------------------------

class ExitReason(str, Enum):
    """Why a command failed."""

    USAGE = "usage"
    ABORTED = "aborted"
    ALREADY_EXISTS = "already_exists"
    SOURCE_MISSING = "source_missing"
    UNKNOWN_PLACEHOLDER = "unknown_placeholder"
    IO_ERROR = "io_error"


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class ToolkitError(Exception):
    """Base class for every expected failure of the toolkit."""

    reason: ExitReason = ExitReason.IO_ERROR

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class UsageError(ToolkitError):
    """Missing or invalid required input."""

    reason = ExitReason.USAGE


class PromptAbortedError(ToolkitError):
    """The operator left the platform prompt without choosing."""

    reason = ExitReason.ABORTED


class TargetExistsError(ToolkitError):
    """The directory for a new microfrontend is already present."""

    reason = ExitReason.ALREADY_EXISTS

    def __init__(self, path: Path, name: str) -> None:
        self.path = path
        super().__init__(f'Microfrontend "{name}" already exists: {path}')


class SourceMissingError(ToolkitError):
    """A directory the command reads from does not exist."""

    reason = ExitReason.SOURCE_MISSING

    def __init__(self, path: Path, what: str = "Directory") -> None:
        self.path = path
        super().__init__(f"{what} not found: {path}")


class UnresolvedPlaceholderError(ToolkitError):
    """A rendered file still contains tokens nobody knows how to fill."""

    reason = ExitReason.UNKNOWN_PLACEHOLDER

    def __init__(self, path: str, tokens: list[str]) -> None:
        self.path = path
        self.tokens = tokens
        super().__init__(
            f"Unknown placeholder(s) in {path}: {', '.join(tokens)}"
        )


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------

class CommandResult(BaseModel):
    """Outcome of a single tool invocation."""

    success: bool = Field(default=True)
    reason: Optional[ExitReason] = Field(default=None, description="Set only on failure")
    message: str = Field(default="", description="Human-readable failure detail")
    target: Optional[Path] = Field(default=None, description="Directory written to")
    written: list[str] = Field(
        default_factory=list,
        description="Paths written so far, relative to the target directory",
    )

    @computed_field  # type: ignore[misc]
    @property
    def exit_code(self) -> int:
        """0 on success, 1 for any failure."""
        return 0 if self.success else 1

    @classmethod
    def failure(
        cls,
        reason: ExitReason,
        message: str,
        *,
        target: Path | None = None,
        written: list[str] | None = None,
    ) -> "CommandResult":
        return cls(
            success=False,
            reason=reason,
            message=message,
            target=target,
            written=list(written or []),
        )

    @classmethod
    def from_error(
        cls,
        error: BaseException,
        *,
        target: Path | None = None,
        written: list[str] | None = None,
    ) -> "CommandResult":
        """Build a failed result from a toolkit or I/O exception."""
        if isinstance(error, ToolkitError):
            return cls.failure(error.reason, error.message, target=target, written=written)
        return cls.failure(
            ExitReason.IO_ERROR,
            describe_error(error),
            target=target,
            written=written,
        )


def describe_error(error: BaseException) -> str:
    """Return the error's message, or a generic text when it carries none."""
    if isinstance(error, OSError) and error.strerror:
        if error.filename:
            return f"{error.strerror}: {error.filename}"
        return error.strerror
    text = str(error)
    return text if text else "unknown error"
