"""
newcomponent.errors - Failure Taxonomy
======================================

Every way a scaffold run can fail is represented by a subclass of
``ScaffoldError``. All of them are terminal for the invocation: nothing
is retried and nothing is recovered mid-pipeline.

    ScaffoldError
    ├── ConfigLoadError      override file unreadable or invalid
    ├── NameValidationError  missing or malformed component name
    ├── CollisionError       component directory already exists
    ├── TemplateLoadError    language template cannot be read
    └── WriteError           mkdir or file write failed

The step functions in ``generator`` raise these; ``create_component``
catches them and turns them into a failed ``ScaffoldResult``.
"""

from __future__ import annotations

from pathlib import Path

from newcomponent.models import Step


class ScaffoldError(Exception):
    """
    Base class for all expected scaffold failures.

    Parameters
    ----------
    message : str
        User-facing description of what went wrong.

    path : Path | None
        The offending path, when there is one.

    Attributes
    ----------
    step : Step | None
        The pipeline step that was running when the error was raised.
        Filled in by the pipeline; None when a step function is called
        on its own.
    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        self.step: Step | None = None

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.message} ({self.path})"


class ConfigLoadError(ScaffoldError):
    """An override file exists but could not be read, parsed or validated."""


class NameValidationError(ScaffoldError):
    """The component name is missing or not PascalCase."""


class CollisionError(ScaffoldError):
    """The target component directory already exists."""


class TemplateLoadError(ScaffoldError):
    """The template for the requested language could not be loaded."""


class WriteError(ScaffoldError):
    """Creating a directory or writing a file failed."""
