"""Custom exception hierarchy for create-opus-ui-app.

All exceptions that cross layer boundaries must inherit from
:class:`CreateAppError`.  Raw ``subprocess``, ``OSError`` and JSON
errors must NEVER propagate beyond the infrastructure layer — they are
caught there and re-raised as a typed subclass defined here.

Hierarchy
---------
CreateAppError
├── EmptyInputError
├── TemplateCloneError
├── DependencyInstallError
├── FilePatchError
└── EnvironmentError
"""

from __future__ import annotations

from pathlib import Path


class CreateAppError(Exception):
    """Base exception for all create-opus-ui-app errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Prompt validation -----------------------------------------------------

class EmptyInputError(CreateAppError):
    """Raised when a required prompt answer is empty."""


# --- Pipeline stages -------------------------------------------------------

class TemplateCloneError(CreateAppError):
    """Raised when the project template cannot be cloned."""


class DependencyInstallError(CreateAppError):
    """Raised when the package manager fails to install the libraries."""


class FilePatchError(CreateAppError):
    """Raised when a generated project file cannot be read, parsed or written."""

    def __init__(
        self,
        path: Path,
        cause: BaseException,
        *,
        action: str = "update",
        hint: str | None = None,
    ) -> None:
        super().__init__(f"Failed to {action} {path}: {cause}", hint=hint)
        self.path: Path = path
        self.cause: BaseException = cause


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(CreateAppError):
    """Raised when a required runtime dependency is not available."""
