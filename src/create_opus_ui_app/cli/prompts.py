"""Interactive prompts collecting a :class:`ProjectRequest`.

Three questions are asked in a fixed order:

* project name (required, re-prompted while empty),
* project description (optional, may be left blank),
* component libraries (checklist over the fixed catalog, any number).

Aborting any question raises ``KeyboardInterrupt`` so that no later
pipeline stage runs.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from create_opus_ui_app.core.models import ProjectRequest
from create_opus_ui_app.exceptions import EmptyInputError, EnvironmentError
from create_opus_ui_app.settings import LIBRARY_CATALOG


def _import_questionary() -> Any:
    """Import questionary lazily for interactive prompting."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


# ---------------------------------------------------------------------------
# Validation (pure)
# ---------------------------------------------------------------------------

def validate_project_name(value: str) -> None:
    """Raise :class:`EmptyInputError` when *value* is blank."""
    if not value.strip():
        raise EmptyInputError("Project name cannot be empty")


def _questionary_name_validator(value: str) -> bool | str:
    """Adapt :func:`validate_project_name` to questionary's validate hook."""
    try:
        validate_project_name(value)
    except EmptyInputError as exc:
        return str(exc)
    return True


def _answer(question: Any) -> Any:
    """Ask *question*; ``None`` means the user aborted (Ctrl+C)."""
    answer = question.ask()
    if answer is None:
        raise KeyboardInterrupt
    return answer


# ---------------------------------------------------------------------------
# Public prompt function
# ---------------------------------------------------------------------------

def prompt_project_request(
    catalog: Sequence[str] = LIBRARY_CATALOG,
) -> ProjectRequest:
    """Ask the three questions and assemble the answers.

    Raises
    ------
    KeyboardInterrupt
        If the user aborts any of the prompts.
    EnvironmentError
        If questionary is not installed.
    """
    questionary = _import_questionary()

    project_name: str = _answer(
        questionary.text(
            "Enter the project name:",
            validate=_questionary_name_validator,
        )
    )
    project_description: str = _answer(
        questionary.text(
            "Enter the project description (optional):",
            default="",
        )
    )
    libraries: list[str] = _answer(
        questionary.checkbox(
            "Which Opus UI libraries would you like to include?",
            choices=[questionary.Choice(title=library, value=library) for library in catalog],
        )
    )

    return ProjectRequest(
        project_name=project_name,
        project_description=project_description,
        libraries=tuple(libraries),
    )
