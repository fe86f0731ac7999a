"""Infrastructure layer — external system integration.

This layer wraps all interaction with ``npx degit``, ``npm`` and the
generated project's files.  Every raw ``subprocess``, ``OSError`` or
JSON exception is caught here and re-raised as a
:class:`~create_opus_ui_app.exceptions.CreateAppError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from create_opus_ui_app.infra.degit_cloner import DegitTemplateCloner
from create_opus_ui_app.infra.npm_installer import NpmPackageInstaller
from create_opus_ui_app.infra.project_files import ProjectFiles
from create_opus_ui_app.infra.tool_detector import ToolStatus, detect_tool

__all__: list[str] = [
    "DegitTemplateCloner",
    "NpmPackageInstaller",
    "ProjectFiles",
    "ToolStatus",
    "detect_tool",
]
