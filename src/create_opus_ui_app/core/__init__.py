"""Core / service layer — pure pipeline logic and content transforms.

Rules
-----
* No ``print()`` calls.
* No subprocess calls and no file reads or writes.
* No imports from ``cli`` or ``infra``.
"""

from create_opus_ui_app.core.models import ProjectLayout, ProjectRequest
from create_opus_ui_app.core.protocols import (
    PackageInstaller,
    ProjectFileEditor,
    TemplateCloner,
)
from create_opus_ui_app.core.scaffold_service import ScaffoldService

__all__: list[str] = [
    "PackageInstaller",
    "ProjectFileEditor",
    "ProjectLayout",
    "ProjectRequest",
    "ScaffoldService",
    "TemplateCloner",
]
