"""Core scaffolding service — orchestrates the project creation pipeline.

The service delegates every side effect to collaborators injected at
construction time:

* a :class:`~create_opus_ui_app.core.protocols.TemplateCloner`,
* a :class:`~create_opus_ui_app.core.protocols.PackageInstaller`,
* a factory returning a
  :class:`~create_opus_ui_app.core.protocols.ProjectFileEditor` bound
  to a project root.

Guarantees
----------
* Stages run strictly in order; the first failure stops the pipeline.
* The process working directory is never changed.  The project root is
  computed once and passed explicitly to every later stage.
* Only :class:`~create_opus_ui_app.exceptions.CreateAppError` subclasses
  escape.
* No rollback: a failure leaves earlier stages' effects on disk.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from create_opus_ui_app.core.models import ProjectRequest
from create_opus_ui_app.core.protocols import (
    PackageInstaller,
    ProjectFileEditor,
    TemplateCloner,
)
from create_opus_ui_app.exceptions import (
    CreateAppError,
    DependencyInstallError,
    FilePatchError,
    TemplateCloneError,
)
from create_opus_ui_app.settings import TEMPLATE_REPOSITORY

StageCallback = Callable[[str], None]


class ScaffoldService:
    """Drives clone → enter → install → patch for one project.

    Parameters
    ----------
    cloner:
        Any object satisfying :class:`TemplateCloner`.
    installer:
        Any object satisfying :class:`PackageInstaller`.
    files_factory:
        Callable building a :class:`ProjectFileEditor` for a project root.
    base_dir:
        Parent directory of the new project.  Defaults to the current
        working directory at construction time.
    template_ref:
        Template reference handed to the cloner.
    on_stage:
        Optional callable receiving a short message as each stage starts.
    """

    def __init__(
        self,
        cloner: TemplateCloner,
        installer: PackageInstaller,
        files_factory: Callable[[Path], ProjectFileEditor],
        *,
        base_dir: Path | None = None,
        template_ref: str = TEMPLATE_REPOSITORY,
        on_stage: StageCallback | None = None,
    ) -> None:
        self._cloner: TemplateCloner = cloner
        self._installer: PackageInstaller = installer
        self._files_factory = files_factory
        self._base_dir: Path = (base_dir if base_dir is not None else Path.cwd()).resolve()
        self._template_ref: str = template_ref
        self._on_stage: StageCallback | None = on_stage

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def _notify(self, message: str) -> None:
        if self._on_stage is not None:
            self._on_stage(message)

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    def clone_template(self, project_name: str) -> None:
        """Materialise the template into ``base_dir / project_name``."""
        self._notify(f"Creating Opus UI project {project_name}...")
        destination = self._base_dir / project_name
        try:
            self._cloner.clone(self._template_ref, destination)
        except CreateAppError:
            raise
        except Exception as exc:
            raise TemplateCloneError(
                f"Failed to create project from template: {exc}",
            ) from exc

    def enter_project(self, project_name: str) -> Path:
        """Return the absolute root of the freshly cloned project."""
        root = (self._base_dir / project_name).resolve()
        if not root.is_dir():
            raise TemplateCloneError(
                f"Project directory {root} was not created by the template clone.",
            )
        return root

    def install_libraries(self, project_root: Path, libraries: tuple[str, ...]) -> None:
        """Install *libraries* with one package-manager call; no-op when empty."""
        if not libraries:
            return
        self._notify(f"Installing libraries: {', '.join(libraries)}...")
        try:
            self._installer.install(project_root, libraries)
        except CreateAppError:
            raise
        except Exception as exc:
            raise DependencyInstallError(
                f"Failed to install libraries: {exc}",
            ) from exc

    def patch_files(self, request: ProjectRequest, project_root: Path) -> None:
        """Apply the four file mutations in their fixed order."""
        self._notify("Writing data to relevant files...")
        files = self._files_factory(project_root)
        steps: list[tuple[str, Callable[[], None]]] = [
            ("add libraries in", lambda: files.inject_entry_point_imports(request.libraries)),
            # Ensembles are not selectable yet; the hook stays wired but empty.
            ("add config entries in", lambda: files.update_config(request.libraries, ())),
            (
                "set project info in",
                lambda: files.update_manifest(
                    request.project_name, request.project_description,
                ),
            ),
            ("set page title in", lambda: files.set_index_title(request.project_name)),
        ]
        for action, step in steps:
            try:
                step()
            except CreateAppError:
                raise
            except Exception as exc:
                raise FilePatchError(project_root, exc, action=action) from exc

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self, request: ProjectRequest) -> Path:
        """Run the whole pipeline and return the new project's root."""
        self.clone_template(request.project_name)
        project_root = self.enter_project(request.project_name)
        self.install_libraries(project_root, request.libraries)
        self.patch_files(request, project_root)
        return project_root
