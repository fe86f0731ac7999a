"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — so the pipeline can be driven by fakes in tests.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol


class TemplateCloner(Protocol):
    """Contract for template materialisation backends."""

    def clone(self, template_ref: str, destination: Path) -> None:
        """Fetch *template_ref* into the new directory *destination*.

        The destination is used verbatim — no sanitisation.  An existing
        directory or an invalid name is reported by the backend itself.

        Raises
        ------
        TemplateCloneError
            When the template cannot be fetched.
        """
        ...  # pragma: no cover


class PackageInstaller(Protocol):
    """Contract for package-manager backends."""

    def install(self, project_dir: Path, packages: Sequence[str]) -> None:
        """Install all *packages* into *project_dir* in a single invocation.

        Raises
        ------
        DependencyInstallError
            When the package manager reports a failure.
        """
        ...  # pragma: no cover


class ProjectFileEditor(Protocol):
    """Contract for the read-modify-write patches of a generated project."""

    def inject_entry_point_imports(self, libraries: Sequence[str]) -> None: ...  # pragma: no cover

    def update_config(
        self,
        libraries: Sequence[str],
        ensembles: Sequence[str] = (),
    ) -> None: ...  # pragma: no cover

    def update_manifest(self, name: str, description: str) -> None: ...  # pragma: no cover

    def set_index_title(self, name: str) -> None: ...  # pragma: no cover
