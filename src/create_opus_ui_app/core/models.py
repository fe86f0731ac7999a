"""Domain models for create-opus-ui-app.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O and must remain pure
across the entire lifecycle of a scaffolding run.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---------------------------------------------------------------------------
# User request
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ProjectRequest:
    """Answers collected by the interactive prompts."""

    project_name: str
    """Name of the new project; also the name of its directory."""

    project_description: str = ""
    """Free-text description written into ``package.json``."""

    libraries: tuple[str, ...] = ()
    """Selected component libraries, in selection order."""


# ---------------------------------------------------------------------------
# Generated project layout
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ProjectLayout:
    """Relative locations of the files patched inside a generated project.

    All paths are resolved against the project root by the caller.
    """

    main_entry_point: str = "src/main.jsx"
    hybrid_entry_point: str = "src/mainHybrid.jsx"
    config_file: str = ".opusUiConfig"
    package_manifest: str = "package.json"
    index_html: str = "index.html"

    @property
    def entry_points(self) -> tuple[str, str]:
        """Both entry points, main first."""
        return (self.main_entry_point, self.hybrid_entry_point)
