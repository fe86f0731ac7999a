"""Read-modify-write patches for files inside a generated project.

This module is the only place that touches the generated project's
files.  Content changes themselves are delegated to the pure functions
in :mod:`create_opus_ui_app.core.patches`.

Rules
-----
* A file is never created: a missing file is a :class:`FilePatchError`.
* Files are read and written as UTF-8 with newlines left untranslated,
  so untouched content stays byte-identical.
* JSON is written with 4-space indentation and non-ASCII kept as-is.
* No rollback — each patch stands on its own.
"""

from __future__ import annotations

import json
import re
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from create_opus_ui_app.core import patches
from create_opus_ui_app.core.models import ProjectLayout
from create_opus_ui_app.exceptions import FilePatchError
from create_opus_ui_app.settings import ENCODING, JSON_INDENT

_LONE_SURROGATE = re.compile("[\ud800-\udfff]")


# ---------------------------------------------------------------------------
# Low-level helpers
# ---------------------------------------------------------------------------

def read_text(path: Path) -> str:
    with open(path, encoding=ENCODING, newline="") as handle:
        return handle.read()


def write_text(path: Path, content: str) -> None:
    """Encode *content* first so an encoding failure never truncates *path*."""
    data = content.encode(ENCODING)
    with open(path, "wb") as handle:
        handle.write(data)


def _escape_surrogate(match: re.Match[str]) -> str:
    return f"\\u{ord(match.group()):04x}"


def dump_json(data: Any) -> str:
    """Serialise *data* the way ``JSON.stringify(data, null, 4)`` does.

    Lone surrogates only survive ``json.loads`` inside strings; they are
    written back as ``\\uXXXX`` escapes so the output stays valid UTF-8.
    """
    text = json.dumps(data, indent=JSON_INDENT, ensure_ascii=False)
    return _LONE_SURROGATE.sub(_escape_surrogate, text)


# ---------------------------------------------------------------------------
# Project file editor
# ---------------------------------------------------------------------------

class ProjectFiles:
    """Concrete :class:`~create_opus_ui_app.core.protocols.ProjectFileEditor`.

    Parameters
    ----------
    root:
        Absolute root of the generated project.  Every layout path is
        resolved against it.
    layout:
        Relative file locations; defaults to the Opus UI template layout.
    """

    def __init__(self, root: Path, layout: ProjectLayout | None = None) -> None:
        self.root: Path = root
        self.layout: ProjectLayout = layout if layout is not None else ProjectLayout()

    def path(self, relative: str) -> Path:
        return self.root / relative

    # ------------------------------------------------------------------
    # Generic read-modify-write
    # ------------------------------------------------------------------

    def _read(self, relative: str, *, action: str) -> str:
        path = self.path(relative)
        try:
            return read_text(path)
        except (OSError, UnicodeDecodeError) as exc:
            raise FilePatchError(path, exc, action=action) from exc

    def _write(self, relative: str, content: str, *, action: str) -> None:
        path = self.path(relative)
        try:
            write_text(path, content)
        except (OSError, UnicodeError) as exc:
            raise FilePatchError(path, exc, action=action) from exc

    def _read_json(self, relative: str, *, action: str) -> dict[str, Any]:
        path = self.path(relative)
        content = self._read(relative, action=action)
        try:
            data = json.loads(content)
        except json.JSONDecodeError as exc:
            raise FilePatchError(path, exc, action=action) from exc
        if not isinstance(data, dict):
            cause = ValueError(f"expected a JSON object, got {type(data).__name__}")
            raise FilePatchError(path, cause, action=action)
        return data

    # ------------------------------------------------------------------
    # Patches
    # ------------------------------------------------------------------

    def inject_entry_point_imports(self, libraries: Sequence[str]) -> None:
        """Prepend the library imports to both entry points.

        No file is touched when *libraries* is empty.  Not idempotent.
        """
        if not libraries:
            return
        action = "add libraries to"
        for relative in self.layout.entry_points:
            content = self._read(relative, action=action)
            self._write(relative, patches.prepend_imports(content, libraries), action=action)

    def update_config(
        self,
        libraries: Sequence[str],
        ensembles: Sequence[str] = (),
    ) -> None:
        """Record the selected libraries (and ensembles) in ``.opusUiConfig``.

        When both inputs are empty the file is neither read nor written.
        """
        if not patches.config_needs_update(libraries, ensembles):
            return
        action = "add entries to"
        relative = self.layout.config_file
        config = self._read_json(relative, action=action)
        updated = patches.apply_config_entries(config, libraries, ensembles)
        self._write(relative, dump_json(updated), action=action)

    def update_manifest(self, name: str, description: str) -> None:
        """Write the project name, description and pinned version to ``package.json``."""
        action = "add info to"
        relative = self.layout.package_manifest
        manifest = self._read_json(relative, action=action)
        updated = patches.apply_project_info(manifest, name, description)
        self._write(relative, dump_json(updated), action=action)

    def set_index_title(self, name: str) -> None:
        """Swap the placeholder page title in ``index.html`` for *name*."""
        action = "set name in"
        relative = self.layout.index_html
        html = self._read(relative, action=action)
        self._write(relative, patches.replace_title(html, name), action=action)
