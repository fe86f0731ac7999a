"""Pure content transforms applied to generated project files.

Every function takes the current file content (text or parsed JSON)
and returns the new content.  No filesystem access happens here; the
infrastructure layer owns reading and writing.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from create_opus_ui_app.settings import (
    CONFIG_ENSEMBLES_KEY,
    CONFIG_LIBRARIES_KEY,
    ENTRY_POINT_HEADER,
    INDEX_TITLE_PLACEHOLDER,
    PINNED_VERSION,
)


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------

def build_import_block(libraries: Sequence[str]) -> str:
    """Return one ``import '<id>';`` line per library, newline-joined."""
    return "\n".join(f"import '{library}';" for library in libraries)


def prepend_imports(content: str, libraries: Sequence[str]) -> str:
    """Prepend the header comment and import block to *content*.

    Result: ``<header>\\n<imports>\\n\\n<content>``.  Not idempotent:
    applying it twice duplicates the header and the imports, because
    existing blocks are not detected.
    """
    return f"{ENTRY_POINT_HEADER}\n{build_import_block(libraries)}\n\n{content}"


# ---------------------------------------------------------------------------
# .opusUiConfig
# ---------------------------------------------------------------------------

def config_needs_update(libraries: Sequence[str], ensembles: Sequence[str]) -> bool:
    """Whether :func:`apply_config_entries` would change anything."""
    return bool(libraries) or bool(ensembles)


def apply_config_entries(
    config: dict[str, Any],
    libraries: Sequence[str],
    ensembles: Sequence[str] = (),
) -> dict[str, Any]:
    """Overwrite the libraries / ensembles fields that have values.

    Each field is replaced wholesale (no merge) and only when its input
    is non-empty.  Other keys keep their values and order.
    """
    updated = dict(config)
    if libraries:
        updated[CONFIG_LIBRARIES_KEY] = list(libraries)
    if ensembles:
        updated[CONFIG_ENSEMBLES_KEY] = list(ensembles)
    return updated


# ---------------------------------------------------------------------------
# package.json
# ---------------------------------------------------------------------------

def apply_project_info(
    manifest: dict[str, Any],
    name: str,
    description: str,
) -> dict[str, Any]:
    """Set ``name``, ``description`` and the pinned ``version``."""
    updated = dict(manifest)
    updated["name"] = name
    updated["description"] = description
    updated["version"] = PINNED_VERSION
    return updated


# ---------------------------------------------------------------------------
# index.html
# ---------------------------------------------------------------------------

def replace_title(html: str, name: str) -> str:
    """Replace the first exact occurrence of the placeholder title."""
    return html.replace(INDEX_TITLE_PLACEHOLDER, name, 1)
