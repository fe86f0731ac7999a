"""Static configuration for create-opus-ui-app.

Values here are defaults only; the CLI layer may override the template
reference and the parent directory per run via command-line flags.
"""

from __future__ import annotations

PROGRAM_NAME: str = "create-opus-ui-app"

DESCRIPTION: str = "CLI to create an Opus UI app with preinstalled libraries"

TEMPLATE_REPOSITORY: str = "https://github.com/IntendaUK/opus-ui-example#main"
"""degit-compatible reference of the project template."""

LIBRARY_CATALOG: tuple[str, ...] = (
    "@intenda/opus-ui-components",
    "@intenda/opus-ui-drag-move",
    "@intenda/opus-ui-grid",
    "@intenda/opus-ui-repeater-grid",
    "@intenda/opus-ui-code-editor",
    "@intenda/opus-ui-svg",
    "@intenda/opus-ui-zoom-panner",
    "@intenda/opus-ui-pdf-viewer",
    "@intenda/opus-ui-json-builder",
    "@intenda/opus-ui-map-location-iq",
    "@intenda/opus-ui-expo-interface",
)
"""Component libraries offered in the selection checklist, in display order."""

ENTRY_POINT_HEADER: str = "//Opus Component Libraries"

INDEX_TITLE_PLACEHOLDER: str = "Opus UI Example"

PINNED_VERSION: str = "1.0.0"

CONFIG_LIBRARIES_KEY: str = "opusUiComponentLibraries"

CONFIG_ENSEMBLES_KEY: str = "opusUiEnsembles"

JSON_INDENT: int = 4

ENCODING: str = "utf-8"
