"""Shared pytest fixtures and configuration for the create-opus-ui-app suite.

Guidelines
----------
* No internet access in any test.
* ``npx`` and ``npm`` are never executed — subprocess is patched or the
  protocols are satisfied by fakes.
* Generated projects live under ``tmp_path``.
"""

from __future__ import annotations

import json
import shutil
from collections.abc import Sequence
from pathlib import Path

import pytest

MAIN_JSX = "import React from 'react';\nimport { createRoot } from 'react-dom/client';\n"
HYBRID_JSX = "import { start } from './hybrid';\r\nstart();\r\n"
CONFIG = {"opusUiComponentLibraries": [], "opusUiEnsembles": [], "theme": "dark"}
MANIFEST = {
    "name": "opus-ui-example",
    "private": True,
    "version": "0.3.7",
    "type": "module",
    "description": "Example",
    "scripts": {"start": "vite"},
    "dependencies": {"@intenda/opus-ui": "^1.0.0"},
}
INDEX_HTML = (
    "<!doctype html>\n<html>\n<head>\n"
    "    <title>Opus UI Example</title>\n"
    "</head>\n<body><div id=\"root\"></div></body>\n</html>\n"
)


def write_template(root: Path) -> Path:
    """Lay out a minimal Opus UI template under *root*."""
    (root / "src").mkdir(parents=True)
    (root / "src" / "main.jsx").write_bytes(MAIN_JSX.encode("utf-8"))
    (root / "src" / "mainHybrid.jsx").write_bytes(HYBRID_JSX.encode("utf-8"))
    (root / ".opusUiConfig").write_text(json.dumps(CONFIG, indent=4), encoding="utf-8")
    (root / "package.json").write_text(json.dumps(MANIFEST, indent=2), encoding="utf-8")
    (root / "index.html").write_bytes(INDEX_HTML.encode("utf-8"))
    return root


@pytest.fixture()
def template_dir(tmp_path: Path) -> Path:
    """A pristine template checkout used as the clone source."""
    return write_template(tmp_path / "template")


@pytest.fixture()
def project_dir(tmp_path: Path) -> Path:
    """An already-materialised project, as left by a successful clone."""
    return write_template(tmp_path / "my-app")


class FakeCloner:
    """TemplateCloner copying a local directory instead of fetching."""

    def __init__(self, source: Path) -> None:
        self.source = source
        self.calls: list[tuple[str, Path]] = []

    def clone(self, template_ref: str, destination: Path) -> None:
        self.calls.append((template_ref, destination))
        shutil.copytree(self.source, destination)


class FakeInstaller:
    """PackageInstaller recording each invocation."""

    def __init__(self) -> None:
        self.calls: list[tuple[Path, tuple[str, ...]]] = []

    def install(self, project_dir: Path, packages: Sequence[str]) -> None:
        self.calls.append((project_dir, tuple(packages)))


@pytest.fixture()
def fake_cloner(template_dir: Path) -> FakeCloner:
    return FakeCloner(template_dir)


@pytest.fixture()
def fake_installer() -> FakeInstaller:
    return FakeInstaller()
