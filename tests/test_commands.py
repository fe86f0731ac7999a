"""Tests for the external-command adapters and PATH detection.

``subprocess.run`` and ``shutil.which`` are always patched — neither
``npx`` nor ``npm`` is executed.
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from create_opus_ui_app.exceptions import DependencyInstallError, TemplateCloneError
from create_opus_ui_app.infra.degit_cloner import DegitTemplateCloner
from create_opus_ui_app.infra.npm_installer import NpmPackageInstaller
from create_opus_ui_app.infra.tool_detector import (
    _platform_install_commands,
    detect_tool,
    missing_tool_hint,
)

WHICH = "create_opus_ui_app.infra.tool_detector.shutil.which"
CLONE_RUN = "create_opus_ui_app.infra.degit_cloner.subprocess.run"
INSTALL_RUN = "create_opus_ui_app.infra.npm_installer.subprocess.run"


# ---------------------------------------------------------------------------
# detect_tool
# ---------------------------------------------------------------------------

class TestDetectTool:
    @patch(WHICH, return_value="/usr/bin/npm")
    def test_found(self, _mock_which: MagicMock) -> None:
        status = detect_tool("npm")
        assert status.found is True
        assert isinstance(status.path, Path)
        assert status.install_commands == ()

    @patch(WHICH, return_value=None)
    def test_not_found(self, _mock_which: MagicMock) -> None:
        status = detect_tool("npx")
        assert status.found is False
        assert status.path is None
        assert len(status.install_commands) > 0
        assert "'npx' was not found" in missing_tool_hint(status)

    @pytest.mark.parametrize(
        ("system", "expected"),
        [("Windows", "winget"), ("Linux", "apt"), ("Darwin", "brew"), ("Plan9", "nodejs.org")],
    )
    def test_platform_commands(self, system: str, expected: str) -> None:
        with patch("create_opus_ui_app.infra.tool_detector.platform.system", return_value=system):
            assert any(expected in cmd for cmd in _platform_install_commands())


# ---------------------------------------------------------------------------
# DegitTemplateCloner
# ---------------------------------------------------------------------------

class TestDegitTemplateCloner:
    def test_build_command(self) -> None:
        cmd = DegitTemplateCloner().build_command("user/repo#main", Path("my-app"))
        assert cmd == ["npx", "degit", "user/repo#main", "my-app"]

    @patch(CLONE_RUN)
    @patch(WHICH, return_value="/usr/bin/npx")
    def test_runs_degit_with_inherited_streams(
        self, _mock_which: MagicMock, mock_run: MagicMock,
    ) -> None:
        DegitTemplateCloner().clone("user/repo#main", Path("/work/my-app"))
        args, kwargs = mock_run.call_args
        assert args[0][1:] == ["degit", "user/repo#main", str(Path("/work/my-app"))]
        assert kwargs == {"check": True}

    @patch(CLONE_RUN, side_effect=subprocess.CalledProcessError(1, ["npx"]))
    @patch(WHICH, return_value="/usr/bin/npx")
    def test_non_zero_exit(self, _mock_which: MagicMock, _mock_run: MagicMock) -> None:
        with pytest.raises(TemplateCloneError, match="Failed to create Opus UI project"):
            DegitTemplateCloner().clone("ref", Path("app"))

    @patch(CLONE_RUN, side_effect=PermissionError("denied"))
    @patch(WHICH, return_value="/usr/bin/npx")
    def test_os_error(self, _mock_which: MagicMock, _mock_run: MagicMock) -> None:
        with pytest.raises(TemplateCloneError, match="denied"):
            DegitTemplateCloner().clone("ref", Path("app"))

    @patch(CLONE_RUN)
    @patch(WHICH, return_value=None)
    def test_missing_npx(self, _mock_which: MagicMock, mock_run: MagicMock) -> None:
        with pytest.raises(TemplateCloneError) as exc_info:
            DegitTemplateCloner().clone("ref", Path("app"))
        assert exc_info.value.hint is not None
        mock_run.assert_not_called()


# ---------------------------------------------------------------------------
# NpmPackageInstaller
# ---------------------------------------------------------------------------

class TestNpmPackageInstaller:
    def test_build_command_single_invocation(self) -> None:
        cmd = NpmPackageInstaller().build_command(["A", "B"])
        assert cmd == ["npm", "install", "A", "B"]

    @patch(INSTALL_RUN)
    @patch(WHICH, return_value="/usr/bin/npm")
    def test_runs_in_project_dir(
        self, _mock_which: MagicMock, mock_run: MagicMock, tmp_path: Path,
    ) -> None:
        NpmPackageInstaller().install(tmp_path, ("A", "B"))
        mock_run.assert_called_once()
        args, kwargs = mock_run.call_args
        assert args[0][1:] == ["install", "A", "B"]
        assert kwargs == {"cwd": tmp_path, "check": True}

    @patch(INSTALL_RUN, side_effect=subprocess.CalledProcessError(1, ["npm"]))
    @patch(WHICH, return_value="/usr/bin/npm")
    def test_non_zero_exit(
        self, _mock_which: MagicMock, _mock_run: MagicMock, tmp_path: Path,
    ) -> None:
        with pytest.raises(DependencyInstallError, match="Failed to install libraries"):
            NpmPackageInstaller().install(tmp_path, ("A",))

    @patch(INSTALL_RUN)
    @patch(WHICH, return_value=None)
    def test_missing_npm(
        self, _mock_which: MagicMock, mock_run: MagicMock, tmp_path: Path,
    ) -> None:
        with pytest.raises(DependencyInstallError, match="npm is not installed"):
            NpmPackageInstaller().install(tmp_path, ("A",))
        mock_run.assert_not_called()


# ---------------------------------------------------------------------------
# Version-manager shims
# ---------------------------------------------------------------------------

class TestShimmedExecutables:
    @pytest.fixture()
    def shim_link(self, tmp_path: Path) -> Path:
        shim = tmp_path / "volta-shim"
        shim.write_text("#!/bin/sh\n", encoding="utf-8")
        link = tmp_path / "bin" / "npx"
        link.parent.mkdir()
        try:
            link.symlink_to(shim)
        except OSError:
            pytest.skip("symlinks not supported")
        return link

    def test_detect_tool_keeps_link_path(self, shim_link: Path) -> None:
        with patch(WHICH, return_value=str(shim_link)):
            assert detect_tool("npx").path == shim_link

    @patch(CLONE_RUN)
    def test_clone_runs_link_not_target(self, mock_run: MagicMock, shim_link: Path) -> None:
        with patch(WHICH, return_value=str(shim_link)):
            DegitTemplateCloner().clone("ref", Path("app"))
        assert mock_run.call_args.args[0][0] == str(shim_link)

    @patch(INSTALL_RUN)
    def test_install_runs_link_not_target(
        self, mock_run: MagicMock, shim_link: Path, tmp_path: Path,
    ) -> None:
        with patch(WHICH, return_value=str(shim_link)):
            NpmPackageInstaller().install(tmp_path, ("A",))
        assert mock_run.call_args.args[0][0] == str(shim_link)
