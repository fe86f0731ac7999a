"""``npm install`` backed implementation of :class:`~create_opus_ui_app.core.protocols.PackageInstaller`."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from pathlib import Path

from create_opus_ui_app.exceptions import DependencyInstallError
from create_opus_ui_app.infra.tool_detector import detect_tool, missing_tool_hint


class NpmPackageInstaller:
    """Concrete :class:`PackageInstaller` running one ``npm install`` call."""

    executable: str = "npm"

    def build_command(
        self,
        packages: Sequence[str],
        executable: str | None = None,
    ) -> list[str]:
        """Return the argv installing every one of *packages* in one call."""
        return [executable or self.executable, "install", *packages]

    def install(self, project_dir: Path, packages: Sequence[str]) -> None:
        """Install *packages* into *project_dir*.

        Raises
        ------
        DependencyInstallError
            When ``npm`` is missing, exits non-zero, or cannot be started.
        """
        status = detect_tool(self.executable)
        if not status.found:
            raise DependencyInstallError(
                f"Failed to install libraries: {self.executable} is not installed.",
                hint=missing_tool_hint(status),
            )

        try:
            subprocess.run(
                self.build_command(packages, str(status.path)),
                cwd=project_dir,
                check=True,
            )
        except subprocess.CalledProcessError as exc:
            raise DependencyInstallError(
                f"Failed to install libraries: {exc}",
                hint="Check the registry is reachable and the package names resolve.",
            ) from exc
        except OSError as exc:
            raise DependencyInstallError(
                f"Failed to install libraries: {exc}",
            ) from exc
