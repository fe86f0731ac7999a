"""Infrastructure: locating the Node.js command-line tools.

The template clone uses ``npx`` and the dependency install uses ``npm``.
This module finds them on PATH and builds platform-specific guidance
when they are missing.

Rules
-----
* Detection via :func:`shutil.which` only — no subprocess.
* No automatic installation.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import platform
import shutil
from dataclasses import dataclass
from pathlib import Path


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ToolStatus:
    """Result of a PATH probe for one executable.

    Attributes
    ----------
    name : str
        Executable name that was looked up (e.g. ``"npm"``).
    path : Path | None
        Path reported by PATH lookup, or ``None`` when missing.  Symlinks
        are not resolved: version-manager shims dispatch on ``argv[0]``.
    install_commands : tuple[str, ...]
        Suggested shell commands for installing Node.js on the current
        platform.  Empty when the tool is already present.
    """

    name: str
    path: Path | None
    install_commands: tuple[str, ...]

    @property
    def found(self) -> bool:
        return self.path is not None


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def detect_tool(name: str) -> ToolStatus:
    """Probe PATH for *name*.

    Returns a :class:`ToolStatus` regardless of the outcome — the caller
    decides how to report a missing tool.
    """
    result = shutil.which(name)
    if result is not None:
        return ToolStatus(name=name, path=Path(result), install_commands=())
    return ToolStatus(name=name, path=None, install_commands=_platform_install_commands())


def missing_tool_hint(status: ToolStatus) -> str:
    """Render install guidance for a tool that was not found."""
    lines = [f"'{status.name}' was not found on PATH. Install Node.js using one of:"]
    lines.extend(f"  {cmd}" for cmd in status.install_commands)
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Platform-specific install guidance
# ---------------------------------------------------------------------------

def _platform_install_commands() -> tuple[str, ...]:
    """Return Node.js install commands appropriate for the current OS."""
    system = platform.system().lower()
    if system == "windows":
        return (
            "winget install OpenJS.NodeJS.LTS",
            "choco install nodejs-lts",
        )
    if system == "linux":
        return (
            "sudo apt install nodejs npm",
            "sudo dnf install nodejs",
            "sudo pacman -S nodejs npm",
        )
    if system == "darwin":
        return ("brew install node",)
    return ("Download Node.js from https://nodejs.org/",)
