"""``npx degit`` backed implementation of :class:`~create_opus_ui_app.core.protocols.TemplateCloner`.

The clone runs with the parent's console streams so degit's own output
is shown to the user.  Every failure is re-raised as
:class:`~create_opus_ui_app.exceptions.TemplateCloneError`.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from create_opus_ui_app.exceptions import TemplateCloneError
from create_opus_ui_app.infra.tool_detector import detect_tool, missing_tool_hint


class DegitTemplateCloner:
    """Concrete :class:`TemplateCloner` that shells out to ``npx degit``.

    This class satisfies the protocol structurally — no explicit
    inheritance required.
    """

    executable: str = "npx"

    def build_command(
        self,
        template_ref: str,
        destination: Path,
        executable: str | None = None,
    ) -> list[str]:
        """Return the argv used to clone *template_ref* into *destination*."""
        return [executable or self.executable, "degit", template_ref, str(destination)]

    def clone(self, template_ref: str, destination: Path) -> None:
        """Clone *template_ref* into *destination*.

        Raises
        ------
        TemplateCloneError
            When ``npx`` is missing, exits non-zero, or cannot be started.
        """
        status = detect_tool(self.executable)
        if not status.found:
            raise TemplateCloneError(
                f"Failed to create Opus UI project: {self.executable} is not installed.",
                hint=missing_tool_hint(status),
            )

        command = self.build_command(template_ref, destination, str(status.path))
        try:
            subprocess.run(command, check=True)
        except subprocess.CalledProcessError as exc:
            raise TemplateCloneError(
                f"Failed to create Opus UI project: {exc}",
                hint="Check your network connection and that the directory does not already exist.",
            ) from exc
        except OSError as exc:
            raise TemplateCloneError(
                f"Failed to create Opus UI project: {exc}",
            ) from exc
