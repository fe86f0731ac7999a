"""create-opus-ui-app — interactive Opus UI project scaffolder.

Clones the Opus UI example template, installs the selected component
libraries and wires them into the generated project.
"""

from create_opus_ui_app.version import __version__

__all__: list[str] = ["__version__"]
