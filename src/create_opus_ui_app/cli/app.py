"""CLI application entry point for create-opus-ui-app.

This module is the **sole error boundary** for the entire application.
It catches :class:`~create_opus_ui_app.exceptions.CreateAppError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core
  service and the infrastructure adapters.
* This module is the only place that translates between the domain
  world and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rich.markup import escape

from create_opus_ui_app.cli import exit_codes
from create_opus_ui_app.cli.console import console
from create_opus_ui_app.exceptions import CreateAppError
from create_opus_ui_app.settings import DESCRIPTION, PROGRAM_NAME, TEMPLATE_REPOSITORY
from create_opus_ui_app.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the argument parser.  There are no sub-commands."""
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description=DESCRIPTION,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--template",
        default=TEMPLATE_REPOSITORY,
        metavar="REF",
        help="degit reference of the project template (default: %(default)s).",
    )
    parser.add_argument(
        "--directory",
        type=Path,
        default=None,
        metavar="DIR",
        help="Parent directory for the new project (default: current directory).",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_create(template_ref: str, base_dir: Path | None) -> int:
    """Prompt for the project details and run the scaffolding pipeline."""
    from create_opus_ui_app.cli.prompts import prompt_project_request
    from create_opus_ui_app.core.scaffold_service import ScaffoldService
    from create_opus_ui_app.infra.degit_cloner import DegitTemplateCloner
    from create_opus_ui_app.infra.npm_installer import NpmPackageInstaller
    from create_opus_ui_app.infra.project_files import ProjectFiles

    request = prompt_project_request()

    service = ScaffoldService(
        DegitTemplateCloner(),
        NpmPackageInstaller(),
        ProjectFiles,
        base_dir=base_dir,
        template_ref=template_ref,
        on_stage=lambda message: console.print(f"[bold]{escape(message)}[/bold]"),
    )
    service.run(request)

    console.print(
        '\n[bold green]Project setup is now complete.[/bold green] Run "npm start".'
    )
    console.print(f"  cd {escape(request.project_name)}")
    console.print("  npm start")
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the create-opus-ui-app CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    return _handle_create(args.template, args.directory)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except CreateAppError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
