"""Entry point de la CLI `promptly`."""

from __future__ import annotations

import typer
from rich.console import Console

from promptly import __version__
from promptly.cli import doctor
from promptly.cli.ui_components import print_banner
from promptly.core.logging import configure_logging

app = typer.Typer(no_args_is_help=True, help="Promptly SDK tooling.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log HTTP calls (DEBUG)."),
) -> None:
    if verbose:
        configure_logging("DEBUG")


@app.command()
def version() -> None:
    """Print the SDK version."""

    print_banner(_console)
    _console.print(f"promptly-sdk {__version__}")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
