"""Root Typer application, mounts sub-commands."""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

app = typer.Typer(
    name="dcom",
    help="Deploy Commander - Inspect and normalize deployment resources.",
    no_args_is_help=True,
)


@app.callback()
def root(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _register_commands() -> None:
    from deploy_commander.cli.commands.doctor_cmd import app as doctor_app
    from deploy_commander.cli.commands.parse_cmd import app as parse_app
    from deploy_commander.cli.commands.convert_cmd import app as convert_app

    app.add_typer(doctor_app, name="doctor", help="Run a series of checks for necessary prerequisites")
    app.add_typer(parse_app, name="parse", help="Parse a Kubernetes object into a resource")
    app.add_typer(convert_app, name="convert", help="Qualify Kubernetes resource types in a configuration")


_register_commands()


def main() -> None:
    app()
