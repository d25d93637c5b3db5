"""Table / JSON / YAML output dispatch."""

from __future__ import annotations

import json
from typing import Any

from rich.console import Console

from deploy_commander.models.doctor import DiagnosticResult
from deploy_commander.models.resource import Configuration, Resource
from deploy_commander.utils.kubernetes_util import to_yaml_or_error

console = Console()


def _print_data(data: Any, fmt: str) -> bool:
    """Print data as json or yaml; return False for table output."""
    if fmt == "json":
        console.print_json(json.dumps(data, indent=2, default=str))
        return True
    if fmt == "yaml":
        # Plain print keeps rich markup parsing away from the document.
        print(to_yaml_or_error(data), end="")
        return True
    return False


def output_resource(resource: Resource, fmt: str) -> None:
    if _print_data(resource.to_dict(), fmt):
        return
    from deploy_commander.output.tables import resource_panel
    console.print(resource_panel(resource))


def output_configuration(
    config: Configuration,
    fmt: str,
    title: str = "Resources",
    counts: dict[str, int] | None = None,
) -> None:
    if _print_data(config.to_dict(), fmt):
        return
    from deploy_commander.output.tables import configuration_table, type_count_table
    console.print(configuration_table(config, title=title))
    if counts:
        console.print(type_count_table(counts))


def output_diagnostics(results: list[DiagnosticResult], fmt: str) -> bool:
    """Print diagnostics; returns True when a machine format was printed."""
    if _print_data([r.to_dict() for r in results], fmt):
        return True
    from deploy_commander.output.tables import diagnostics_table
    console.print(diagnostics_table(results))
    return False


def success(message: str) -> None:
    console.print(f"[green]{message}[/green]")


def warning(message: str) -> None:
    console.print(f"[yellow]{message}[/yellow]")
