"""Rich table builders for each command."""

from __future__ import annotations

from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from deploy_commander.models.doctor import DiagnosticResult
from deploy_commander.models.resource import Configuration, Resource
from deploy_commander.output.themes import styled_severity_icon, styled_type
from deploy_commander.utils.kubernetes_util import to_yaml_or_error


def resource_panel(resource: Resource) -> Panel:
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="bold cyan", no_wrap=True)
    table.add_column("Value")

    table.add_row("Name", resource.name)
    table.add_row("Type", styled_type(resource.type))
    table.add_row("Properties", properties_syntax(resource.properties))
    return Panel(table, title=f"[bold]Resource: {resource.name}[/bold]", border_style="blue")


def properties_syntax(properties: dict) -> Syntax:
    text = to_yaml_or_error(properties) if properties else "{}"
    return Syntax(text, "yaml", theme="monokai", line_numbers=False)


def configuration_table(config: Configuration, title: str = "Resources") -> Table:
    table = Table(title=title, expand=True)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Name", style="bold white", no_wrap=True)
    table.add_column("Type", no_wrap=True)
    table.add_column("API Version", style="cyan")
    table.add_column("Kind", style="magenta")

    for i, r in enumerate(config.resources, 1):
        table.add_row(
            str(i),
            r.name,
            styled_type(r.type),
            str(r.properties.get("apiVersion", "")),
            str(r.properties.get("kind", "")),
        )
    return table


def type_count_table(counts: dict[str, int]) -> Table:
    table = Table(title="Resources by Type", expand=False)
    table.add_column("Type", style="cyan")
    table.add_column("Count", justify="right", style="bold")
    for type_name, count in sorted(counts.items()):
        table.add_row(type_name, str(count))
    return table


def diagnostics_table(results: list[DiagnosticResult]) -> Table:
    table = Table(title="Doctor", expand=True)
    table.add_column("", width=3, no_wrap=True)
    table.add_column("Check", style="cyan", no_wrap=True)
    table.add_column("Message", max_width=60)
    table.add_column("Suggestion", style="dim", max_width=50)

    for r in results:
        table.add_row(
            styled_severity_icon(r.severity),
            r.check_name,
            r.message,
            r.suggestion or "",
        )
    return table
