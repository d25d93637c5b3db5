"""dcom convert <file> - Qualify Kubernetes resource types in a configuration."""

from __future__ import annotations

import logging

import typer

from deploy_commander.cli.options import OutputOption
from deploy_commander.cli.sources import read_source
from deploy_commander.output.formatters import output_configuration
from deploy_commander.utils.kubernetes_util import KubernetesObjectError, convert_kubernetes_resource_types
from deploy_commander.utils.manifest_parser import load_configuration, type_counts

logger = logging.getLogger(__name__)

# Accept options after the file argument.
app = typer.Typer(context_settings={"allow_interspersed_args": True})


@app.callback(invoke_without_command=True)
def convert(
    file: str = typer.Argument(help="Configuration file with a 'resources' list, or '-' for stdin"),
    output: str = OutputOption,
) -> None:
    """Rewrite raw Kubernetes kinds to qualified resource types."""
    data = read_source(file)
    try:
        config = load_configuration(data.decode("utf-8"))
    except (KubernetesObjectError, UnicodeDecodeError) as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)

    before = [r.type for r in config.resources]
    convert_kubernetes_resource_types(config)
    changed = sum(1 for old, r in zip(before, config.resources) if old != r.type)
    logger.debug("Qualified %d of %d resource types", changed, len(config.resources))

    output_configuration(config, output, title="Configuration", counts=type_counts(config))
