"""dcom parse <file> - Parse a Kubernetes object into a resource."""

from __future__ import annotations

import typer

from deploy_commander.cli.options import OutputOption
from deploy_commander.cli.sources import read_source
from deploy_commander.output.formatters import output_configuration, output_resource
from deploy_commander.utils.kubernetes_util import KubernetesObjectError, parse_kubernetes_object
from deploy_commander.utils.manifest_parser import parse_manifest, type_counts

# Accept options after the file argument.
app = typer.Typer(context_settings={"allow_interspersed_args": True})


@app.callback(invoke_without_command=True)
def parse(
    file: str = typer.Argument(help="YAML file holding a Kubernetes object, or '-' for stdin"),
    output: str = OutputOption,
    all_documents: bool = typer.Option(
        False, "--all", "-a", help="Treat the input as a multi-document manifest",
    ),
) -> None:
    """Parse a native Kubernetes object into a qualified resource."""
    data = read_source(file)
    try:
        if all_documents:
            config = parse_manifest(data.decode("utf-8"))
        else:
            resource = parse_kubernetes_object(data)
    except (KubernetesObjectError, UnicodeDecodeError) as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)

    if all_documents:
        output_configuration(config, output, title="Manifest", counts=type_counts(config))
    else:
        output_resource(resource, output)
