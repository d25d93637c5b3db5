"""dcom doctor - Run a series of checks for necessary prerequisites."""

from __future__ import annotations

from typing import Optional

import typer

from deploy_commander.cli.options import OutputOption, ContextOption
from deploy_commander.config.settings import settings
from deploy_commander.core.doctor_engine import is_installed, run_diagnostics
from deploy_commander.core.k8s_client import K8sClient
from deploy_commander.core.kubectl import KubectlRunner
from deploy_commander.output.formatters import output_diagnostics, success, warning

app = typer.Typer()


@app.callback(invoke_without_command=True)
def doctor(
    output: str = OutputOption,
    context: Optional[str] = ContextOption,
) -> None:
    """Check kubectl and the server-side components."""
    k8s = K8sClient(context=context)
    runner = KubectlRunner(context=context)
    results = run_diagnostics(k8s, runner)

    if output_diagnostics(results, output):
        return

    if not is_installed(k8s):
        warning(
            "\nLooks like you don't have the server-side components installed.\n"
            f"{settings.install_hint}"
        )
    elif any(r.is_problem for r in results):
        warning("\nServer-side components are installed, but some checks need attention.")
    else:
        success("\nYou have everything you need. Go forth my friend!")
