"""CLI principal (Typer).

Comandos:
- `check PROJECT_PATH -w WORKSPACE`: imprime `true`/`false` (o JSON con `--json`).
- `doctor run PROJECT_PATH`: diagnóstico etapa por etapa.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from cli import doctor
from cli.ui_components import build_report_panel, configure_logging
from core.config import AppSettings
from core.domain.errors import RemoteOpsError
from core.services.remote_ops_checker import DefaultRemoteOpsChecker

app = typer.Typer(
    no_args_is_help=True,
    help="Detect whether a Terraform project runs its operations on Terraform Cloud/Enterprise.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


@app.command()
def check(
    project_path: Path = typer.Argument(
        ...,
        exists=True,
        file_okay=False,
        dir_okay=True,
        resolve_path=True,
        help="Terraform project directory.",
    ),
    workspace: str = typer.Option("default", "--workspace", "-w", help="Local Terraform CLI workspace."),
    as_json: bool = typer.Option(False, "--json", help="Print the full report as JSON."),
    details: bool = typer.Option(False, "--details", help="Print a detailed report panel."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr."),
) -> None:
    """Check if Terraform commands for PROJECT_PATH execute remotely."""

    configure_logging(verbose)
    checker = DefaultRemoteOpsChecker(settings=AppSettings())
    try:
        report = checker.inspect(workspace, project_path)
    except RemoteOpsError as exc:
        _err_console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    if as_json:
        typer.echo(report.model_dump_json(indent=2))
    elif details:
        _console.print(build_report_panel(report))
    else:
        typer.echo("true" if report.using_remote_ops else "false")


def run() -> None:
    app()
