"""Doctor command for environment diagnostics."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from adapters.credentials import credentials_file_path, resolve_token
from adapters.statefile import read_statefile, statefile_path
from adapters.tfe_client import build_tfe_client
from cli.ui_components import build_doctor_table, configure_logging
from core.config import AppSettings
from core.domain.errors import RemoteOpsError
from core.domain.models import NotRemote
from core.services.backend_resolver import resolve_backend

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


@app.command()
def run(
    project_path: Path = typer.Argument(
        ...,
        exists=True,
        file_okay=False,
        dir_okay=True,
        resolve_path=True,
        help="Terraform project directory.",
    ),
    workspace: str = typer.Option("default", "--workspace", "-w", help="Local Terraform CLI workspace."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr."),
) -> None:
    """Run each detection stage and show where configuration breaks."""

    configure_logging(verbose)
    settings = AppSettings()
    table = build_doctor_table()
    failed = False

    try:
        _diagnose(table, settings, project_path, workspace)
    except RemoteOpsError as exc:
        table.add_row(type(exc).__name__, "FAIL", str(exc))
        failed = True

    _console.print(table)
    if failed:
        raise typer.Exit(code=1)


def _diagnose(table: Table, settings: AppSettings, project_path: Path, workspace: str) -> None:
    state_path = statefile_path(project_path, settings)
    statefile = read_statefile(project_path, settings)
    if statefile is None:
        table.add_row("Statefile", "MISSING", f"{state_path} (not using remote ops)")
        return
    table.add_row("Statefile", "OK", str(state_path))

    resolution = resolve_backend(statefile, settings.default_hostname)
    if isinstance(resolution, NotRemote):
        table.add_row("Backend", "LOCAL", resolution.reason)
        return
    table.add_row(
        "Backend",
        "OK",
        f"remote: {resolution.organization} @ {resolution.hostname}",
    )

    token = resolve_token(resolution.hostname, settings)
    table.add_row("Credentials", "OK", f"token found in {credentials_file_path(settings)}")

    with build_tfe_client(token, resolution.hostname, settings) as client:
        client.ping()
        table.add_row("API", "OK", client.base_url)

        entitlements = client.read_entitlements(resolution.organization)
        if not entitlements.operations:
            table.add_row("Entitlement", "OFF", f"{resolution.organization} is not entitled to remote operations")
            return
        table.add_row("Entitlement", "OK", "operations")

        remote_name = resolution.remote_workspace_name(workspace)
        remote_workspace = client.read_workspace(resolution.organization, remote_name)
        status = "ON" if remote_workspace.operations else "OFF"
        table.add_row("Workspace", status, f"{remote_name} (execution mode: {remote_workspace.execution_mode or '-'})")
