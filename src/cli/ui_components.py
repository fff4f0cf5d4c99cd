"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en `check` y `doctor`.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import RemoteOpsReport


def configure_logging(verbose: bool = False) -> None:
    """Logging de la aplicación hacia stderr vía Rich.

    stdout queda libre para el resultado (`true`/`false` o JSON).
    """

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )


def build_report_panel(report: RemoteOpsReport) -> Panel:
    """Panel con el detalle de un `RemoteOpsReport`."""

    table = Table.grid(padding=(0, 2))
    table.add_column(style="cyan", no_wrap=True)
    table.add_column(style="white")

    table.add_row("Project", report.project_path)
    table.add_row("Local workspace", report.local_workspace)
    table.add_row("Backend type", report.backend_type or "-")
    if report.hostname:
        table.add_row("Hostname", report.hostname)
    if report.organization:
        table.add_row("Organization", report.organization)
    if report.entitled is not None:
        table.add_row("Entitled", "yes" if report.entitled else "no")
    if report.remote_workspace:
        table.add_row("Remote workspace", report.remote_workspace)
    if report.not_remote_reason:
        table.add_row("Reason", report.not_remote_reason)

    if report.using_remote_ops:
        title = Text("Remote operations: ON", style="bold green")
        border = "green"
    else:
        title = Text("Remote operations: OFF", style="bold yellow")
        border = "yellow"
    return Panel(table, title=title, border_style=border)


def build_doctor_table() -> Table:
    table = Table(title="Remote Ops Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table
