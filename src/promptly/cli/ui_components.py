"""Piezas Rich compartidas por los comandos de la CLI (banner y tabla de checks)."""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from promptly.core.config import ClientSettings, get_user_env_file


def print_banner(console: Console, tenant_id: str | None = None) -> None:
    lines = [Text("Promptly SDK", style="bold magenta")]
    if tenant_id:
        lines.append(Text(f"tenant: {tenant_id}", style="dim"))
    console.print(Panel(Align.center(Text("\n").join(lines)), border_style="magenta", padding=(0, 2)))


def build_checks_table(title: str = "Promptly Doctor") -> Table:
    table = Table(title=title)
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table


def add_settings_rows(table: Table, settings: ClientSettings) -> None:
    """Filas de configuración resuelta (args > env > .env)."""

    table.add_row("Tenant", "OK", settings.tenant_id)
    table.add_row("Base URL", "OK", settings.base_url)
    table.add_row("Timeout", "OK", f"{settings.timeout} ms")
    env_file = get_user_env_file()
    table.add_row("User config", "OK" if env_file.exists() else "OPTIONAL", str(env_file))
