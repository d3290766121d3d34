"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from promptly.cli.ui_components import add_settings_rows, build_checks_table, print_banner
from promptly.client import Promptly
from promptly.core.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_MS, write_user_env_vars
from promptly.core.errors import PromptlyError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _build_client(tenant_id: str | None, base_url: str | None) -> Promptly:
    return Promptly(tenant_id, base_url=base_url)


async def _check_endpoint(client: Promptly, name: str) -> tuple[bool, str]:
    try:
        if name == "theme":
            await client.get_theme()
        else:
            await client.get_settings()
        return True, "OK"
    except PromptlyError as exc:
        return False, f"HTTP {exc.status}: {exc.message}" if exc.status else exc.message


@app.command()
def run(
    tenant_id: Optional[str] = typer.Option(None, "--tenant-id", "-t", help="Tenant to check (defaults to PROMPTLY_TENANT_ID)."),
    base_url: Optional[str] = typer.Option(None, "--base-url", help="API base URL override."),
) -> None:
    """Run baseline diagnostics against the public endpoints of a tenant."""

    try:
        client = _build_client(tenant_id, base_url)
    except ValidationError as exc:
        _console.print(f"[red]Invalid configuration:[/red] {exc.errors()[0]['msg']}")
        _console.print("Pass --tenant-id or run `promptly doctor setup`.")
        raise typer.Exit(code=1) from exc

    print_banner(_console, client.settings.tenant_id)
    table = build_checks_table()
    add_settings_rows(table, client.settings)

    ok_settings, detail_settings = asyncio.run(_check_endpoint(client, "settings"))
    table.add_row("GET /public/settings", "OK" if ok_settings else "FAIL", detail_settings)

    ok_theme, detail_theme = asyncio.run(_check_endpoint(client, "theme"))
    table.add_row("GET /public/theme", "OK" if ok_theme else "FAIL", detail_theme)

    _console.print(table)

    if not (ok_settings and ok_theme):
        raise typer.Exit(code=1)


@app.command(name="setup")
def setup() -> None:
    """Interactive setup (stores config in the user config .env)."""

    tenant_id = typer.prompt("Tenant id").strip()
    base_url = typer.prompt("API base URL", default=DEFAULT_BASE_URL, show_default=True).strip()
    timeout = typer.prompt("Timeout (ms)", default=DEFAULT_TIMEOUT_MS, type=int, show_default=True)

    if not tenant_id:
        raise typer.BadParameter("tenant id is required")
    if timeout <= 0:
        raise typer.BadParameter("timeout must be positive")

    env_path = write_user_env_vars(
        {
            "PROMPTLY_TENANT_ID": tenant_id,
            "PROMPTLY_BASE_URL": base_url,
            "PROMPTLY_TIMEOUT": str(timeout),
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
