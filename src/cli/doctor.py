"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import AppSettings, get_user_env_file, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc) or type(exc).__name__


def _settings_from(ctx: typer.Context) -> AppSettings:
    obj = ctx.obj or {}
    return obj.get("settings") or AppSettings()


@app.command()
def run(ctx: typer.Context) -> None:
    """Show the active configuration and check the backend is reachable."""

    settings = _settings_from(ctx)

    table = Table(title="storefront doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("API base URL", "OK", settings.api_url)
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    env_file = get_user_env_file()
    table.add_row("User config", "OK" if env_file.exists() else "OPTIONAL", str(env_file))

    # Any HTTP answer (even 404) means the server is reachable.
    ok_http, detail_http = asyncio.run(_check_http(settings.api_url, settings))
    table.add_row("Backend connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not ok_http:
        _console.print(
            "\n[yellow]Note:[/yellow] set STOREFRONT_API_URL or run `storefront doctor setup`."
        )
        raise typer.Exit(code=1)


@app.command(name="setup")
def setup() -> None:
    """Interactive setup (stores the API base URL in the user config .env)."""

    current = AppSettings().api_url
    api_url = typer.prompt("API base URL", default=current, show_default=True).strip()

    if not api_url.startswith(("http://", "https://")):
        raise typer.BadParameter("api url must start with http:// or https://")

    env_path = write_user_env_vars({"STOREFRONT_API_URL": api_url.rstrip("/")})

    _console.print(f"[green]Saved API config to:[/green] {env_path}")
