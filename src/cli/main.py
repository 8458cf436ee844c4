"""CLI principal (Typer).

Por qué una CLI:
- Permite probar el backend a mano (catálogo, login, llamadas arbitrarias)
  usando exactamente el mismo executor que la aplicación.
- Los errores de la API se muestran en un panel y salen con código 1.
"""

from __future__ import annotations

import asyncio
import json
from typing import Any, Awaitable, Callable

import typer
from rich.console import Console

from adapters.api_resources import StorefrontApi
from adapters.diagnostics import StructlogDiagnosticSink
from cli import doctor
from cli.ui_components import (
    build_categories_table,
    build_error_panel,
    build_products_table,
    print_result,
)
from core.config import AppSettings
from core.domain.methods import HttpMethod
from core.errors import ApiError
from core.logging import configure_logging

app = typer.Typer(no_args_is_help=True, help="Command-line client for the storefront REST API.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


@app.callback()
def main(
    ctx: typer.Context,
    api_url: str | None = typer.Option(None, "--api-url", help="Override the API base URL."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every request (token truncated)."),
    log_json: bool = typer.Option(False, "--log-json", help="Emit logs as JSON lines."),
) -> None:
    settings = AppSettings()
    updates: dict[str, Any] = {}
    if api_url:
        updates["api_url"] = api_url
    if verbose:
        updates["verbose"] = True
    if log_json:
        updates["log_json"] = True
    if updates:
        settings = settings.model_copy(update=updates)

    configure_logging(verbose=settings.verbose, log_json=settings.log_json)
    ctx.obj = {"settings": settings}


def _run(ctx: typer.Context, call: Callable[[StorefrontApi], Awaitable[Any]]) -> Any:
    settings: AppSettings = ctx.obj["settings"]

    async def _go() -> Any:
        async with StorefrontApi(settings, diagnostics=StructlogDiagnosticSink()) as api:
            return await call(api)

    try:
        return asyncio.run(_go())
    except ApiError as exc:
        _err_console.print(build_error_panel(exc))
        raise typer.Exit(code=1) from exc


def _parse_body(raw: str | None) -> Any:
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"--body is not valid JSON: {exc.msg}") from exc


@app.command()
def request(
    ctx: typer.Context,
    method: str = typer.Argument(..., help="GET, POST, PUT or DELETE."),
    endpoint: str = typer.Argument(..., help="Path appended to the base URL, e.g. /products/1."),
    body: str | None = typer.Option(None, "--body", "-d", help="JSON request body."),
    token: str | None = typer.Option(None, "--token", "-t", envvar="STOREFRONT_TOKEN", help="Bearer token."),
) -> None:
    """Send one request through the client and print the parsed response."""

    try:
        verb = HttpMethod.parse(method)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="METHOD") from exc
    payload = _parse_body(body)

    data = _run(ctx, lambda api: api.client.execute(endpoint, verb, payload, token))
    print_result(_console, data)


@app.command()
def products(
    ctx: typer.Context,
    product_id: str | None = typer.Option(None, "--id", help="Show a single product."),
    category: str | None = typer.Option(None, "--category", "-c", help="Filter by category id."),
    raw: bool = typer.Option(False, "--json", help="Print raw JSON instead of a table."),
) -> None:
    """List products (all, by category) or show one by id."""

    if product_id is not None:
        data = _run(ctx, lambda api: api.products.get_by_id(product_id))
        print_result(_console, data)
        return

    if category is not None:
        data = _run(ctx, lambda api: api.products.get_by_category(category))
    else:
        data = _run(ctx, lambda api: api.products.get_all())

    if raw or not isinstance(data, list):
        print_result(_console, data)
        return
    _console.print(build_products_table(data))


@app.command()
def categories(
    ctx: typer.Context,
    raw: bool = typer.Option(False, "--json", help="Print raw JSON instead of a table."),
) -> None:
    """List product categories."""

    data = _run(ctx, lambda api: api.categories.get_all())
    if raw or not isinstance(data, list):
        print_result(_console, data)
        return
    _console.print(build_categories_table(data))


@app.command()
def login(
    ctx: typer.Context,
    email: str = typer.Argument(..., help="Account email."),
    password: str = typer.Option(..., prompt=True, hide_input=True, help="Account password."),
) -> None:
    """Authenticate and print the bearer token."""

    data = _run(ctx, lambda api: api.auth.login({"email": email, "password": password}))
    token = data.get("token") if isinstance(data, dict) else None
    if not token:
        _err_console.print("[red]Login response did not include a token.[/red]")
        raise typer.Exit(code=1)
    _console.print(token)


def run() -> None:
    app()
