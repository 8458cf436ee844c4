"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

import json
from typing import Any

from rich.console import Console
from rich.json import JSON
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.errors import ApiError, ApplicationError, TransportError


def print_result(console: Console, data: Any) -> None:
    """Imprime el valor parseado como JSON coloreado."""

    console.print(JSON(json.dumps(data, ensure_ascii=False, default=str)))


def build_products_table(products: list[Any]) -> Table:
    table = Table(title="Products")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Price", style="green", justify="right")
    table.add_column("Category", style="magenta")

    for item in products:
        if not isinstance(item, dict):
            continue
        category = item.get("category")
        if isinstance(category, dict):
            category = category.get("name")
        table.add_row(
            str(item.get("id", "")),
            str(item.get("name", "")),
            str(item.get("price", "")),
            str(category or item.get("categoryId", "")),
        )
    return table


def build_categories_table(categories: list[Any]) -> Table:
    table = Table(title="Categories")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Description", style="dim")

    for item in categories:
        if not isinstance(item, dict):
            continue
        table.add_row(
            str(item.get("id", "")),
            str(item.get("name", "")),
            str(item.get("description") or ""),
        )
    return table


def build_error_panel(error: ApiError) -> Panel:
    """Panel rojo para errores de la API (servidor o transporte)."""

    if isinstance(error, ApplicationError):
        title = Text(f"HTTP {error.status_code}", style="bold red")
    elif isinstance(error, TransportError):
        title = Text("Connection error", style="bold red")
    else:
        title = Text("Invalid response", style="bold red")
    return Panel(Text(str(error)), title=title, border_style="red")
