"""Recursos del backend (call sites de dominio).

Por qué un paquete:
- Agrupa módulos por recurso REST (auth, products, orders, ...).
- Cada clase solo fija endpoint y verbo y delega en `ApiClient.execute`.
"""

from __future__ import annotations

import httpx

from adapters.api_resources.auth import AuthResource
from adapters.api_resources.categories import CategoriesResource
from adapters.api_resources.orders import OrdersResource
from adapters.api_resources.payments import PaymentsResource
from adapters.api_resources.products import ProductsResource
from adapters.http_client import ApiClient
from core.config import AppSettings
from core.interfaces.diagnostics import DiagnosticSink


class StorefrontApi:
    """Fachada: `api.auth`, `api.products`, ... sobre un único `ApiClient`.

    Un `ApiClient` inyectado con `client=` lo cierra quien lo creó.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: ApiClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        diagnostics: DiagnosticSink | None = None,
    ) -> None:
        self._owns_client = client is None
        self.client = client or ApiClient(settings, transport=transport, diagnostics=diagnostics)
        self.auth = AuthResource(self.client)
        self.products = ProductsResource(self.client)
        self.categories = CategoriesResource(self.client)
        self.orders = OrdersResource(self.client)
        self.payments = PaymentsResource(self.client)

    async def __aenter__(self) -> "StorefrontApi":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()


__all__ = [
	"AuthResource",
	"CategoriesResource",
	"OrdersResource",
	"PaymentsResource",
	"ProductsResource",
	"StorefrontApi",
]
