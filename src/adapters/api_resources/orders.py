"""Recurso: órdenes del usuario autenticado.

Todas las llamadas requieren el bearer token del usuario.
"""

from __future__ import annotations

from typing import Any

from adapters.http_client import ApiClient
from core.domain.methods import HttpMethod


class OrdersResource:
    def __init__(self, client: ApiClient) -> None:
        self._client = client

    async def create(self, data: Any, token: str) -> Any:
        return await self._client.execute("/orders", HttpMethod.POST, data, token)

    async def get_my_orders(self, token: str) -> Any:
        return await self._client.execute("/orders", HttpMethod.GET, None, token)

    async def get_by_id(self, order_id: int, token: str) -> Any:
        return await self._client.execute(f"/orders/{order_id}", HttpMethod.GET, None, token)

    async def get_by_code(self, order_code: str, token: str) -> Any:
        return await self._client.execute(f"/orders/code/{order_code}", HttpMethod.GET, None, token)
