"""Recurso: catálogo de productos (público, sin token)."""

from __future__ import annotations

from typing import Any

from adapters.http_client import ApiClient


class ProductsResource:
    def __init__(self, client: ApiClient) -> None:
        self._client = client

    async def get_all(self) -> Any:
        return await self._client.execute("/products")

    async def get_by_id(self, product_id: str | int) -> Any:
        return await self._client.execute(f"/products/{product_id}")

    async def get_by_category(self, category_id: str | int) -> Any:
        return await self._client.execute(f"/products/category/{category_id}")
