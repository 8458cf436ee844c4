from __future__ import annotations

from typing import Any

from adapters.http_client import ApiClient


class CategoriesResource:
    def __init__(self, client: ApiClient) -> None:
        self._client = client

    async def get_all(self) -> Any:
        return await self._client.execute("/categories")
