"""Recurso: autenticación.

- Registro y login devuelven `{"token": ...}`; el token lo guarda la app.
"""

from __future__ import annotations

from typing import Any

from adapters.http_client import ApiClient
from core.domain.methods import HttpMethod
from core.domain.models import LoginRequest, RegisterRequest


class AuthResource:
    def __init__(self, client: ApiClient) -> None:
        self._client = client

    async def register(self, data: RegisterRequest | dict[str, Any]) -> Any:
        return await self._client.execute("/auth/register", HttpMethod.POST, data)

    async def login(self, data: LoginRequest | dict[str, Any]) -> Any:
        return await self._client.execute("/auth/authenticate", HttpMethod.POST, data)
