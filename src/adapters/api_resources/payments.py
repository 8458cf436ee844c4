"""Recurso: pagos (payment intents).

`confirm_success` / `confirm_failure` envían el id en la query string y no
llevan body.
"""

from __future__ import annotations

from typing import Any

from adapters.http_client import ApiClient
from core.domain.methods import HttpMethod
from core.domain.models import PaymentIntentRequest


class PaymentsResource:
    def __init__(self, client: ApiClient) -> None:
        self._client = client

    async def create_payment_intent(self, data: PaymentIntentRequest | dict[str, Any], token: str) -> Any:
        return await self._client.execute("/payments/create-payment-intent", HttpMethod.POST, data, token)

    async def confirm_success(self, payment_intent_id: str, token: str) -> Any:
        return await self._client.execute(
            f"/payments/success?paymentIntentId={payment_intent_id}", HttpMethod.POST, None, token
        )

    async def confirm_failure(self, payment_intent_id: str, token: str) -> Any:
        return await self._client.execute(
            f"/payments/failure?paymentIntentId={payment_intent_id}", HttpMethod.POST, None, token
        )
