"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Describe el descriptor de request y la configuración de transporte sin
  acoplar el Core a httpx.
- Los payloads de negocio (registro, login, pago) se documentan con `Field`
  y alias camelCase del backend; el cliente no los valida más allá de eso.

Nota:
- Estos modelos viven solo durante una llamada; nada se persiste.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.methods import HttpMethod


class ApiRequest(BaseModel):
    """Descriptor de una llamada: qué endpoint, con qué verbo, body y token."""

    model_config = ConfigDict(frozen=True)

    endpoint: str = Field(
        ...,
        description="Path que se concatena tal cual a la URL base (puede incluir query string).",
    )
    method: HttpMethod = Field(
        default=HttpMethod.GET,
        description="Verbo HTTP (GET/POST/PUT/DELETE).",
    )
    body: Any = Field(
        default=None,
        description="Valor serializable a JSON; `None` significa 'sin payload'.",
    )
    token: str | None = Field(
        default=None,
        repr=False,
        description="Bearer token opcional; nunca aparece en repr ni en logs.",
    )

    @property
    def has_token(self) -> bool:
        return bool(self.token)


class TransportConfig(BaseModel):
    """Headers y payload derivados de forma determinista de un `ApiRequest`."""

    model_config = ConfigDict(frozen=True)

    headers: dict[str, str] = Field(
        default_factory=dict,
        description="Headers de la request (Content-Type siempre presente).",
    )
    content: str | None = Field(
        default=None,
        description="Body serializado como texto JSON, o `None` si no hay payload.",
    )


class AuthResponse(BaseModel):
    """Respuesta de `/auth/register` y `/auth/authenticate`."""

    model_config = ConfigDict(extra="ignore")

    token: str = Field(
        ...,
        min_length=1,
        repr=False,
        description="JWT emitido por el backend.",
    )


class RegisterRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    email: str = Field(..., min_length=3)
    password: str = Field(..., min_length=1, repr=False)


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=3)
    password: str = Field(..., min_length=1, repr=False)


class PaymentIntentRequest(BaseModel):
    """Body de `/payments/create-payment-intent`."""

    model_config = ConfigDict(populate_by_name=True)

    order_id: int = Field(
        ...,
        alias="orderId",
        description="Id de la orden que se va a cobrar.",
    )
    amount: float = Field(
        ...,
        description="Monto en la unidad que espera el backend.",
    )
    currency: str | None = Field(
        default=None,
        description="Código ISO de moneda; si se omite el backend usa su default.",
    )
