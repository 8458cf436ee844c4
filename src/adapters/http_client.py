"""Cliente REST sobre httpx.

Por qué un wrapper:
- Estandariza headers, bearer token, serialización JSON y normalización de
  respuestas para todas las llamadas al backend.
- Facilita testeo: el transporte httpx se puede sustituir por un
  `httpx.MockTransport`.

Flujo de `ApiClient.execute`:
1. headers JSON + `Authorization: Bearer <token>` solo si hay token
2. body -> texto JSON solo si hay body
3. status fuera de 2xx -> `ApplicationError` con el `message` del servidor
4. 204 / `Content-Length: 0` / body vacío -> `{}`
5. resto -> `json.loads` estricto (sin NaN/Infinity), sin validar la forma (salvo `response_model`)
"""

from __future__ import annotations

import json
from typing import Any

import httpx
import structlog
from pydantic import BaseModel

from adapters.diagnostics import NullDiagnosticSink, token_preview
from core.config import AppSettings
from core.domain.methods import HttpMethod
from core.domain.models import ApiRequest, TransportConfig
from core.errors import ApplicationError, InvalidResponseError, TransportError
from core.interfaces.diagnostics import DiagnosticSink

log = structlog.get_logger("storefront.http")

JSON_CONTENT_TYPE = "application/json"


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    Por qué un builder:
    - Centraliza timeout/headers para que todas las llamadas se comporten igual.
    - `transport` permite inyectar un `httpx.MockTransport` en tests.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": JSON_CONTENT_TYPE,
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        # Igual que `fetch` en el navegador: los 3xx se siguen.
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


def serialize_body(body: Any) -> str:
    """Serializa el body a texto JSON (los modelos Pydantic usan sus alias)."""

    if isinstance(body, BaseModel):
        body = body.model_dump(mode="json", by_alias=True, exclude_none=True)
    try:
        return json.dumps(body, ensure_ascii=False, allow_nan=False)
    except ValueError as exc:
        raise ValueError(f"Request body cannot be sent as JSON: {exc}") from exc


def _reject_constant(token: str) -> Any:
    # JSON estricto: NaN, Infinity y -Infinity no son JSON válido.
    raise ValueError(f"Non-standard JSON constant: {token}")


def loads_strict(text: str) -> Any:
    return json.loads(text, parse_constant=_reject_constant)


def build_transport_config(request: ApiRequest) -> TransportConfig:
    headers = {"Content-Type": JSON_CONTENT_TYPE}
    if request.token:
        headers["Authorization"] = f"Bearer {request.token}"

    content = serialize_body(request.body) if request.body is not None else None
    return TransportConfig(headers=headers, content=content)


def extract_error_message(response: httpx.Response) -> str:
    """`message` del body JSON de error, o un mensaje genérico con el status."""

    fallback = f"Request failed with status {response.status_code}"
    try:
        data = loads_strict(response.text)
    except ValueError:
        return fallback
    if not isinstance(data, dict):
        return fallback
    message = data.get("message")
    if not message:
        return fallback
    return str(message)


def _response_url(response: httpx.Response) -> str | None:
    try:
        return str(response.request.url)
    except RuntimeError:
        return None


def _is_empty_response(response: httpx.Response) -> bool:
    if response.status_code == 204:
        return True
    return response.headers.get("content-length") == "0"


def normalize_response(
    response: httpx.Response,
    *,
    response_model: type[BaseModel] | None = None,
) -> Any:
    """Convierte una respuesta ya leída en valor parseado o excepción."""

    url = _response_url(response)

    if not response.is_success:
        raise ApplicationError(response.status_code, extract_error_message(response), url=url)

    if _is_empty_response(response):
        return {}

    text = response.text
    if not text or not text.strip():
        return {}

    try:
        data = loads_strict(text)
    except ValueError as exc:
        raise InvalidResponseError(response.status_code, url=url, cause=exc) from exc

    if response_model is not None:
        return response_model.model_validate(data)
    return data


class ApiClient:
    """Executor genérico sobre el que delegan todas las llamadas de dominio.

    El cliente httpx puede venir de fuera (compartido por la app) o crearse
    aquí; en ese caso `aclose()` / `async with` lo cierran.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        diagnostics: DiagnosticSink | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._owns_client = client is None
        self._client = client or build_async_client(self._settings, transport=transport)
        self._diagnostics: DiagnosticSink = diagnostics or NullDiagnosticSink()

    @property
    def base_url(self) -> str:
        return self._settings.api_url

    @property
    def settings(self) -> AppSettings:
        return self._settings

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    def _emit(self, event: str, **fields: Any) -> None:
        # Un sink roto no puede cambiar el resultado de la llamada.
        try:
            self._diagnostics.emit(event, **fields)
        except Exception as exc:  # noqa: BLE001
            log.debug("diagnostic_sink_failed", sink_event=event, error=str(exc))

    async def execute(
        self,
        endpoint: str,
        method: HttpMethod | str = HttpMethod.GET,
        body: Any = None,
        token: str | None = None,
        *,
        response_model: type[BaseModel] | None = None,
    ) -> Any:
        """Ejecuta una llamada y devuelve el JSON parseado.

        Raises:
            ApplicationError: status fuera de 2xx.
            TransportError: la llamada no se completó.
            InvalidResponseError: respuesta 2xx con body no-JSON.
        """

        request = ApiRequest(endpoint=endpoint, method=HttpMethod.parse(method), body=body, token=token)
        return await self.send(request, response_model=response_model)

    async def send(
        self,
        request: ApiRequest,
        *,
        response_model: type[BaseModel] | None = None,
    ) -> Any:
        url = f"{self.base_url}{request.endpoint}"
        config = build_transport_config(request)

        self._emit(
            "api_request",
            endpoint=url,
            method=request.method.value,
            has_token=request.has_token,
            token_preview=token_preview(request.token, self._settings.token_preview_chars),
        )

        try:
            response = await self._client.request(
                request.method.value,
                url,
                headers=config.headers,
                content=config.content,
            )
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            self._emit("api_transport_error", endpoint=url, error=type(exc).__name__)
            raise TransportError(url, exc) from exc

        if not response.is_success:
            self._emit(
                "api_error_response",
                status=response.status_code,
                status_text=response.reason_phrase,
                endpoint=url,
            )

        return normalize_response(response, response_model=response_model)
