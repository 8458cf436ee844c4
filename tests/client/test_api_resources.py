"""Each domain call site binds a fixed method/path and forwards body and token."""

from __future__ import annotations

import json

import httpx
import pytest

from adapters.api_resources import StorefrontApi
from adapters.http_client import ApiClient
from core.domain.models import LoginRequest, PaymentIntentRequest

TOKEN = "user-token-0123456789abcdefghijklmnop"


@pytest.fixture
def recorded(settings):
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"path": request.url.path})

    api = StorefrontApi(settings, transport=httpx.MockTransport(handler))
    return api, requests


CALLS = [
    ("products.get_all", lambda api: api.products.get_all(), "GET", "/api/products", None),
    ("products.get_by_id", lambda api: api.products.get_by_id("42"), "GET", "/api/products/42", None),
    (
        "products.get_by_category",
        lambda api: api.products.get_by_category(3),
        "GET",
        "/api/products/category/3",
        None,
    ),
    ("categories.get_all", lambda api: api.categories.get_all(), "GET", "/api/categories", None),
    ("orders.get_my_orders", lambda api: api.orders.get_my_orders(TOKEN), "GET", "/api/orders", TOKEN),
    ("orders.get_by_id", lambda api: api.orders.get_by_id(9, TOKEN), "GET", "/api/orders/9", TOKEN),
    (
        "orders.get_by_code",
        lambda api: api.orders.get_by_code("ORD-2024-0001", TOKEN),
        "GET",
        "/api/orders/code/ORD-2024-0001",
        TOKEN,
    ),
]


@pytest.mark.parametrize(
    ("call", "method", "path", "token"),
    [c[1:] for c in CALLS],
    ids=[c[0] for c in CALLS],
)
@pytest.mark.asyncio
async def test_read_endpoints(recorded, call, method, path, token) -> None:
    api, requests = recorded
    async with api:
        result = await call(api)

    sent = requests[-1]
    assert sent.method == method
    assert sent.url.path == path
    assert sent.content == b""
    assert result == {"path": path}
    if token:
        assert sent.headers["authorization"] == f"Bearer {token}"
    else:
        assert "authorization" not in sent.headers


@pytest.mark.asyncio
async def test_register_posts_credentials_without_token(recorded) -> None:
    api, requests = recorded
    data = {"firstName": "Ada", "lastName": "Lovelace", "email": "ada@example.com", "password": "pw"}
    async with api:
        await api.auth.register(data)

    sent = requests[-1]
    assert (sent.method, sent.url.path) == ("POST", "/api/auth/register")
    assert json.loads(sent.content) == data
    assert "authorization" not in sent.headers


@pytest.mark.asyncio
async def test_login_accepts_model(recorded) -> None:
    api, requests = recorded
    async with api:
        await api.auth.login(LoginRequest(email="ada@example.com", password="pw"))

    sent = requests[-1]
    assert (sent.method, sent.url.path) == ("POST", "/api/auth/authenticate")
    assert json.loads(sent.content) == {"email": "ada@example.com", "password": "pw"}


@pytest.mark.asyncio
async def test_create_order_forwards_body_and_token(recorded) -> None:
    api, requests = recorded
    order = {"items": [{"productId": 1, "quantity": 2}], "shippingAddress": "1 Main St"}
    async with api:
        await api.orders.create(order, TOKEN)

    sent = requests[-1]
    assert (sent.method, sent.url.path) == ("POST", "/api/orders")
    assert json.loads(sent.content) == order
    assert sent.headers["authorization"] == f"Bearer {TOKEN}"


@pytest.mark.asyncio
async def test_create_payment_intent_omits_missing_currency(recorded) -> None:
    api, requests = recorded
    async with api:
        await api.payments.create_payment_intent(PaymentIntentRequest(order_id=12, amount=49.9), TOKEN)

    sent = requests[-1]
    assert (sent.method, sent.url.path) == ("POST", "/api/payments/create-payment-intent")
    assert json.loads(sent.content) == {"orderId": 12, "amount": 49.9}


@pytest.mark.parametrize(
    ("outcome", "path"),
    [("confirm_success", "/api/payments/success"), ("confirm_failure", "/api/payments/failure")],
)
@pytest.mark.asyncio
async def test_payment_confirmation_uses_query_string(recorded, outcome, path) -> None:
    api, requests = recorded
    async with api:
        await getattr(api.payments, outcome)("pi_3Nabc", TOKEN)

    sent = requests[-1]
    assert sent.method == "POST"
    assert sent.url.path == path
    assert sent.url.params["paymentIntentId"] == "pi_3Nabc"
    assert sent.content == b""
    assert sent.headers["authorization"] == f"Bearer {TOKEN}"


@pytest.mark.asyncio
async def test_facade_shares_one_client(settings) -> None:
    api = StorefrontApi(settings, transport=httpx.MockTransport(lambda r: httpx.Response(204)))
    async with api:
        assert api.products._client is api.client
        assert api.payments._client is api.client
        assert await api.orders.get_my_orders(TOKEN) == {}


@pytest.mark.asyncio
async def test_facade_leaves_injected_client_open(settings) -> None:
    transport = httpx.MockTransport(lambda r: httpx.Response(200, json=[{"id": 1}]))
    async with ApiClient(settings, transport=transport) as shared:
        async with StorefrontApi(client=shared) as api:
            assert api.client is shared
            await api.products.get_all()

        assert await shared.execute("/categories") == [{"id": 1}]


@pytest.mark.asyncio
async def test_facade_closes_client_it_built(settings) -> None:
    api = StorefrontApi(settings, transport=httpx.MockTransport(lambda r: httpx.Response(204)))
    async with api:
        await api.categories.get_all()

    assert api.client._client.is_closed
