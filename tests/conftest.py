"""Shared fixtures: canned httpx transports standing in for the Graph."""

import json
from typing import Any, Optional

import httpx
import pytest


class MockedFetch(httpx.MockTransport):
    """Answers every request with the same JSON payload and records the requests."""

    def __init__(
        self,
        response: Any = None,
        status_code: int = 200,
        content: Optional[str] = None,
    ) -> None:
        super().__init__(self._handle)
        self.response = response
        self.status_code = status_code
        self.content = content
        self.requests: list[httpx.Request] = []

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status_code, text=self.content)
        return httpx.Response(self.status_code, json=self.response)

    @property
    def last_body(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def mocked_fetch():
    """Factory for MockedFetch transports, mirroring a fetch that returns `response`."""

    def make(response: Any = None, ok: bool = True, status_code: Optional[int] = None, content: Optional[str] = None) -> MockedFetch:
        status = status_code if status_code is not None else (200 if ok else 401)
        return MockedFetch(response=response, status_code=status, content=content)

    return make


@pytest.fixture
def failing_fetch():
    """Transport whose every request fails with a connection error."""
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        raise httpx.ConnectError("connection refused", request=request)

    transport = httpx.MockTransport(handler)
    transport.requests = requests
    return transport


CART = {
    "adjustments": [
        {
            "amount": -5,
            "currencyCode": "USD",
            "description": "Discount",
            "productId": None,
            "sku": None,
            "type": "CART_TOTAL",
        }
    ],
    "createdAt": "2025-07-07T23:07:52.310Z",
    "expiresAt": "2025-07-07T23:08:52.273Z",
    "id": "cart_6568ba15-def6-44df-9731-a513f8f4f09b",
    "items": [
        {
            "amount": 2.99,
            "attributes": None,
            "countryOfOrigin": None,
            "currencyCode": "USD",
            "description": "Zonos leather backpack",
            "id": "item_0m8hfkaa7w83h",
            "imageUrl": None,
            "measurements": [],
            "metadata": None,
            "name": "Zonos leather backpack",
            "productId": "",
            "provinceOfOrigin": None,
            "quantity": 2,
            "restriction": None,
            "sku": "",
        },
        {
            "amount": 6.99,
            "attributes": None,
            "countryOfOrigin": None,
            "currencyCode": "USD",
            "description": "Zonos T-shirt",
            "id": "item_0m8hfkadzw83m",
            "imageUrl": None,
            "measurements": [],
            "metadata": None,
            "name": "Zonos T-shirt",
            "productId": "",
            "provinceOfOrigin": None,
            "quantity": 1,
            "restriction": None,
            "sku": "",
        },
    ],
    "metadata": [
        {"key": "cartCreatedAtEpoc", "value": "1751929672"},
        {"key": "cartCreatedAt", "value": "2025-07-07T23:07:52.265973009Z"},
    ],
    "organizationId": "organization_6454c8b7-4409-40b5-a56f-5af63190c42c",
}

UNAUTHORIZED_ERROR = {
    "message": "HTTP Status 401 - Full authentication is required to access this resource",
}


@pytest.fixture
def cart() -> dict:
    return json.loads(json.dumps(CART))


@pytest.fixture
def unauthorized_error() -> dict:
    return dict(UNAUTHORIZED_ERROR)
