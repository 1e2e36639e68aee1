"""Tests for the named customer graph requests."""

import pytest

import zonos_client
from schemas import (
    CartByIdQueryVariables,
    CartUpsertMutationVariables,
    FullLandedCostMutationVariables,
    GQLResponse,
    LandedCostOnlyMutationVariables,
    OrderCreateMutationVariables,
)

credential_token = "test_token"

NEW_CART_INPUT = {
    "adjustments": [
        {
            "amount": -5,
            "currencyCode": "USD",
            "description": "Discount",
            "type": "CART_TOTAL",
        }
    ],
    "items": [
        {
            "amount": 2.99,
            "currencyCode": "USD",
            "description": "Zonos leather backpack",
            "name": "Zonos leather backpack",
            "quantity": 2,
        },
        {
            "amount": 6.99,
            "currencyCode": "USD",
            "description": "Zonos T-shirt",
            "name": "Zonos T-shirt",
            "quantity": 1,
        },
    ],
}

PARTIES = [
    {
        "location": {
            "administrativeArea": "",
            "administrativeAreaCode": "QC",
            "countryCode": "CA",
            "line1": "4398 St Laurent av",
            "line2": " ",
            "locality": "Montreal",
            "postalCode": "H2W 1Z5",
        },
        "type": "ORIGIN",
    },
    {
        "location": {
            "administrativeArea": "",
            "administrativeAreaCode": "",
            "countryCode": "GB",
            "line1": "location line 1",
            "locality": "",
            "postalCode": "SW1W 0NY",
        },
        "type": "DESTINATION",
    },
]

ITEMS = [
    {
        "amount": 3,
        "countryOfOrigin": "CN",
        "currencyCode": "USD",
        "description": "Backpack",
        "hsCode": "4202.92",
        "productId": "e89861c0-f04e-11ee-bc4f-4b0822420556",
        "quantity": 1,
    }
]

LANDED_COST = {
    "calculationMethod": "DDP",
    "endUse": "NOT_FOR_RESALE",
    "tariffRate": "ZONOS_PREFERRED",
}


class TestCartById:
    """Test cart lookup."""

    @pytest.mark.asyncio
    async def test_data(self, mocked_fetch, cart):
        data = {"cart": cart}
        json, errors = await zonos_client.cart_by_id(
            credential_token=credential_token,
            custom_fetch=mocked_fetch({"data": data}),
            variables=CartByIdQueryVariables(id=cart["id"]),
        )
        assert json == data
        assert errors == []

    @pytest.mark.asyncio
    async def test_unauthorized(self, mocked_fetch, cart, unauthorized_error):
        json, errors = await zonos_client.cart_by_id(
            credential_token=credential_token,
            custom_fetch=mocked_fetch({"data": None, "errors": [unauthorized_error]}, ok=False),
            variables={"id": cart["id"]},
        )
        assert json is None
        assert [e.model_dump(exclude_none=True) for e in errors] == [unauthorized_error]


class TestCartUpsert:
    """Test cart creation and update."""

    @pytest.mark.asyncio
    async def test_new_cart(self, mocked_fetch, cart):
        data = {"cartUpsert": cart}
        transport = mocked_fetch({"data": data})
        json, errors = await zonos_client.cart_upsert(
            credential_token=credential_token,
            custom_fetch=transport,
            variables=CartUpsertMutationVariables.model_validate({"input": NEW_CART_INPUT}),
        )

        assert json == data
        assert json["cartUpsert"]["id"]
        assert errors == []
        sent = transport.last_body["variables"]["input"]
        assert "id" not in sent
        assert sent["items"] == NEW_CART_INPUT["items"]
        assert sent["adjustments"] == NEW_CART_INPUT["adjustments"]

    @pytest.mark.asyncio
    async def test_existing_cart(self, mocked_fetch, cart):
        data = {"cartUpsert": cart}
        transport = mocked_fetch({"data": data})
        variables = {"input": {**NEW_CART_INPUT, "id": cart["id"]}}
        json, errors = await zonos_client.cart_upsert(
            credential_token=credential_token,
            custom_fetch=transport,
            variables=variables,
        )

        assert json == data
        assert errors == []
        assert transport.last_body["variables"]["input"]["id"] == cart["id"]

    @pytest.mark.asyncio
    async def test_unauthorized(self, mocked_fetch, unauthorized_error):
        json, errors = await zonos_client.cart_upsert(
            credential_token=credential_token,
            custom_fetch=mocked_fetch({"data": None, "errors": [unauthorized_error]}, ok=False),
            variables={"input": {"adjustments": [], "items": []}},
        )
        assert json is None
        assert [e.model_dump(exclude_none=True) for e in errors] == [unauthorized_error]


class TestLandedCost:
    """Test the landed cost workflow mutations."""

    @pytest.mark.asyncio
    async def test_full_landed_cost_variables(self, mocked_fetch):
        transport = mocked_fetch({"data": {"landedCostCalculateWorkflow": [{"id": "landed_cost_123"}]}})
        variables = FullLandedCostMutationVariables.model_validate(
            {
                "partyCreateWorkflowInput": PARTIES,
                "itemCreateWorkflowInput": ITEMS,
                "landedCostCalculateWorkflowInput": LANDED_COST,
            }
        )
        json, errors = await zonos_client.full_landed_cost(
            credential_token=credential_token,
            custom_fetch=transport,
            variables=variables,
        )

        assert errors == []
        assert json["landedCostCalculateWorkflow"][0]["id"] == "landed_cost_123"
        sent = transport.last_body
        assert sent["operationName"] == "fullLandedCost"
        assert sent["variables"]["partyCreateWorkflowInput"] == PARTIES
        assert sent["variables"]["itemCreateWorkflowInput"] == ITEMS
        assert sent["variables"]["landedCostCalculateWorkflowInput"] == LANDED_COST

    @pytest.mark.asyncio
    async def test_landed_cost_only_requires_shipment_rating(self, mocked_fetch):
        shipment_rating = {
            "amount": 20,
            "currencyCode": "USD",
            "displayName": "custom:custom",
            "serviceLevelCode": "custom:custom",
        }
        transport = mocked_fetch({"data": {"shipmentRatingCreateWorkflow": {"id": "shipment_rating_1"}}})
        variables = LandedCostOnlyMutationVariables.model_validate(
            {
                "partyCreateWorkflowInput": PARTIES,
                "itemCreateWorkflowInput": ITEMS,
                "landedCostCalculateWorkflowInput": LANDED_COST,
                "shipmentRatingCreateWorkflowInput": shipment_rating,
            }
        )
        json, errors = await zonos_client.landed_cost_only(
            credential_token=credential_token,
            custom_fetch=transport,
            variables=variables,
        )

        assert errors == []
        assert transport.last_body["variables"]["shipmentRatingCreateWorkflowInput"] == shipment_rating


class TestEndpoints:
    """Each named request targets its own operation."""

    @pytest.mark.parametrize(
        "request_fn,operation_name,variables",
        [
            (zonos_client.cart_by_id, "cartById", {"id": "cart_abc"}),
            (zonos_client.cart_upsert, "cartUpsert", {"input": {"items": [], "adjustments": []}}),
            (zonos_client.catalog_item, "catalogItem", {"productId": "test", "sku": "test"}),
            (zonos_client.classifications_calculate, "classificationsCalculate", {"inputs": [{"name": "backpack"}]}),
            (zonos_client.full_landed_cost, "fullLandedCost", {"partyCreateWorkflowInput": []}),
            (zonos_client.landed_cost_only, "landedCostOnly", {"partyCreateWorkflowInput": []}),
            (
                zonos_client.order_create,
                "orderCreate",
                OrderCreateMutationVariables.model_validate(
                    {"input": {"accountOrderNumber": "order-123", "currencyCode": "USD", "landedCostId": "landed_cost_123"}}
                ),
            ),
        ],
    )
    @pytest.mark.asyncio
    async def test_operation(self, mocked_fetch, request_fn, operation_name, variables):
        transport = mocked_fetch({"data": {operation_name: None}})
        response = await request_fn(
            credential_token=credential_token,
            custom_fetch=transport,
            variables=variables,
        )

        assert response == GQLResponse(json={operation_name: None}, errors=[])
        request = transport.requests[0]
        assert request.url.path.endswith(f"/zonos-customer-graph/{operation_name}")
        assert transport.last_body["operationName"] == operation_name

    @pytest.mark.asyncio
    async def test_custom_url_and_headers(self, mocked_fetch):
        transport = mocked_fetch({"data": {"cart": None}})
        await zonos_client.cart_by_id(
            credential_token=credential_token,
            custom_fetch=transport,
            custom_url="https://api.zonos.test/graphql",
            headers={"credentialToken": credential_token},
            variables={"id": "cart_abc"},
        )
        request = transport.requests[0]
        assert str(request.url) == "https://api.zonos.test/graphql"
        assert request.headers["credentialToken"] == credential_token


class TestIdempotence:
    @pytest.mark.asyncio
    async def test_same_inputs_same_envelope(self, mocked_fetch, cart):
        transport = mocked_fetch({"data": {"cart": cart}})
        first = await zonos_client.cart_by_id(
            credential_token=credential_token, custom_fetch=transport, variables={"id": cart["id"]}
        )
        second = await zonos_client.cart_by_id(
            credential_token=credential_token, custom_fetch=transport, variables={"id": cart["id"]}
        )
        assert first == second
        assert len(transport.requests) == 2
