# zonos_client.py
"""
Named requests to the Zonos customer graph.

Each function forwards to gql_request with its endpoint fixed, so every
operation shares the dispatcher's error handling.

Example:
    credential_token = "your_credential_token"
    variables = CatalogItemQueryVariables(productId="test-product-id", sku="test-sku")
    json, errors = await zonos_client.catalog_item(
        credential_token=credential_token, variables=variables
    )
"""

from collections.abc import Mapping
from typing import Any, Optional

import httpx

from gql_request import gql_request
from schemas import (
    CartByIdQueryVariables,
    CartUpsertMutationVariables,
    CatalogItemQueryVariables,
    ClassificationsCalculateMutationVariables,
    FullLandedCostMutationVariables,
    GQLResponse,
    LandedCostOnlyMutationVariables,
    OrderCreateMutationVariables,
)
from sdk import CUSTOMER_GRAPH


async def _customer_graph_request(
    operation_name: str,
    *,
    credential_token: str,
    variables: Any,
    custom_fetch: Optional[httpx.AsyncBaseTransport] = None,
    custom_url: Optional[str] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> GQLResponse:
    # credential_token is carried by the caller's headers or transport.
    return await gql_request(
        f"{CUSTOMER_GRAPH}/{operation_name}",
        variables=variables,
        request_headers=headers,
        custom_fetch=custom_fetch,
        custom_url=custom_url,
    )


async def cart_by_id(
    *,
    credential_token: str,
    variables: CartByIdQueryVariables | Mapping[str, Any],
    custom_fetch: Optional[httpx.AsyncBaseTransport] = None,
    custom_url: Optional[str] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> GQLResponse:
    """
    Fetch a cart by its id.

    Example:
        variables = CartByIdQueryVariables(id="cart_6568ba15-def6-44df-9731-a513f8f4f09b")
        json, errors = await zonos_client.cart_by_id(
            credential_token="test_token", variables=variables
        )
    """
    return await _customer_graph_request(
        "cartById",
        credential_token=credential_token,
        variables=variables,
        custom_fetch=custom_fetch,
        custom_url=custom_url,
        headers=headers,
    )


async def cart_upsert(
    *,
    credential_token: str,
    variables: CartUpsertMutationVariables | Mapping[str, Any],
    custom_fetch: Optional[httpx.AsyncBaseTransport] = None,
    custom_url: Optional[str] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> GQLResponse:
    """
    Create or update a cart. Pass the cart `id` in the input to update one.

    The input's items must be the complete list of items the cart should hold
    afterwards, existing ones included, not only the items being added.
    """
    return await _customer_graph_request(
        "cartUpsert",
        credential_token=credential_token,
        variables=variables,
        custom_fetch=custom_fetch,
        custom_url=custom_url,
        headers=headers,
    )


async def catalog_item(
    *,
    credential_token: str,
    variables: CatalogItemQueryVariables | Mapping[str, Any],
    custom_fetch: Optional[httpx.AsyncBaseTransport] = None,
    custom_url: Optional[str] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> GQLResponse:
    """Fetch a catalog item (legacy lookup by id, productId or sku)."""
    return await _customer_graph_request(
        "catalogItem",
        credential_token=credential_token,
        variables=variables,
        custom_fetch=custom_fetch,
        custom_url=custom_url,
        headers=headers,
    )


async def classifications_calculate(
    *,
    credential_token: str,
    variables: ClassificationsCalculateMutationVariables | Mapping[str, Any],
    custom_fetch: Optional[httpx.AsyncBaseTransport] = None,
    custom_url: Optional[str] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> GQLResponse:
    """Classify items, e.g. `inputs=[{"name": "backpack"}]`."""
    return await _customer_graph_request(
        "classificationsCalculate",
        credential_token=credential_token,
        variables=variables,
        custom_fetch=custom_fetch,
        custom_url=custom_url,
        headers=headers,
    )


async def full_landed_cost(
    *,
    credential_token: str,
    variables: FullLandedCostMutationVariables | Mapping[str, Any],
    custom_fetch: Optional[httpx.AsyncBaseTransport] = None,
    custom_url: Optional[str] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> GQLResponse:
    """
    Run the full landed cost workflow.

    Creates the parties (origin, destination, payor) and items, cartonizes,
    rates the shipment and calculates landed cost in one request.
    """
    return await _customer_graph_request(
        "fullLandedCost",
        credential_token=credential_token,
        variables=variables,
        custom_fetch=custom_fetch,
        custom_url=custom_url,
        headers=headers,
    )


async def landed_cost_only(
    *,
    credential_token: str,
    variables: LandedCostOnlyMutationVariables | Mapping[str, Any],
    custom_fetch: Optional[httpx.AsyncBaseTransport] = None,
    custom_url: Optional[str] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> GQLResponse:
    """
    Run the landed cost workflow with a caller supplied shipment rating.

    Same as full_landed_cost, except the shipment rating is created from
    `shipmentRatingCreateWorkflowInput` instead of being calculated.
    """
    return await _customer_graph_request(
        "landedCostOnly",
        credential_token=credential_token,
        variables=variables,
        custom_fetch=custom_fetch,
        custom_url=custom_url,
        headers=headers,
    )


async def order_create(
    *,
    credential_token: str,
    variables: OrderCreateMutationVariables | Mapping[str, Any],
    custom_fetch: Optional[httpx.AsyncBaseTransport] = None,
    custom_url: Optional[str] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> GQLResponse:
    """Create an order from a landed cost calculation."""
    return await _customer_graph_request(
        "orderCreate",
        credential_token=credential_token,
        variables=variables,
        custom_fetch=custom_fetch,
        custom_url=custom_url,
        headers=headers,
    )
