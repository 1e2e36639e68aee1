# gql_request.py
"""
Generic request dispatcher for the Zonos Graph.

Every Graph call goes through gql_request so that all operations share the
same error semantics: remote failures come back as a GQLResponse with `json`
set to None, while wiring mistakes (unknown schema or operation) raise.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional

import httpx

import config
from clients import ClientError, GraphQLClient
from schemas import GQLResponse, GraphQLError
from sdk import SchemaFunctionMissingError, get_sdk, resolve_endpoint
from utils import describe_error

logger = logging.getLogger(__name__)

UNKNOWN_GRAPHQL_ERROR = "Unknown graphql error"


def default_url(endpoint: str) -> str:
    """Build the URL an endpoint is sent to when no override is given."""
    return f"{config.GRAPHQL_BASE_URL}/{endpoint}"


async def gql_request(
    endpoint: str,
    variables: Any = None,
    request_headers: Optional[Mapping[str, str]] = None,
    custom_fetch: Optional[httpx.AsyncBaseTransport] = None,
    custom_url: Optional[str] = None,
) -> GQLResponse:
    """
    Execute one Graph operation and normalize its outcome.

    Args:
        endpoint: "<schema>/<operationName>", e.g. "zonos-customer-graph/cartById".
        variables: Operation variables (pydantic model or mapping).
        request_headers: Extra headers for this request.
        custom_fetch: httpx transport to send the request through.
        custom_url: URL used instead of the default derived from the endpoint.

    Returns:
        GQLResponse with the raw result on success, otherwise json=None and
        at least one error.

    Raises:
        SchemaMissingError: If the endpoint's schema is not registered.
        SchemaFunctionMissingError: If the schema has no such operation.

    Example:
        json, errors = await gql_request(
            "auth/getCredentialServiceToken",
            variables={"input": {"mode": "LIVE", "storeId": 3}},
        )
    """
    schema, operation_name = resolve_endpoint(endpoint)
    url = custom_url or default_url(endpoint)

    async with GraphQLClient(url, transport=custom_fetch) as client:
        sdk = get_sdk(schema)(client)
        operation = sdk.get(operation_name)
        if not callable(operation):
            raise SchemaFunctionMissingError(schema, operation_name)

        logger.debug("Dispatching %s to %s", endpoint, url)
        try:
            json = await operation(variables, request_headers)
        except ClientError as e:
            logger.warning(
                "%s returned HTTP %d with %d error(s)",
                endpoint,
                e.status_code,
                len(e.errors),
            )
            errors = e.errors or [GraphQLError(message=UNKNOWN_GRAPHQL_ERROR)]
            return GQLResponse(json=None, errors=errors)
        except Exception as e:
            logger.error("%s failed: %s", endpoint, e)
            return GQLResponse(json=None, errors=[GraphQLError(message=describe_error(e))])

    logger.debug("%s succeeded", endpoint)
    return GQLResponse(json=json, errors=[])
