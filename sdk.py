# sdk.py
"""
Schema registry for the Zonos Graph client.

Each schema maps to an SDK factory. A factory takes a GraphQLClient and
returns a read-only mapping of operation name to an async callable
`(variables, headers) -> data`, one per document in documents.py.
"""

import logging
from collections.abc import Awaitable, Callable, Mapping
from types import MappingProxyType
from typing import Any, Optional

from clients import GraphQLClient
from documents import AUTH_DOCUMENTS, CUSTOMER_GRAPH_DOCUMENTS

logger = logging.getLogger(__name__)

CUSTOMER_GRAPH = "zonos-customer-graph"
AUTH = "auth"

Operation = Callable[[Any, Optional[Mapping[str, str]]], Awaitable[Any]]
Sdk = Mapping[str, Operation]
SdkFactory = Callable[[GraphQLClient], Sdk]


class GraphConfigurationError(Exception):
    """Raised when an endpoint does not map onto a known schema operation."""

    pass


class SchemaMissingError(GraphConfigurationError):
    """Raised when an endpoint names a schema that is not registered."""

    def __init__(self, schema: str) -> None:
        self.schema = schema
        super().__init__(f"Your query schema is missing: {schema!r}")


class SchemaFunctionMissingError(GraphConfigurationError):
    """Raised when a schema's SDK has no callable for the requested operation."""

    def __init__(self, schema: str, operation_name: str) -> None:
        self.schema = schema
        self.operation_name = operation_name
        super().__init__(
            f"Your schema function is missing: {schema!r} has no operation {operation_name!r}"
        )


def _bind_operation(client: GraphQLClient, operation_name: str, document: str) -> Operation:
    async def operation(variables: Any = None, headers: Optional[Mapping[str, str]] = None) -> Any:
        return await client.request(
            document,
            variables=variables,
            headers=headers,
            operation_name=operation_name,
        )

    operation.__name__ = operation_name
    return operation


def _sdk_factory(documents: Mapping[str, str]) -> SdkFactory:
    """Build a factory producing one bound operation per document."""

    def get_operations(client: GraphQLClient) -> Sdk:
        return MappingProxyType(
            {name: _bind_operation(client, name, doc) for name, doc in documents.items()}
        )

    return get_operations


get_customer_graph_sdk = _sdk_factory(CUSTOMER_GRAPH_DOCUMENTS)
get_auth_sdk = _sdk_factory(AUTH_DOCUMENTS)

SCHEMAS: Mapping[str, SdkFactory] = MappingProxyType(
    {
        CUSTOMER_GRAPH: get_customer_graph_sdk,
        AUTH: get_auth_sdk,
    }
)

_SCHEMA_DOCUMENTS: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        CUSTOMER_GRAPH: CUSTOMER_GRAPH_DOCUMENTS,
        AUTH: AUTH_DOCUMENTS,
    }
)


def get_sdk(schema: str) -> SdkFactory:
    """
    Look up the SDK factory for a schema.

    Args:
        schema: Logical schema name, e.g. "zonos-customer-graph".

    Returns:
        Factory building the schema's operation mapping from a client.

    Raises:
        SchemaMissingError: If the schema is not registered.
    """
    try:
        return SCHEMAS[schema]
    except KeyError:
        raise SchemaMissingError(schema) from None


def resolve_endpoint(endpoint: str) -> tuple[str, str]:
    """
    Split an endpoint identifier into schema and operation name.

    Only the schema is validated; operation names depend on the realized SDK.

    Args:
        endpoint: Identifier of the form "<schema>/<operationName>".

    Returns:
        Tuple of (schema, operation name).

    Raises:
        SchemaMissingError: If the schema part is not registered.
    """
    schema, _, operation_name = endpoint.partition("/")
    get_sdk(schema)
    logger.debug("Resolved endpoint %s -> schema=%s operation=%s", endpoint, schema, operation_name)
    return schema, operation_name


def operation_names(schema: str) -> list[str]:
    """
    List the operations a schema exposes.

    Args:
        schema: Logical schema name.

    Returns:
        Sorted operation names.

    Raises:
        SchemaMissingError: If the schema is not registered.
    """
    get_sdk(schema)
    return sorted(_SCHEMA_DOCUMENTS[schema])
