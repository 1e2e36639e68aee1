# clients.py
"""
Transport client for the Zonos Graph.

Provides an async GraphQL-over-HTTP client built on httpx. A request either
returns the operation's `data` or raises ClientError carrying the Graph's
response payload.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional

import httpx
from pydantic import BaseModel

import config
from schemas import GraphQLError

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "Accept": "application/graphql-response+json, application/json",
}


class ClientError(Exception):
    """Raised when the Graph answers with a non-success status or GraphQL errors."""

    def __init__(
        self,
        response: dict[str, Any],
        status_code: int,
        query: str,
        variables: Optional[dict[str, Any]] = None,
    ) -> None:
        self.response = response
        self.status_code = status_code
        self.query = query
        self.variables = variables
        raw_errors = response.get("errors") or []
        self.errors = [GraphQLError.model_validate(e) for e in raw_errors]
        summary = self.errors[0].message if self.errors else "no errors in payload"
        super().__init__(f"GraphQL request failed with HTTP {status_code}: {summary}")


def dump_variables(variables: Any) -> Optional[dict[str, Any]]:
    """
    Convert operation variables into a JSON-compatible dict.

    Args:
        variables: A pydantic model, a mapping, or None.

    Returns:
        Plain dict ready to be sent, or None when there are no variables.
    """
    if variables is None:
        return None
    if isinstance(variables, BaseModel):
        return variables.model_dump(mode="json", exclude_none=True)
    if isinstance(variables, Mapping):
        return dict(variables)
    raise TypeError(
        f"variables must be a pydantic model or a mapping, got {type(variables).__name__}"
    )


class GraphQLClient:
    """
    Async GraphQL client bound to a single URL.

    Args:
        url: Full URL of the GraphQL endpoint.
        transport: Optional httpx transport used instead of the network
            (e.g. httpx.MockTransport).
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        url: str,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = config.REQUEST_TIMEOUT,
    ) -> None:
        self.url = url
        self._http = httpx.AsyncClient(
            transport=transport,
            timeout=timeout,
            headers=DEFAULT_HEADERS,
        )

    async def __aenter__(self) -> "GraphQLClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def request(
        self,
        document: str,
        variables: Any = None,
        headers: Optional[Mapping[str, str]] = None,
        operation_name: Optional[str] = None,
    ) -> Any:
        """
        Send a GraphQL document and return its data.

        Args:
            document: Query or mutation text.
            variables: Operation variables (pydantic model or mapping).
            headers: Extra request headers for this call.
            operation_name: Operation to execute when the document holds several.

        Returns:
            The `data` member of the Graph's response.

        Raises:
            ClientError: If the status is not 2xx, the payload has errors, or
                the payload carries no data.
            httpx.HTTPError: If the request could not be sent.
        """
        payload: dict[str, Any] = {"query": document}
        dumped = dump_variables(variables)
        if dumped is not None:
            payload["variables"] = dumped
        if operation_name:
            payload["operationName"] = operation_name

        logger.debug("POST %s operation=%s", self.url, operation_name)
        response = await self._http.post(
            self.url,
            json=payload,
            headers=dict(headers or {}),
        )

        try:
            body = response.json()
        except ValueError:
            if response.is_success:
                raise
            logger.debug("Non-JSON error body from %s", self.url)
            raise ClientError({"error": response.text}, response.status_code, document, dumped)

        if not isinstance(body, dict):
            if response.is_success:
                raise ValueError(
                    f"Expected a JSON object from the Graph, got {type(body).__name__}"
                )
            raise ClientError({"error": body}, response.status_code, document, dumped)

        if not response.is_success or body.get("errors") or "data" not in body:
            raise ClientError(body, response.status_code, document, dumped)

        logger.debug("HTTP %d from %s", response.status_code, self.url)
        return body["data"]
