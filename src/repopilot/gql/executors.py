"""httpx-backed implementations of the query and mutation executor contracts."""

from __future__ import annotations

import logging
import re
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from repopilot.contracts.exceptions import ProtocolError, TransportError
from repopilot.contracts.executor import MutationExecutor, QueryExecutor
from repopilot.gql.client import GitLabGraphQLClient
from repopilot.gql.exceptions import (
    GraphQLClientGraphQLMultiError,
    GraphQLClientHttpError,
    GraphQLClientInvalidResponseError,
)
from repopilot.gql.models import MutationResponse, QueryResponse

_LOG = logging.getLogger(__name__)

_OPERATION_NAME = re.compile(r"^\s*(?:query|mutation)\s+([_A-Za-z][_0-9A-Za-z]*)")

ResponseT = TypeVar("ResponseT", bound=BaseModel)


def operation_name(document: str) -> str | None:
    match = _OPERATION_NAME.match(document)
    return match.group(1) if match else None


class GraphQLExecutor(QueryExecutor, MutationExecutor):
    """Executes documents through a :class:`GitLabGraphQLClient` and decodes typed responses."""

    def __init__(self, client: GitLabGraphQLClient) -> None:
        self._client = client

    async def execute_query(self, document: str, variables: dict[str, Any]) -> QueryResponse:
        return await self._execute(document, variables, QueryResponse)

    async def execute_mutation(self, document: str, variables: dict[str, Any]) -> MutationResponse:
        return await self._execute(document, variables, MutationResponse)

    async def _execute(self, document: str, variables: dict[str, Any], model: type[ResponseT]) -> ResponseT:
        name = operation_name(document)
        _LOG.debug("Executing GraphQL operation %s", name)

        try:
            response = await self._client.execute(document, operation_name=name, variables=variables)
            data = self._client.get_data(response)
        except httpx.DecodingError as exc:
            raise ProtocolError(f"GraphQL request {name} returned an undecodable body: {exc}") from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"GraphQL request {name} failed: {exc}") from exc
        except GraphQLClientHttpError as exc:
            raise TransportError(f"GraphQL request {name} failed: {exc}") from exc
        except GraphQLClientInvalidResponseError as exc:
            raise ProtocolError(f"GraphQL request {name} returned an invalid response") from exc
        except GraphQLClientGraphQLMultiError as exc:
            raise ProtocolError(f"GraphQL request {name} returned errors: {exc}") from exc

        try:
            return model.model_validate(data)
        except ValidationError as exc:
            raise ProtocolError(f"GraphQL request {name} returned an unexpected shape: {exc}") from exc
