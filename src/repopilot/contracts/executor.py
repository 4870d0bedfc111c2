"""GraphQL executor contracts consumed by the repository service."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from repopilot.gql.models import MutationResponse, QueryResponse


class QueryExecutor(ABC):
    @abstractmethod
    async def execute_query(self, document: str, variables: dict[str, Any]) -> QueryResponse:
        """Run a GraphQL query with bound variables.

        Raises:
            TransportError: The request did not complete.
            ProtocolError: The response could not be decoded into :class:`QueryResponse`.
        """


class MutationExecutor(ABC):
    @abstractmethod
    async def execute_mutation(self, document: str, variables: dict[str, Any]) -> MutationResponse:
        """Run a GraphQL mutation with bound variables.

        Raises:
            TransportError: The request did not complete.
            ProtocolError: The response could not be decoded into :class:`MutationResponse`.
        """
