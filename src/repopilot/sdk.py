"""SDK composition root for repopilot."""

from __future__ import annotations

import logging
from types import TracebackType

import httpx

from repopilot.auth import TokenResolver, create_token_resolver
from repopilot.contracts.config import RepoPilotConfig
from repopilot.contracts.exceptions import RepoPilotError
from repopilot.gql.client import GitLabGraphQLClient
from repopilot.gql.executors import GraphQLExecutor
from repopilot.service import RepositoryService

_LOG = logging.getLogger(__name__)


class RepoPilot:
    """Wires the HTTP transport, executors and :class:`RepositoryService` from a config.

    Use as an async context manager::

        async with RepoPilot.from_config(config) as pilot:
            await pilot.service.require_access()
    """

    def __init__(
        self,
        *,
        config: RepoPilotConfig,
        token_resolver: TokenResolver,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._token_resolver = token_resolver
        self._transport = transport
        self._http_client: httpx.AsyncClient | None = None
        self._service: RepositoryService | None = None

    @classmethod
    def from_config(
        cls,
        config: RepoPilotConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> RepoPilot:
        return cls(config=config, token_resolver=create_token_resolver(config), transport=transport)

    @property
    def service(self) -> RepositoryService:
        if self._service is None:
            raise RepoPilotError("RepoPilot is not initialized. Use 'async with'.")
        return self._service

    async def __aenter__(self) -> RepoPilot:
        token = await self._token_resolver.resolve()

        headers = {"Content-Type": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"

        self._http_client = httpx.AsyncClient(
            headers=headers,
            timeout=httpx.Timeout(self._config.timeout),
            transport=self._transport,
        )
        client = GitLabGraphQLClient(url=self._config.endpoint_url, http_client=self._http_client)
        executor = GraphQLExecutor(client)
        self._service = RepositoryService(executor, executor)
        _LOG.debug("Connected to GraphQL endpoint %s", self._config.endpoint_url)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
        self._service = None
