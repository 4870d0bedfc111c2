"""Repository operations against the GitLab GraphQL endpoint."""

from __future__ import annotations

import logging
import uuid
from typing import Any

from repopilot.contracts.exceptions import (
    AccessDeniedError,
    ExecutorError,
    InvalidArgumentError,
    NotFoundError,
    ServiceUnavailableError,
)
from repopilot.contracts.executor import MutationExecutor, QueryExecutor
from repopilot.contracts.result import OperationResult
from repopilot.gql import documents
from repopilot.gql.models import MutationResponse, QueryResponse

_LOG = logging.getLogger(__name__)


def _require_text(**parameters: str | None) -> None:
    for name, value in parameters.items():
        if value is None or not value.strip():
            raise InvalidArgumentError(name)


class RepositoryService:
    """Creates branches, commits and merge requests, and verifies endpoint access.

    Domain errors reported inside a successful GraphQL response are returned in
    :attr:`OperationResult.errors`. Transport and protocol failures surface as
    :class:`ServiceUnavailableError`.

    Args:
        query_executor: Capability used for GraphQL queries.
        mutation_executor: Capability used for GraphQL mutations.
        probe_token: Correlation token echoed by the access probes. A random
            UUID is generated when omitted.
    """

    def __init__(
        self,
        query_executor: QueryExecutor,
        mutation_executor: MutationExecutor,
        *,
        probe_token: str | None = None,
    ) -> None:
        self._query_executor = query_executor
        self._mutation_executor = mutation_executor
        self._probe_token = probe_token or str(uuid.uuid4())

    @property
    def probe_token(self) -> str:
        return self._probe_token

    async def require_access(self) -> None:
        """Verify read access, then write access.

        Raises:
            AccessDeniedError: A probe did not echo the probe token.
            ServiceUnavailableError: The endpoint could not be queried.
        """
        await self.check_read_access()
        await self.check_write_access()

    async def check_read_access(self) -> None:
        response = await self._query(documents.READ_ECHO, {"message": self._probe_token})

        echo = response.echo
        if echo is None or not echo.endswith(self._probe_token):
            _LOG.warning("Read access probe was not echoed by the GraphQL service")
            raise AccessDeniedError("no read access", access="read")

    async def check_write_access(self) -> None:
        response = await self._mutation(documents.WRITE_ECHO, {"message": self._probe_token})

        payload = response.echo_create
        echoes = (payload.echoes if payload is not None else None) or []
        if not echoes or not echoes[0].endswith(self._probe_token):
            _LOG.warning("Write access probe was not echoed by the GraphQL service")
            raise AccessDeniedError("no write access", access="write")

    async def create_branch(self, project_path: str, base_branch: str, branch_name: str) -> OperationResult:
        _require_text(project_path=project_path, base_branch=base_branch, branch_name=branch_name)

        response = await self._mutation(
            documents.CREATE_BRANCH,
            {"projectPath": project_path, "branchName": branch_name, "ref": base_branch},
        )

        # an unauthorized request yields a null payload rather than an error
        payload = response.create_branch
        return OperationResult(errors=list((payload.errors if payload is not None else None) or []))

    async def commit(
        self,
        project_path: str,
        branch_name: str,
        file_path: str,
        file_content: str,
        must_be_created: bool,
        create_message: str,
        update_message: str,
    ) -> OperationResult:
        """Create ``file_path`` (optionally) and update it with ``file_content`` in one mutation.

        The UPDATE action always runs after the optional CREATE, so a file that
        already exists still receives the new content. Only the UPDATE errors are
        returned.
        """
        _require_text(
            project_path=project_path,
            branch_name=branch_name,
            file_path=file_path,
            file_content=file_content,
            create_message=create_message,
            update_message=update_message,
        )

        response = await self._mutation(
            documents.CREATE_FILE,
            {
                "projectPath": project_path,
                "branchName": branch_name,
                "createMessage": create_message,
                "updateMessage": update_message,
                "filePath": file_path,
                "fileContent": file_content,
                "create": must_be_created,
            },
        )

        if response.create is not None and response.create.errors:
            _LOG.debug("Ignoring CREATE errors for %s: %s", file_path, response.create.errors)

        payload = response.commit_create
        return OperationResult(errors=list((payload.errors if payload is not None else None) or []))

    async def create_merge_request(
        self, project_path: str, source_branch: str, base_branch: str, title: str
    ) -> OperationResult:
        """Open a merge request and return the URL of the open merge request for ``source_branch``.

        The lookup runs even when creation reported errors, so an already
        existing merge request still yields its URL.

        Raises:
            NotFoundError: No open merge request exists for ``source_branch``.
        """
        _require_text(project_path=project_path, source_branch=source_branch, base_branch=base_branch, title=title)

        mutation_response = await self._mutation(
            documents.CREATE_MERGE_REQUEST,
            {
                "projectPath": project_path,
                "sourceBranch": source_branch,
                "targetBranch": base_branch,
                "title": title,
            },
        )
        query_response = await self._query(
            documents.OPEN_MERGE_REQUESTS,
            {"projectPath": project_path, "sourceBranch": source_branch},
        )

        payload = mutation_response.merge_request_create
        errors = list((payload.errors if payload is not None else None) or [])
        return OperationResult(errors=errors, url=self._first_merge_request_url(query_response))

    @staticmethod
    def _first_merge_request_url(response: QueryResponse) -> str:
        project = response.project
        connection = project.merge_requests if project is not None else None
        nodes = (connection.nodes if connection is not None else None) or []
        node = nodes[0] if nodes else None
        if node is None or node.web_url is None:
            raise NotFoundError("expected open merge request not found")
        return node.web_url

    async def _query(self, document: str, variables: dict[str, Any]) -> QueryResponse:
        try:
            return await self._query_executor.execute_query(document, variables)
        except ExecutorError as exc:
            raise ServiceUnavailableError("GitLab GraphQL service not available") from exc

    async def _mutation(self, document: str, variables: dict[str, Any]) -> MutationResponse:
        try:
            return await self._mutation_executor.execute_mutation(document, variables)
        except ExecutorError as exc:
            raise ServiceUnavailableError("GitLab GraphQL service not available") from exc
