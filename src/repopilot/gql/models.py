"""Typed response shapes for the GitLab GraphQL operations.

Only the fields read by :class:`repopilot.service.RepositoryService` are
modelled. Every field is optional: GitLab answers an unauthorized request with
``null`` payloads rather than an error.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class GitLabModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


class MergeRequest(GitLabModel):
    web_url: str | None = Field(default=None, alias="webUrl")


class MergeRequestConnection(GitLabModel):
    nodes: list[MergeRequest | None] | None = None


class Project(GitLabModel):
    merge_requests: MergeRequestConnection | None = Field(default=None, alias="mergeRequests")


class QueryResponse(GitLabModel):
    """Root ``Query`` type."""

    echo: str | None = None
    project: Project | None = None


class CreateBranchPayload(GitLabModel):
    errors: list[str] | None = None


class CommitCreatePayload(GitLabModel):
    errors: list[str] | None = None


class MergeRequestCreatePayload(GitLabModel):
    errors: list[str] | None = None


class EchoCreatePayload(GitLabModel):
    errors: list[str] | None = None
    echoes: list[str] | None = None


class MutationResponse(GitLabModel):
    """Root ``Mutation`` type.

    ``create`` is the aliased CREATE half of the compound commit mutation.
    """

    create_branch: CreateBranchPayload | None = Field(default=None, alias="createBranch")
    create: CommitCreatePayload | None = None
    commit_create: CommitCreatePayload | None = Field(default=None, alias="commitCreate")
    merge_request_create: MergeRequestCreatePayload | None = Field(default=None, alias="mergeRequestCreate")
    echo_create: EchoCreatePayload | None = Field(default=None, alias="echoCreate")
