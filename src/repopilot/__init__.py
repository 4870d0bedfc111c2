"""Public API surface for repopilot."""

from repopilot.auth import create_token_resolver
from repopilot.config import load_config
from repopilot.contracts.config import RepoPilotConfig
from repopilot.contracts.exceptions import (
    AccessDeniedError,
    AuthenticationError,
    ConfigError,
    ExecutorError,
    InvalidArgumentError,
    NotFoundError,
    ProtocolError,
    RepoPilotError,
    ServiceUnavailableError,
    TransportError,
)
from repopilot.contracts.executor import MutationExecutor, QueryExecutor
from repopilot.contracts.result import OperationResult
from repopilot.sdk import RepoPilot
from repopilot.service import RepositoryService

__all__ = [
    "AccessDeniedError",
    "AuthenticationError",
    "ConfigError",
    "ExecutorError",
    "InvalidArgumentError",
    "MutationExecutor",
    "NotFoundError",
    "OperationResult",
    "ProtocolError",
    "QueryExecutor",
    "RepoPilot",
    "RepoPilotConfig",
    "RepoPilotError",
    "RepositoryService",
    "ServiceUnavailableError",
    "TransportError",
    "create_token_resolver",
    "load_config",
]
