"""Public contracts for repopilot."""

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
    "RepoPilotConfig",
    "RepoPilotError",
    "ServiceUnavailableError",
    "TransportError",
]
