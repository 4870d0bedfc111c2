"""Exception hierarchy for repopilot."""

from __future__ import annotations


class RepoPilotError(Exception):
    """Base exception for all repopilot errors."""


class ConfigError(RepoPilotError):
    """Configuration loading or validation failure."""


class AuthenticationError(RepoPilotError):
    """A token could not be resolved for the GraphQL endpoint."""


class InvalidArgumentError(RepoPilotError, ValueError):
    """A caller-supplied parameter is missing or blank."""

    def __init__(self, parameter: str) -> None:
        super().__init__(f"Parameter '{parameter}' must not be null or empty!")
        self.parameter = parameter


class ServiceUnavailableError(RepoPilotError):
    """The GraphQL service could not be reached or answered with an unusable response."""


class AccessDeniedError(RepoPilotError):
    """An access probe received a well-formed response that did not echo the probe token."""

    def __init__(self, message: str, *, access: str) -> None:
        super().__init__(message)
        self.access = access


class NotFoundError(RepoPilotError):
    """A resource that must exist after a successful round trip was not returned."""


class ExecutorError(RepoPilotError):
    """Base failure raised by query/mutation executors."""


class TransportError(ExecutorError):
    """Network, connectivity or HTTP status failure."""


class ProtocolError(ExecutorError):
    """Response could not be decoded into the expected GraphQL shape."""
