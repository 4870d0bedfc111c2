"""Auth module public exports."""

from repopilot.auth.base import TokenResolver
from repopilot.auth.factory import create_token_resolver

__all__ = ["TokenResolver", "create_token_resolver"]
