"""Concrete token resolvers."""

from repopilot.auth.resolvers.anonymous import AnonymousTokenResolver
from repopilot.auth.resolvers.env import EnvTokenResolver
from repopilot.auth.resolvers.static import StaticTokenResolver

__all__ = ["AnonymousTokenResolver", "EnvTokenResolver", "StaticTokenResolver"]
