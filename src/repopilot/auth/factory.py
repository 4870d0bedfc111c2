"""Token resolver factory."""

from __future__ import annotations

from repopilot.auth.base import TokenResolver
from repopilot.auth.resolvers.anonymous import AnonymousTokenResolver
from repopilot.auth.resolvers.env import EnvTokenResolver
from repopilot.auth.resolvers.static import StaticTokenResolver
from repopilot.contracts.config import RepoPilotConfig
from repopilot.contracts.exceptions import ConfigError

RESOLVERS: dict[str, type[TokenResolver]] = {
    "env": EnvTokenResolver,
    "token": StaticTokenResolver,
    "none": AnonymousTokenResolver,
}


def create_token_resolver(config: RepoPilotConfig) -> TokenResolver:
    auth_mode = config.auth
    if auth_mode not in RESOLVERS:
        raise ConfigError(f"Unknown auth mode: {auth_mode}")

    if auth_mode == "env":
        return EnvTokenResolver(variable=config.token_env)
    if auth_mode == "none":
        return AnonymousTokenResolver()
    return StaticTokenResolver(token=config.token or "")
