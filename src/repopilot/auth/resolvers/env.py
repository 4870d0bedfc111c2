"""Environment token resolver."""

from __future__ import annotations

import os
from dataclasses import dataclass

from repopilot.auth.base import TokenResolver
from repopilot.contracts.exceptions import AuthenticationError


@dataclass(frozen=True)
class EnvTokenResolver(TokenResolver):
    variable: str = "GITLAB_TOKEN"

    async def resolve(self) -> str:
        token = (os.getenv(self.variable) or "").strip()
        if not token:
            raise AuthenticationError(f"{self.variable} is not set or empty")
        return token
