"""Token resolution for the GitLab GraphQL endpoint."""

from __future__ import annotations

from abc import ABC, abstractmethod


class TokenResolver(ABC):
    @abstractmethod
    async def resolve(self) -> str:
        """Return the bearer token, or an empty string for anonymous access.

        Raises:
            AuthenticationError: No usable token is available.
        """
