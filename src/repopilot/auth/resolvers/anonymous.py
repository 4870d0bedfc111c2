"""Resolver for endpoints reached without credentials."""

from __future__ import annotations

from repopilot.auth.base import TokenResolver


class AnonymousTokenResolver(TokenResolver):
    async def resolve(self) -> str:
        return ""
