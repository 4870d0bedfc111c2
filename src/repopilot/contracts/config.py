"""Configuration contracts."""

from __future__ import annotations

from urllib.parse import urlparse

from pydantic import BaseModel, Field, field_validator, model_validator

AUTH_MODES = frozenset({"env", "token", "none"})


class RepoPilotConfig(BaseModel):
    endpoint_url: str
    auth: str = "env"
    token: str | None = None
    token_env: str = "GITLAB_TOKEN"
    timeout: float = Field(default=30.0, gt=0)

    model_config = {"frozen": True}

    @field_validator("endpoint_url")
    @classmethod
    def validate_endpoint_url(cls, value: str) -> str:
        parsed = urlparse(value.strip())
        if parsed.scheme not in {"http", "https"} or not parsed.netloc:
            raise ValueError("endpoint_url must be an http(s) URL")
        return value.strip()

    @model_validator(mode="after")
    def validate_auth_token(self) -> RepoPilotConfig:
        token = (self.token or "").strip()
        if self.auth == "token":
            if not token:
                raise ValueError("token auth requires a non-empty token")
            return self
        if token:
            raise ValueError("token must be unset when auth is not 'token'")
        if self.auth not in AUTH_MODES:
            raise ValueError("auth must be one of: env, token, none")
        return self
