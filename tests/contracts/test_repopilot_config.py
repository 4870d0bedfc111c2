import pytest
from pydantic import ValidationError

from repopilot.contracts.config import RepoPilotConfig

ENDPOINT = "https://gitlab.example.com/api/graphql"


def test_defaults() -> None:
    config = RepoPilotConfig(endpoint_url=ENDPOINT)

    assert config.auth == "env"
    assert config.token is None
    assert config.token_env == "GITLAB_TOKEN"
    assert config.timeout == 30.0


def test_endpoint_url_is_stripped() -> None:
    assert RepoPilotConfig(endpoint_url=f"  {ENDPOINT} ").endpoint_url == ENDPOINT


@pytest.mark.parametrize("url", ["", "gitlab.example.com/api/graphql", "ftp://gitlab.example.com/graphql"])
def test_endpoint_url_must_be_http(url: str) -> None:
    with pytest.raises(ValidationError, match="endpoint_url"):
        RepoPilotConfig(endpoint_url=url)


def test_token_auth_requires_token() -> None:
    with pytest.raises(ValidationError, match="non-empty token"):
        RepoPilotConfig(endpoint_url=ENDPOINT, auth="token", token="  ")


@pytest.mark.parametrize("auth", ["env", "none"])
def test_token_must_be_unset_for_other_modes(auth: str) -> None:
    with pytest.raises(ValidationError, match="token must be unset"):
        RepoPilotConfig(endpoint_url=ENDPOINT, auth=auth, token="glpat-123")


def test_unknown_auth_mode_is_rejected() -> None:
    with pytest.raises(ValidationError, match="auth must be one of"):
        RepoPilotConfig(endpoint_url=ENDPOINT, auth="oauth")


@pytest.mark.parametrize("timeout", [0, -1])
def test_timeout_must_be_positive(timeout: float) -> None:
    with pytest.raises(ValidationError):
        RepoPilotConfig(endpoint_url=ENDPOINT, timeout=timeout)


def test_config_is_frozen() -> None:
    config = RepoPilotConfig(endpoint_url=ENDPOINT)

    with pytest.raises(ValidationError):
        config.auth = "none"  # type: ignore[misc]
