import pytest
from pydantic import ValidationError

from repopilot.contracts.result import OperationResult


def test_defaults_are_successful_without_url() -> None:
    result = OperationResult()

    assert result.errors == []
    assert result.url == ""
    assert result.successful() is True


def test_errors_make_result_unsuccessful_regardless_of_url() -> None:
    assert OperationResult(errors=["boom"], url="https://gitlab/mr/1").successful() is False
    assert OperationResult(errors=[], url="https://gitlab/mr/1").successful() is True


def test_result_is_immutable() -> None:
    result = OperationResult(errors=["boom"])

    with pytest.raises(ValidationError):
        result.url = "changed"  # type: ignore[misc]


def test_errors_must_not_be_null() -> None:
    with pytest.raises(ValidationError):
        OperationResult(errors=None)  # type: ignore[arg-type]
