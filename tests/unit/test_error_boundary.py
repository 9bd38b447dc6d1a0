"""Tests for the CLI error boundary decorator."""

import pytest

from cgr.cli.error_boundary import cli_error_boundary
from cgr.core.errors import AllManagersFailedError, ManagerQueryError


def test_wrapped_function_keeps_name_and_result() -> None:
    @cli_error_boundary
    def list_things() -> str:
        return "ok"

    assert list_things.__name__ == "list_things"
    assert list_things() == "ok"


def test_all_managers_failed_prints_each_failure(capsys: pytest.CaptureFixture[str]) -> None:
    @cli_error_boundary
    def failing() -> None:
        raise AllManagersFailedError(
            [ManagerQueryError("npm", "npm broken"), ManagerQueryError("yarn", "yarn broken")]
        )

    with pytest.raises(SystemExit) as exc_info:
        failing()

    assert exc_info.value.code == 1
    err = capsys.readouterr().err
    assert "Error: npm broken" in err
    assert "Error: yarn broken" in err


def test_unrelated_exception_propagates() -> None:
    @cli_error_boundary
    def failing() -> None:
        raise KeyError("boom")

    with pytest.raises(KeyError):
        failing()
