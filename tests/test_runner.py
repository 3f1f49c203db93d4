"""Tests for the run orchestrator (validate -> scaffolder -> scaffold -> post_scaffold)."""

from unittest.mock import MagicMock

import pytest

from webhook_scaffold.errors import (
    BoilerplateLoadError,
    ErrorKind,
    NoWebhookTypeSelectedError,
    ScaffolderError,
)
from webhook_scaffold.runner import RunState, run


class _FakeCommand:
    def __init__(self, scaffolder: object | None = None) -> None:
        self.state = RunState.RESOURCE_BUILT
        self.calls: list[str] = []
        self.scaffolder = scaffolder
        self.validate_error: Exception | None = None
        self.scaffolder_error: Exception | None = None

    def validate(self) -> None:
        self.calls.append("validate")
        if self.validate_error:
            raise self.validate_error

    def get_scaffolder(self) -> object | None:
        self.calls.append("get_scaffolder")
        if self.scaffolder_error:
            raise self.scaffolder_error
        return self.scaffolder

    def post_scaffold(self) -> None:
        self.calls.append("post_scaffold")


def test_run_success_scaffolds_exactly_once() -> None:
    scaffolder = MagicMock()
    cmd = _FakeCommand(scaffolder)
    run(cmd)
    assert cmd.calls == ["validate", "get_scaffolder", "post_scaffold"]
    scaffolder.scaffold.assert_called_once_with()
    assert cmd.state is RunState.DONE


def test_run_without_scaffolder_still_completes() -> None:
    cmd = _FakeCommand(None)
    run(cmd)
    assert cmd.state is RunState.DONE


def test_validation_failure_acquires_no_scaffolder() -> None:
    cmd = _FakeCommand(MagicMock())
    cmd.validate_error = NoWebhookTypeSelectedError("nothing selected")
    with pytest.raises(NoWebhookTypeSelectedError):
        run(cmd)
    assert cmd.calls == ["validate"]
    assert cmd.state is RunState.FAILED


def test_boilerplate_failure_propagates() -> None:
    cmd = _FakeCommand()
    cmd.scaffolder_error = BoilerplateLoadError("unable to load boilerplate")
    with pytest.raises(BoilerplateLoadError):
        run(cmd)
    assert cmd.state is RunState.FAILED
    assert "post_scaffold" not in cmd.calls


def test_scaffolder_error_propagates_unchanged() -> None:
    original = ScaffolderError("disk full")
    scaffolder = MagicMock()
    scaffolder.scaffold.side_effect = original
    cmd = _FakeCommand(scaffolder)
    with pytest.raises(ScaffolderError) as exc_info:
        run(cmd)
    assert exc_info.value is original
    assert cmd.state is RunState.FAILED


def test_foreign_scaffolder_exception_is_wrapped() -> None:
    scaffolder = MagicMock()
    scaffolder.scaffold.side_effect = OSError("permission denied")
    cmd = _FakeCommand(scaffolder)
    with pytest.raises(ScaffolderError) as exc_info:
        run(cmd)
    assert exc_info.value.kind is ErrorKind.SCAFFOLDER_FAILURE
    assert isinstance(exc_info.value.__cause__, OSError)
    scaffolder.scaffold.assert_called_once_with()


def test_non_taxonomy_validate_error_is_not_swallowed() -> None:
    cmd = _FakeCommand()
    cmd.validate_error = RuntimeError("bug")
    with pytest.raises(RuntimeError, match="bug"):
        run(cmd)
    assert cmd.state is RunState.FAILED


def test_non_taxonomy_get_scaffolder_error_marks_failed() -> None:
    cmd = _FakeCommand()
    original = KeyError("factory")
    cmd.scaffolder_error = original
    with pytest.raises(KeyError) as exc_info:
        run(cmd)
    assert exc_info.value is original
    assert cmd.state is RunState.FAILED


def test_non_taxonomy_post_scaffold_error_marks_failed() -> None:
    scaffolder = MagicMock()
    cmd = _FakeCommand(scaffolder)

    def _post() -> None:
        raise ValueError("post step broke")

    cmd.post_scaffold = _post  # type: ignore[method-assign]
    with pytest.raises(ValueError, match="post step broke"):
        run(cmd)
    scaffolder.scaffold.assert_called_once_with()
    assert cmd.state is RunState.FAILED
