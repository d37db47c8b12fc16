import pytest

from pidlist.exceptions import (
    ApplicationError,
    ListingExecutionError,
    ListingExitCodeError,
    ParseError,
    ProbeExecutionError,
    ProcessQueryError,
)


@pytest.mark.parametrize(
    ("exc_cls", "message"),
    [
        (ProcessQueryError, "Process query failed"),
        (ProbeExecutionError, "pidlist PowerShell version probe failed"),
        (ListingExecutionError, "pidlist PowerShell command failed"),
        (ParseError, "Process listing output could not be parsed"),
    ],
)
def test_default_messages(exc_cls, message):
    err = exc_cls()
    assert str(err) == message
    assert isinstance(err, ProcessQueryError)
    assert isinstance(err, ApplicationError)


def test_exit_code_error_carries_code():
    err = ListingExitCodeError(exit_code=259)

    assert err.exit_code == 259
    assert str(err) == "pidlist PowerShell command exited with code 259"


def test_execution_errors_keep_cause():
    cause = OSError("boom")

    assert ProbeExecutionError(cause=cause).cause is cause
    assert str(ListingExecutionError(cause=cause)) == "pidlist PowerShell command failed: boom"


def test_application_error_stores_context():
    err = ApplicationError(line="0 777", position=2)

    assert err.line == "0 777"
    assert err.position == 2
    assert str(err).startswith("Base exception for all application errors.")
