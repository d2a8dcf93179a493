import logging

import pytest

from webapp_publisher.modules.deployment.deploy import RetryingInvoker
from webapp_publisher.modules.deployment.domain import DeployExhaustedError


class FlakyOperation:
    def __init__(self, failures: int) -> None:
        self.failures = failures
        self.calls = 0

    def __call__(self) -> None:
        self.calls += 1
        if self.calls <= self.failures:
            raise TimeoutError(f"socket timeout #{self.calls}")


def test_succeeds_on_third_attempt():
    op = FlakyOperation(failures=2)

    RetryingInvoker().invoke(op, max_attempts=3)

    assert op.calls == 3


def test_first_success_stops_retrying():
    op = FlakyOperation(failures=0)

    RetryingInvoker().invoke(op)

    assert op.calls == 1


def test_exhaustion_reports_attempt_count_and_causes():
    op = FlakyOperation(failures=10)

    with pytest.raises(DeployExhaustedError) as excinfo:
        RetryingInvoker().invoke(op, max_attempts=3)

    error = excinfo.value
    assert op.calls == 3
    assert error.attempts == 3
    assert [str(cause) for cause in error.causes] == [
        "socket timeout #1",
        "socket timeout #2",
        "socket timeout #3",
    ]
    assert isinstance(error.__cause__, TimeoutError)
    assert "3 times of retry" in str(error)


def test_default_attempts_come_from_constructor():
    op = FlakyOperation(failures=10)

    with pytest.raises(DeployExhaustedError) as excinfo:
        RetryingInvoker(max_attempts=5).invoke(op)

    assert op.calls == 5
    assert excinfo.value.attempts == 5


def test_failure_message_template_is_used():
    op = FlakyOperation(failures=10)

    with pytest.raises(DeployExhaustedError, match="The zip deploy failed after 2 times of retry."):
        RetryingInvoker().invoke(
            op,
            max_attempts=2,
            failure_message="The zip deploy failed after {attempts} times of retry.",
        )


def test_each_failed_attempt_is_logged(caplog):
    op = FlakyOperation(failures=2)
    caplog.set_level(logging.DEBUG, logger="RetryingInvoker")

    RetryingInvoker().invoke(op, description="deploying the zip package")

    messages = [record.getMessage() for record in caplog.records if record.name == "RetryingInvoker"]
    assert len(messages) == 2
    assert "retrying immediately (1/3)" in messages[0]
    assert "retrying immediately (2/3)" in messages[1]


@pytest.mark.parametrize("attempts", [0, -1])
def test_rejects_non_positive_attempts(attempts):
    with pytest.raises(ValueError):
        RetryingInvoker(max_attempts=attempts)
    with pytest.raises(ValueError):
        RetryingInvoker().invoke(lambda: None, max_attempts=attempts)
