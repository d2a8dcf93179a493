"""Fixed-attempt retry around remote deploy calls."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from tenacity import RetryCallState, RetryError, Retrying, retry_if_exception_type, stop_after_attempt, wait_none

from webapp_publisher.modules.deployment.domain import DeployExhaustedError
from webapp_publisher.modules.deployment.domain.constants import DEFAULT_MAX_RETRY_TIMES


class RetryingInvoker:
    """Runs an operation up to ``max_attempts`` times, back to back.

    Every exception counts as a transient failure and the operation must be
    safe to repeat. Individual failures are logged and kept on the final
    :class:`DeployExhaustedError`; only exhaustion is raised.
    """

    def __init__(self, max_attempts: int = DEFAULT_MAX_RETRY_TIMES) -> None:
        self._validate(max_attempts)
        self.max_attempts = max_attempts
        self.log = logging.getLogger(self.__class__.__name__)

    def invoke(
        self,
        op: Callable[[], object],
        max_attempts: Optional[int] = None,
        *,
        description: str = "deploy",
        failure_message: Optional[str] = None,
        log_level: int = logging.DEBUG,
    ) -> None:
        attempts = self.max_attempts if max_attempts is None else max_attempts
        self._validate(attempts)
        causes: List[BaseException] = []

        def _record_failure(state: RetryCallState) -> None:
            exc = state.outcome.exception()
            causes.append(exc)
            self.log.log(
                log_level,
                "Exception occurred when %s: %s, retrying immediately (%d/%d)",
                description,
                exc,
                state.attempt_number,
                attempts,
            )

        retrying = Retrying(
            stop=stop_after_attempt(attempts),
            wait=wait_none(),
            retry=retry_if_exception_type(Exception),
            after=_record_failure,
            reraise=False,
        )
        try:
            retrying(op)
        except RetryError as exc:
            last = exc.last_attempt
            message = failure_message.format(attempts=last.attempt_number) if failure_message else None
            raise DeployExhaustedError(
                last.attempt_number,
                operation=description,
                message=message,
                causes=causes,
            ) from last.exception()

    @staticmethod
    def _validate(attempts: int) -> None:
        if attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {attempts}")
