"""Fixed-interval retry executor.

Runs a zero-argument operation, retrying it after failures until it
succeeds, the retry budget is spent, or the error callback asks to stop.

State transitions per execute call (see RetryState):
- ATTEMPTING -> SUCCEEDED: operation returned, nothing more is attempted
- ATTEMPTING -> FAILED: operation raised, failure is recorded
- FAILED -> STOPPED: callback returned RetryDecision.STOP
- FAILED -> EXHAUSTED: the failed attempt was the last one allowed
- FAILED -> ATTEMPTING: otherwise

The error callback is never called for the initial attempt, only for
retries, and no wait happens between the initial attempt and the first
retry.
"""

import time
from typing import Any, Callable, List, Optional

from retry_executor.logging import get_module_logger
from retry_executor.resilience.retry.config import RetryConfig
from retry_executor.resilience.retry.exceptions import AggregateRetryFailure
from retry_executor.resilience.retry.models import (
    AttemptFailureInfo,
    RetryDecision,
    RetryOutcome,
    RetryState,
)

logger = get_module_logger()

ErrorCallback = Callable[[AttemptFailureInfo], Optional[RetryDecision]]


class RetryExecutor:
    """Runs operations with a fixed-interval retry budget.

    The executor keeps no state between calls, so one instance can be shared
    across threads. Each call owns its failure list and retry counter.

    Attributes:
        log: Base structlog logger, bound once per execute call
    """

    def __init__(
        self,
        sleep: Optional[Callable[[float], None]] = None,
        log: Any = None,
    ) -> None:
        """Initialize the executor.

        Args:
            sleep: Blocking sleep taking seconds. Defaults to time.sleep.
            log: Optional logger. Defaults to the module logger.
        """
        self._sleep = sleep
        self.log = log if log is not None else logger

    def execute(
        self,
        max_retries: int,
        interval_millis: int,
        action: Callable[[], Any],
        error_callback: Optional[ErrorCallback] = None,
    ) -> RetryOutcome:
        """Run action, retrying it up to max_retries times after failures.

        Args:
            max_retries: Retries allowed after the initial attempt (>= 0)
            interval_millis: Wait between retries in milliseconds (>= 0)
            action: Zero-argument operation, safe to invoke repeatedly
            error_callback: Optional callback invoked for each failed retry.
                Returning RetryDecision.STOP abandons the remaining retries;
                returning None or RetryDecision.CONTINUE keeps going.

        Returns:
            RetryOutcome describing how the call ended

        Raises:
            AggregateRetryFailure: If every attempt failed and no
                error_callback was given
            ValueError: If max_retries or interval_millis is negative
            TypeError: If max_retries or interval_millis is not an integer,
                or action or error_callback is not callable
        """
        config = RetryConfig(max_retries=max_retries, interval_millis=interval_millis)
        return self.execute_with_config(config, action, error_callback)

    def execute_with_config(
        self,
        config: RetryConfig,
        action: Callable[[], Any],
        error_callback: Optional[ErrorCallback] = None,
    ) -> RetryOutcome:
        """Run action with the budget from a RetryConfig.

        See execute() for the retry contract.
        """
        if not callable(action):
            raise TypeError("action must be callable")
        if error_callback is not None and not callable(error_callback):
            raise TypeError("error_callback must be callable")

        log = self.log.bind(component="retry_executor")

        failures: List[Exception] = []
        retry_count = 0
        attempts = 0
        state = RetryState.ATTEMPTING

        while not state.is_terminal:
            if state == RetryState.ATTEMPTING:
                attempts += 1
                try:
                    action()
                except Exception as e:
                    failures.append(e)
                    log.warning(
                        "retry_attempt_failed",
                        attempt=attempts,
                        retry_count=retry_count,
                        max_retries=config.max_retries,
                        error=str(e),
                        error_type=type(e).__name__,
                    )
                    state = RetryState.FAILED
                else:
                    state = RetryState.SUCCEEDED
            else:
                state = self._after_failure(
                    config, failures[-1], retry_count, error_callback, log
                )
                if state != RetryState.STOPPED:
                    retry_count += 1

        outcome = RetryOutcome(state=state, attempts=attempts, failures=failures)
        self._finish(outcome, error_callback is not None, log)
        return outcome

    def _after_failure(
        self,
        config: RetryConfig,
        cause: Exception,
        retry_count: int,
        error_callback: Optional[ErrorCallback],
        log: Any,
    ) -> RetryState:
        """Decide the state that follows a failed attempt.

        Args:
            config: Retry budget
            cause: Exception raised by the attempt
            retry_count: Retries made before this attempt finished (0 for
                the initial attempt)
            error_callback: Optional caller callback
            log: Logger bound for this call

        Returns:
            STOPPED, EXHAUSTED or ATTEMPTING
        """
        if retry_count > 0:
            if error_callback is not None:
                decision = error_callback(
                    AttemptFailureInfo(retry_count=retry_count, cause=cause)
                )
                if decision is not None and not isinstance(decision, RetryDecision):
                    raise TypeError(
                        "error_callback must return a RetryDecision or None, "
                        f"got {type(decision).__name__}"
                    )
                if decision == RetryDecision.STOP:
                    return RetryState.STOPPED

            if retry_count < config.max_retries:
                self._wait(config, log)

        if retry_count >= config.max_retries:
            return RetryState.EXHAUSTED

        return RetryState.ATTEMPTING

    def _wait(self, config: RetryConfig, log: Any) -> None:
        log.debug("retry_waiting", interval_millis=config.interval_millis)
        sleep = self._sleep or time.sleep
        sleep(config.interval_seconds)

    def _finish(self, outcome: RetryOutcome, has_callback: bool, log: Any) -> None:
        """Log the outcome and raise when exhaustion has no other channel."""
        if outcome.state == RetryState.SUCCEEDED:
            if outcome.failures:
                log.info("retry_succeeded", attempts=outcome.attempts)
            else:
                log.debug("retry_succeeded", attempts=outcome.attempts)
            return

        if outcome.state == RetryState.STOPPED:
            log.info(
                "retry_callback_stopped",
                attempts=outcome.attempts,
                retries=outcome.retries,
            )
            return

        if has_callback:
            log.warning(
                "retry_exhausted",
                attempts=outcome.attempts,
                handled_by_callback=True,
            )
            return

        log.error(
            "retry_exhausted",
            attempts=outcome.attempts,
            handled_by_callback=False,
            error=str(outcome.last_failure),
        )
        raise AggregateRetryFailure(outcome.failures) from outcome.last_failure


_default_executor = RetryExecutor()


def execute(
    max_retries: int,
    interval_millis: int,
    action: Callable[[], Any],
    error_callback: Optional[ErrorCallback] = None,
) -> RetryOutcome:
    """Run action through a shared default RetryExecutor.

    Example:
        execute(3, 500, send_report)

        def on_error(info: AttemptFailureInfo) -> RetryDecision:
            if isinstance(info.cause, PermissionError):
                return RetryDecision.STOP
            return RetryDecision.CONTINUE

        execute(3, 500, send_report, on_error)
    """
    return _default_executor.execute(
        max_retries, interval_millis, action, error_callback
    )
