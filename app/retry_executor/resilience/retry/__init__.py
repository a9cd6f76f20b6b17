"""Fixed-interval retry executor.

Architecture:
- RetryExecutor: Runs an operation with a retry budget and optional error callback
- AttemptFailureInfo: Failure details handed to the error callback
- RetryDecision: Callback return value (CONTINUE or STOP)
- RetryState / RetryOutcome: How an execute call ended
- AggregateRetryFailure: Raised on exhaustion when no callback was given
- RetryConfig: Validated retry budget

Usage:
    from retry_executor.resilience.retry import (
        AttemptFailureInfo,
        RetryDecision,
        RetryExecutor,
    )

    executor = RetryExecutor()

    # Raises AggregateRetryFailure if all 4 attempts fail
    executor.execute(3, 500, sync_accounts)

    # Never raises AggregateRetryFailure; the callback sees every retry failure
    def on_error(info: AttemptFailureInfo) -> RetryDecision:
        if info.retry_count == 2:
            return RetryDecision.STOP
        return RetryDecision.CONTINUE

    outcome = executor.execute(3, 500, sync_accounts, on_error)
"""

from retry_executor.resilience.retry.config import RetryConfig
from retry_executor.resilience.retry.exceptions import AggregateRetryFailure
from retry_executor.resilience.retry.models import (
    AttemptFailureInfo,
    RetryDecision,
    RetryOutcome,
    RetryState,
)
from retry_executor.resilience.retry.executor import (
    ErrorCallback,
    RetryExecutor,
    execute,
)

__all__ = [
    # Models
    "AttemptFailureInfo",
    "RetryDecision",
    "RetryOutcome",
    "RetryState",
    # Errors
    "AggregateRetryFailure",
    # Configuration
    "RetryConfig",
    # Executor
    "ErrorCallback",
    "RetryExecutor",
    "execute",
]
