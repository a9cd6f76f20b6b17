"""Generic fixed-interval retry executor.

Example:
    from retry_executor import RetryExecutor, AggregateRetryFailure

    try:
        RetryExecutor().execute(3, 500, refresh_cache)
    except AggregateRetryFailure as e:
        for failure in e.failures:
            ...
"""

from retry_executor.resilience import (
    AggregateRetryFailure,
    AttemptFailureInfo,
    RetryConfig,
    RetryDecision,
    RetryExecutor,
    RetryOutcome,
    RetryState,
    execute,
)

__all__ = [
    "AggregateRetryFailure",
    "AttemptFailureInfo",
    "RetryConfig",
    "RetryDecision",
    "RetryExecutor",
    "RetryOutcome",
    "RetryState",
    "execute",
]
