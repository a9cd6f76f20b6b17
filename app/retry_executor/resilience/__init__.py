"""Resilience patterns and implementations."""

from retry_executor.resilience.retry import (
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
