"""Retry executor models.

Data carriers passed between the executor, the caller's error callback and
the caller of ``RetryExecutor.execute``.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class RetryDecision(Enum):
    """Value returned by an error callback.

    Values:
        CONTINUE: Keep retrying while budget remains
        STOP: Abandon the remaining retries without raising
    """

    CONTINUE = "continue"
    STOP = "stop"


class RetryState(Enum):
    """States of a single execute call.

    State transitions:
    - ATTEMPTING -> SUCCEEDED: Operation returned normally
    - ATTEMPTING -> FAILED: Operation raised
    - FAILED -> ATTEMPTING: Budget remains and the callback did not stop
    - FAILED -> STOPPED: Callback returned RetryDecision.STOP
    - FAILED -> EXHAUSTED: Initial attempt and every retry failed
    """

    ATTEMPTING = "attempting"
    FAILED = "failed"
    STOPPED = "stopped"
    EXHAUSTED = "exhausted"
    SUCCEEDED = "succeeded"

    @property
    def is_terminal(self) -> bool:
        return self in (RetryState.STOPPED, RetryState.EXHAUSTED, RetryState.SUCCEEDED)


@dataclass(frozen=True)
class AttemptFailureInfo:
    """Failure of one retry attempt, handed to the error callback.

    Fields:
        retry_count: 1-based number of retries made so far (the initial
            attempt is not counted, so this is never 0)
        cause: Exception raised by the attempt
    """

    retry_count: int
    cause: Exception

    def __post_init__(self) -> None:
        if self.retry_count < 1:
            raise ValueError("retry_count must be at least 1")
        if self.cause is None:
            raise ValueError("cause is required")


@dataclass(frozen=True)
class RetryOutcome:
    """Report of a finished execute call.

    Fields:
        state: Terminal state (SUCCEEDED, STOPPED or EXHAUSTED)
        attempts: Number of times the operation was invoked
        failures: Every exception raised by the operation, in attempt order
    """

    state: RetryState
    attempts: int
    failures: List[Exception] = field(default_factory=list)

    @property
    def is_success(self) -> bool:
        return self.state == RetryState.SUCCEEDED

    @property
    def retries(self) -> int:
        """Retry attempts made after the initial attempt."""
        return max(self.attempts - 1, 0)

    @property
    def last_failure(self) -> Exception | None:
        return self.failures[-1] if self.failures else None
