"""Errors raised by the retry executor."""

from typing import List, Sequence


class AggregateRetryFailure(Exception):
    """Raised when every attempt failed and no error callback was given.

    Attributes:
        failures: every exception raised by the operation, in attempt order
    """

    def __init__(self, failures: Sequence[Exception]):
        if not failures:
            raise ValueError("failures must not be empty")
        self.failures: List[Exception] = list(failures)
        super().__init__(
            f"Operation failed after {len(self.failures)} attempt(s); "
            f"last error: {self.last_failure!r}"
        )

    @property
    def attempts(self) -> int:
        return len(self.failures)

    @property
    def last_failure(self) -> Exception:
        return self.failures[-1]
