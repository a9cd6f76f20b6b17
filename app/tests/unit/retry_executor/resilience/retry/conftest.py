"""Shared fixtures for retry executor tests."""

from typing import Callable, List, Optional

import pytest

from retry_executor.resilience.retry import (
    AttemptFailureInfo,
    RetryConfig,
    RetryDecision,
    RetryExecutor,
)


class RecordingSleep:
    """Stand-in for time.sleep that records requested delays."""

    def __init__(self):
        self.calls: List[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


class ScriptedAction:
    """Zero-argument operation that fails a set number of times.

    Args:
        failures_before_success: Number of leading calls that raise.
            None means every call raises.
        error_factory: Builds the exception raised by call N (1-based)
    """

    def __init__(
        self,
        failures_before_success: Optional[int] = None,
        error_factory: Optional[Callable[[int], Exception]] = None,
    ):
        self.failures_before_success = failures_before_success
        self.error_factory = error_factory or (
            lambda n: RuntimeError(f"attempt {n} failed")
        )
        self.calls = 0
        self.raised: List[Exception] = []

    def __call__(self) -> None:
        self.calls += 1
        if (
            self.failures_before_success is None
            or self.calls <= self.failures_before_success
        ):
            error = self.error_factory(self.calls)
            self.raised.append(error)
            raise error


class RecordingCallback:
    """Error callback that records infos and optionally stops at a retry count."""

    def __init__(self, stop_at: Optional[int] = None):
        self.stop_at = stop_at
        self.infos: List[AttemptFailureInfo] = []

    def __call__(self, info: AttemptFailureInfo) -> RetryDecision:
        self.infos.append(info)
        if self.stop_at is not None and info.retry_count == self.stop_at:
            return RetryDecision.STOP
        return RetryDecision.CONTINUE

    @property
    def retry_counts(self) -> List[int]:
        return [info.retry_count for info in self.infos]


@pytest.fixture
def recording_sleep():
    """Sleep replacement that never blocks."""
    return RecordingSleep()


@pytest.fixture
def executor(recording_sleep):
    """RetryExecutor wired to the recording sleep."""
    return RetryExecutor(sleep=recording_sleep)


@pytest.fixture
def action_factory():
    """Factory for creating scripted actions."""

    def _factory(
        failures_before_success: Optional[int] = None,
        error_factory: Optional[Callable[[int], Exception]] = None,
    ) -> ScriptedAction:
        return ScriptedAction(failures_before_success, error_factory)

    return _factory


@pytest.fixture
def callback_factory():
    """Factory for creating recording error callbacks."""

    def _factory(stop_at: Optional[int] = None) -> RecordingCallback:
        return RecordingCallback(stop_at=stop_at)

    return _factory


@pytest.fixture
def retry_config_factory():
    """Factory for creating RetryConfig instances."""

    def _factory(max_retries: int = 3, interval_millis: int = 100) -> RetryConfig:
        return RetryConfig(max_retries=max_retries, interval_millis=interval_millis)

    return _factory
