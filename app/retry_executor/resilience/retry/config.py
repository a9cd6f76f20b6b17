"""Retry executor configuration.

This module defines the validated retry budget used by the executor.
"""

from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from retry_executor.configuration import Settings


@dataclass(frozen=True)
class RetryConfig:
    """Retry budget for one execute call.

    Attributes:
        max_retries: Retries allowed after the initial attempt
        interval_millis: Fixed delay between retries in milliseconds

    Example:
        # Default configuration
        config = RetryConfig()

        # Custom configuration
        config = RetryConfig(max_retries=5, interval_millis=100)

        # From RETRY_* environment variables
        config = RetryConfig.from_settings()
    """

    max_retries: int = 3
    interval_millis: int = 500

    def __post_init__(self) -> None:
        """Validate configuration values."""
        for name in ("max_retries", "interval_millis"):
            value = getattr(self, name)
            # bool is an int subclass but never a meaningful count
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(
                    f"{name} must be an integer, got {type(value).__name__}"
                )
        if self.max_retries < 0:
            raise ValueError("max_retries must be at least 0")
        if self.interval_millis < 0:
            raise ValueError("interval_millis must be at least 0")

    @property
    def total_attempts(self) -> int:
        return self.max_retries + 1

    @property
    def interval_seconds(self) -> float:
        return self.interval_millis / 1000

    @classmethod
    def from_settings(cls, settings: Optional["Settings"] = None) -> "RetryConfig":
        """Build a config from the environment-backed settings.

        Args:
            settings: Optional Settings instance. Uses get_settings() if None.

        Returns:
            RetryConfig populated from settings.retry
        """
        if settings is None:
            from retry_executor.configuration import get_settings

            settings = get_settings()

        return cls(
            max_retries=settings.retry.max_retries,
            interval_millis=settings.retry.interval_millis,
        )
