"""Retry executor settings."""

from pydantic import Field

from retry_executor.configuration.base import InfrastructureSettings


class RetrySettings(InfrastructureSettings):
    """Default retry budget and interval for the retry executor.

    Values here are only defaults: callers of ``RetryExecutor.execute`` pass
    their own budget explicitly, while ``RetryConfig.from_settings`` reads
    them from this class.

    Environment Variables:
        RETRY_MAX_RETRIES: Retries after the initial attempt (default: 3)
        RETRY_INTERVAL_MILLIS: Fixed wait between retries in ms (default: 500)

    Example:
        ```python
        from retry_executor.configuration import get_settings

        settings = get_settings()
        max_retries = settings.retry.max_retries
        interval = settings.retry.interval_millis
        ```
    """

    max_retries: int = Field(
        default=3,
        ge=0,
        alias="RETRY_MAX_RETRIES",
        description="Number of retries after the initial attempt",
    )
    interval_millis: int = Field(
        default=500,
        ge=0,
        alias="RETRY_INTERVAL_MILLIS",
        description="Fixed delay between retry attempts (milliseconds)",
    )
