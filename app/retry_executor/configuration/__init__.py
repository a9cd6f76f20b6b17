"""Configuration module - public API.

Exports:
    Settings: Main settings class (for testing/overrides)
    RetrySettings: Retry executor defaults
    get_settings: Cached singleton provider
"""

from retry_executor.configuration.settings import Settings, get_settings
from retry_executor.configuration.retry import RetrySettings

__all__ = ["Settings", "RetrySettings", "get_settings"]
