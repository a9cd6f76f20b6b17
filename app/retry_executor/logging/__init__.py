"""Structured logging infrastructure.

Public API:
    - configure_logging(): Initialize logging for an application
    - get_module_logger(): Get a logger for the calling module

Nothing is printed until the application configures logging: package
loggers propagate to the stdlib ``retry_executor`` logger, which holds a
NullHandler.

Example:
    from retry_executor.logging import configure_logging, get_module_logger

    configure_logging()

    logger = get_module_logger()
    logger.info("module_initialized")
"""

from retry_executor.logging.setup import (
    PACKAGE_LOGGER_NAME,
    configure_logging,
    get_module_logger,
)

__all__ = [
    "PACKAGE_LOGGER_NAME",
    "configure_logging",
    "get_module_logger",
]
