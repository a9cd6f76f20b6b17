"""Structlog configuration and logger setup.

Loggers handed out by get_module_logger() emit through the stdlib
``retry_executor`` logger, which carries a NullHandler. An application that
never configures logging sees no output; one that calls configure_logging()
or sets up its own stdlib handlers gets the events rendered as usual.

Usage:
    from retry_executor.logging import configure_logging, get_module_logger

    # Optional, for applications that want this package's rendering
    configure_logging()

    logger = get_module_logger()
    logger.info("event_name", key="value")
"""

import logging
import sys
import inspect
import structlog
from structlog.stdlib import BoundLogger
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from retry_executor.configuration import Settings

PACKAGE_LOGGER_NAME = "retry_executor"

logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
    settings: Optional["Settings"] = None,
) -> BoundLogger:
    """Configure structlog rendering and the root stdlib logger.

    Args:
        log_level: Optional override for log level (DEBUG, INFO, WARNING, etc).
            Defaults to settings.LOG_LEVEL when empty or not provided.
        is_production: Optional override for production mode. Defaults to
            settings.is_production if not provided. Controls JSON vs console output.
        settings: Optional Settings instance, loaded with get_settings() when
            an override is missing.

    Returns:
        Logger bound to the package logger
    """
    if _is_test_environment():
        # Root level above CRITICAL keeps test output quiet
        logging.root.setLevel(logging.CRITICAL + 1)

        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        logging.basicConfig(
            format="%(message)s",
            level=logging.CRITICAL + 1,
            force=True,
        )
        return _wrap(PACKAGE_LOGGER_NAME)

    if settings is None and (not log_level or is_production is None):
        from retry_executor.configuration import get_settings

        settings = get_settings()

    prod_mode = is_production if is_production is not None else settings.is_production

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if not prod_mode:
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    effective_log_level = log_level or settings.LOG_LEVEL
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, effective_log_level.upper(), logging.INFO),
    )

    return _wrap(PACKAGE_LOGGER_NAME)


def _wrap(name: str, **context) -> BoundLogger:
    # Lazy proxy: processors are resolved from the structlog config on bind
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
        **context,
    )


def get_module_logger() -> BoundLogger:
    """Get a logger for the calling module with full path context.

    The underlying stdlib logger is named after the module, so it sits
    under the ``retry_executor`` logger and its NullHandler.

    Example:
        # In retry_executor/resilience/retry/executor.py
        logger = get_module_logger()
        # context: {"component": "executor",
        #           "module_path": "retry_executor.resilience.retry.executor"}
    """
    current_frame = inspect.currentframe()
    module = None
    if current_frame is not None and current_frame.f_back is not None:
        module = inspect.getmodule(current_frame.f_back)

    if module is None:
        return _wrap(PACKAGE_LOGGER_NAME, component="unknown")

    module_name = module.__name__
    return _wrap(
        module_name,
        component=module_name.split(".")[-1],
        module_path=module_name,
    )
