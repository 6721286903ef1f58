"""
Basic logging configuration for the application.

The ``setup_logging`` function configures the root logger with a console
handler. Services log through their own injected loggers, named
``services.<ServiceName>``, which propagate to the root logger.
"""

import logging


def setup_logging(level: str = "INFO") -> None:
    """
    Configure root logger.

    If no handlers are attached to the root logger, attach a console
    handler. The root logger's level is set from ``level`` either way.

    Args:
        level: Logging level name (e.g. ``"DEBUG"``), case insensitive
    """
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if logger.handlers:
        # Already configured, e.g. by uvicorn or the test runner
        return

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
