# ABOUTME: Logging setup for the portfolio showcase package.
# ABOUTME: Attaches a single stream handler to the package logger for server runs.

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """Configure the package logger.

    Safe to call more than once; the handler is only installed the first time.

    Args:
        level: Logging level name or number.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("portfolio_showcase")
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

    if not any(getattr(h, "_portfolio_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._portfolio_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    return logger
