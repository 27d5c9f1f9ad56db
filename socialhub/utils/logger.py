"""Logging setup for the app and the realtime transport."""

import logging
from pathlib import Path
from typing import Dict, Optional


APP_LOGGER_NAME = "socialhub"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# python-socketio/engineio log every packet at INFO; keep them quieter than the app
TRANSPORT_LOGGERS: Dict[str, int] = {
    "socketio": logging.WARNING,
    "engineio": logging.WARNING,
    "uvicorn.access": logging.INFO,
}


def _level(log_level: str) -> int:
    return getattr(logging, log_level.upper(), logging.INFO)


def _handlers_for(log_file: Optional[str]):
    handlers = [logging.StreamHandler()]
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding="utf-8"))
    return handlers


def setup_logger(
    name: str,
    log_level: str = "INFO",
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Set up a logger with console and optional file output.

    Calling it again for the same name only updates the level; handlers are
    attached once.

    Args:
        name: Logger name
        log_level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file (parent directories are created)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    level = _level(log_level)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _handlers_for(log_file):
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    # Our handlers already print; don't repeat through uvicorn's root handlers
    logger.propagate = False
    return logger


def quiet_transport_loggers(app_level: str = "INFO") -> None:
    """
    Cap the Socket.IO/Engine.IO and access loggers at their default levels.

    In DEBUG mode they follow the app level so handshake traffic is visible.
    """
    debug = _level(app_level) <= logging.DEBUG
    for name, level in TRANSPORT_LOGGERS.items():
        logging.getLogger(name).setLevel(logging.DEBUG if debug else level)


# Application logger instance
app_logger: Optional[logging.Logger] = None


def init_app_logger(settings) -> logging.Logger:
    """
    Initialize the application logger with settings.

    Args:
        settings: Application settings instance

    Returns:
        Configured application logger
    """
    global app_logger

    app_logger = setup_logger(
        name=APP_LOGGER_NAME,
        log_level=settings.log_level,
        log_file=settings.log_file
    )
    quiet_transport_loggers(settings.log_level)

    return app_logger


def get_app_logger() -> logging.Logger:
    """Get the application logger, falling back to a console-only default."""
    if app_logger is None:
        return setup_logger(APP_LOGGER_NAME)

    return app_logger
