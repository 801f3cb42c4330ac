"""Logging setup and utilities."""

import logging

from .ansi import LogStyles, make_style, should_colorize

__all__ = [
    "LOG_LEVELS",
    "LogObjects",
    "get_logger",
    "init_logger",
]

# Accepted values of JFROG_CLI_LOG_LEVEL
LOG_LEVELS: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

_LEVEL_PREFIXES = {
    logging.DEBUG: "[Debug] ",
    logging.INFO: "[Info] ",
    logging.WARNING: "[Warn] ",
    logging.ERROR: "[Error] ",
    logging.CRITICAL: "[Error] ",
}


class LogObjects:
    """Reusable objects for loggers."""

    handlers: list[logging.Handler] = []
    level: int = logging.INFO
    debug: bool = False  # adds the logger name and source location to messages


def init_logger(filename: str | None = None, force_debug: bool = False, level_name: str | None = None) -> None:
    """Initialize the logging system.

    Args:
        filename: Optional filename to log to
        force_debug: If True, force debug level
        level_name: Value of JFROG_CLI_LOG_LEVEL (unknown values fall back to INFO)
    """
    level = LOG_LEVELS.get((level_name or "").upper(), logging.INFO)
    if force_debug:
        level = logging.DEBUG
    LogObjects.level = level
    LogObjects.debug = level == logging.DEBUG

    class ScreenLogFormatter(logging.Formatter):
        """A custom formatter, adding the level prefix and colors.

        Respects NO_COLOR environment variable and TTY detection.
        """

        LOG_FORMAT = r"%(message)s // %(name)s %(filename)s:%(lineno)d" if LogObjects.debug else r"%(message)s"

        def __init__(self) -> None:
            super().__init__()
            styles = {
                logging.DEBUG: LogStyles.DEBUG,
                logging.WARNING: LogStyles.WARNING,
                logging.ERROR: LogStyles.ERROR,
                logging.CRITICAL: LogStyles.CRITICAL,
            }
            use_colors = should_colorize()
            self._formatters = {}
            for levelno, prefix in _LEVEL_PREFIXES.items():
                pre, suf = make_style(*styles[levelno]) if use_colors and levelno in styles else ("", "")
                self._formatters[levelno] = logging.Formatter(pre + prefix + suf + self.LOG_FORMAT)

        def format(self, record: logging.LogRecord) -> str:
            return self._formatters.get(record.levelno, self._formatters[logging.INFO]).format(record)

    LogObjects.handlers.clear()
    if filename:
        file_handler = logging.FileHandler(filename)
        file_handler.setFormatter(logging.Formatter(fmt=r"%(asctime)s [%(levelname)s] %(name)s :: %(message)s :: %(filename)s:%(lineno)d"))
        LogObjects.handlers.append(file_handler)
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(ScreenLogFormatter())
    LogObjects.handlers.append(stream_handler)


def get_logger(name: str = "jf", level: int | None = None) -> logging.Logger:
    """Return a named logger.

    Args:
        name (str): logger's name
        level (int): logger's level (from JFROG_CLI_LOG_LEVEL if not set)

    Returns:
        The logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(LogObjects.level if level is None else level)
    logger.propagate = False
    for handler in logger.handlers[:]:
        if handler not in LogObjects.handlers:
            logger.removeHandler(handler)
    for handler in LogObjects.handlers:
        if handler not in logger.handlers:
            logger.addHandler(handler)
    return logger
