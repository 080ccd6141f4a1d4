import logging
import sys
from typing import Optional, cast

TRACE = logging.DEBUG - 5


class TraceLogger(logging.Logger):
    def trace(self, msg: object, *args, **kwargs) -> None: ...


def add_logging_level(level_name: str, level_num: int, method_name: Optional[str] = None) -> None:
    """Registers a new level with the `logging` module and the current logger class.

    `level_name` becomes an attribute of `logging` holding `level_num`, and
    `method_name` (defaults to `level_name.lower()`) becomes a method on the
    logger class and a function on `logging`.

    Raises:
        AttributeError: if the level or method name is already taken
    """
    if not method_name:
        method_name = level_name.lower()

    if hasattr(logging, level_name):
        raise AttributeError(f"{level_name} already defined in logging module")
    if hasattr(logging, method_name):
        raise AttributeError(f"{method_name} already defined in logging module")
    if hasattr(logging.getLoggerClass(), method_name):
        raise AttributeError(f"{method_name} already defined in logger class")

    def log_for_level(self, message, *args, **kwargs):  # noqa: ANN001 ANN202
        if self.isEnabledFor(level_num):
            self._log(level_num, message, args, **kwargs)

    def log_to_root(message, *args, **kwargs):  # noqa: ANN001 ANN202
        logging.log(level_num, message, *args, **kwargs)

    logging.addLevelName(level_num, level_name)
    setattr(logging, level_name, level_num)
    setattr(logging.getLoggerClass(), method_name, log_for_level)
    setattr(logging, method_name, log_to_root)


if not hasattr(logging, "TRACE"):
    add_logging_level("TRACE", TRACE)


def get_logger(name: str) -> TraceLogger:
    return cast(TraceLogger, logging.getLogger(name))


def compute_log_level(verbose_count: int, quiet_count: int) -> int:
    level_index = 3 + verbose_count - quiet_count
    levels = [
        logging.CRITICAL,  # 0
        logging.ERROR,  # 1
        logging.WARNING,  # 2
        logging.INFO,  # 3 (default)
        logging.DEBUG,  # 4
        TRACE,  # 5
    ]
    # clamp to valid range
    level_index = max(0, min(level_index, len(levels) - 1))
    return levels[level_index]


class InfoStrippingFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        if record.levelno == logging.INFO:
            return record.getMessage()
        return super().format(record)


def configure_logger(level: int) -> None:
    """Attaches a single stderr handler to the package logger"""
    package_logger = logging.getLogger(__name__.split(".")[0])
    package_logger.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(InfoStrippingFormatter(fmt="%(levelname)s: %(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False
