"""Structured debug logging (timestamp, process, operation timings, etc.)."""

import logging
import logging.handlers
from pathlib import Path
from typing import Union

LOG_FILE_PATH = Path(__file__).parent.parent.parent / "logs/trie.log"
_LOG_LEVEL = logging.INFO

LOG_FORMAT = (
    "level=%(levelname)s | time=%(asctime)s | process=%(process)d | "
    "thread=%(thread)d | module=%(module)s | funcName=%(funcName)s | "
    "lineno=%(lineno)d | message=%(message)s"
)
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    log_file_path: Union[Path, str] = LOG_FILE_PATH,
    level: int = _LOG_LEVEL,
) -> logging.Handler:
    """Configure the root logger to write into a rotating log file.

    Any handler already attached to the root logger is replaced.

    Args:
        log_file_path (Path | str): The file the records are written to.
        Its parent directory is created if needed.
        level (int): The minimum level of the records to keep.

    Returns:
        logging.Handler: The file handler that was installed.

    """
    log_file_path = Path(log_file_path)
    log_file_path.parent.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    file_handler = logging.handlers.RotatingFileHandler(
        log_file_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(file_handler)
    return file_handler


def log(
    operation: str,
    count: int,
    execution_time_ms: float,
) -> None:
    """Log the details of a benchmarked trie operation using the
    configured logging system.

    Args:
        operation (str): The name of the operation (e.g. "insert").
        count (int): The number of strings the operation handled.
        execution_time_ms (float): The execution time in milliseconds.

    """
    logging.info(
        "Operation: %s, Strings: %d, Execution Time: %.2f ms",
        operation,
        count,
        execution_time_ms,
    )
