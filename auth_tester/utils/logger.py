import functools
import logging
import sys
from typing import Optional, Union
from pathlib import Path


def setup_logger(
    name: str = "auth_tester",
    level: Union[int, str] = logging.WARNING,
    log_file: Optional[str] = None,
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
) -> logging.Logger:
    """
    Set up a logger with console and optional file handlers

    The console handler writes to stderr so log lines stay out of the
    operator transcript on stdout.

    Args:
        name: Logger name
        level: Logging level (int or level name)
        log_file: Optional file path for logging
        log_format: Log message format

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logger.setLevel(level)

    formatter = logging.Formatter(log_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = None) -> logging.Logger:
    """
    Get a logger instance

    Child names are placed under the "auth_tester" logger so they share
    its handlers.

    Args:
        name: Logger name (optional)

    Returns:
        Logger instance
    """
    if name:
        return logging.getLogger(f"auth_tester.{name}")
    return logging.getLogger("auth_tester")


def log_api_call(operation: str):
    """
    Decorator to log outbound API calls

    Only the operation name and outcome are logged, never the arguments,
    since those carry passwords and tokens.

    Args:
        operation: Description of the API call
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            log = get_logger("api")
            log.info(f"Starting API call: {operation}")

            try:
                result = func(*args, **kwargs)
                log.info(f"API call '{operation}' completed successfully")
                return result
            except Exception as e:
                log.warning(f"API call '{operation}' failed: {str(e)}")
                raise
        return wrapper
    return decorator
