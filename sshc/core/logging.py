"""
Rich-based logging for the sshc logger tree
"""
import logging
from typing import Optional
from pathlib import Path

from rich.logging import RichHandler
from rich.console import Console

from .constants import APP_NAME


# Global console instances; the underlying stream is looked up on every write
_stdout_console = Console()
_stderr_console = Console(stderr=True)

FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: str = "INFO", log_file: Optional[Path] = None) -> logging.Logger:
    """
    Configure the application logger.

    Only the ``sshc`` logger is touched; records from ``sshc.*`` modules stop
    there, so the root logger and third-party loggers keep their own setup.
    Calling it again replaces the handlers of the previous call.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path

    Returns:
        The configured application logger
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    app_logger = logging.getLogger(APP_NAME)
    app_logger.setLevel(log_level)
    app_logger.propagate = False

    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()

    rich_handler = RichHandler(
        console=_stderr_console,
        show_time=True,
        show_path=True,
        rich_tracebacks=True,
        markup=False,
        show_level=True,
    )
    rich_handler.setLevel(log_level)
    app_logger.addHandler(rich_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        app_logger.addHandler(file_handler)

    return app_logger


def get_logger(name: str) -> logging.Logger:
    """Logger for a module (pass ``__name__``; it sits under ``sshc``)"""
    return logging.getLogger(name)


def get_stdout_console() -> Console:
    """Get stdout console for user-facing output"""
    return _stdout_console


def get_stderr_console() -> Console:
    """Get stderr console for errors and logs"""
    return _stderr_console
