#!/usr/bin/env python3
"""
logging_manager.py
--------------------
Log files for worktools commands.

Every command logs to ``<log_dir>/<component>.log``; errors are also written,
with their traceback, to ``<log_dir>/errors.log``. Both files rotate at
LOG_MAX_BYTES. Warnings and above are echoed to the console.

Functions that accept an optional logger wrap it with safe_logger() so they
work the same with or without one.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
import logging
import traceback
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

# --- Third party imports ---
import click


LOG_MAX_BYTES = 2 * 1024 * 1024
LOG_BACKUP_COUNT = 3

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s:%(lineno)d] - %(message)s"
CONSOLE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def _with_details(tag: str, message: str, details: Optional[Dict[str, Any]]) -> str:
    """'TAG - message' with the details appended as JSON when there are any."""
    if not details:
        return f"{tag} - {message}"
    return f"{tag} - {message}: {json.dumps(details, default=str)}"


class WorkToolsLogger:
    """
    Component logger with a rotating log file and a separate error log.

    Attributes:
        log_dir: Directory holding the log files
        component_name: Command name, also the log file stem
        main_logger: Receives everything from DEBUG up
        error_logger: Receives errors only
    """

    def __init__(self, log_dir: Path, component_name: str = "worktools") -> None:
        self.log_dir = Path(log_dir)
        self.component_name = component_name
        self.log_dir.mkdir(parents=True, exist_ok=True)

        self.main_logger = self._fresh_logger("operations", logging.DEBUG)
        self._attach_file(self.main_logger, f"{component_name}.log", logging.DEBUG)

        console = logging.StreamHandler()
        console.setLevel(logging.WARNING)
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
        self.main_logger.addHandler(console)

        self.error_logger = self._fresh_logger("errors", logging.ERROR)
        self._attach_file(self.error_logger, "errors.log", logging.ERROR)

    def _fresh_logger(self, channel: str, level: int) -> logging.Logger:
        """Named logger for this component with its handlers dropped."""
        logger = logging.getLogger(f"{self.component_name}.{channel}")
        logger.setLevel(level)
        # Only this component's loggers, never the root logger
        logger.handlers = []
        return logger

    def _attach_file(self, logger: logging.Logger, filename: str, level: int) -> None:
        handler = RotatingFileHandler(
            self.log_dir / filename,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)

    def log_operation(
        self, operation: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        """Record a completed step, e.g. 'parse_complete', with its details."""
        self.main_logger.info(_with_details("OPERATION", operation, details or {}))

    def log_error(
        self, error: Exception, context: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Write an exception to errors.log.

        The context pairs go on their own line, followed by the traceback of
        the exception currently being handled.
        """
        self.error_logger.error(f"ERROR - {type(error).__name__}: {error}")
        if context:
            pairs = ", ".join(f"{k}={v}" for k, v in context.items())
            self.error_logger.error(f"Context: {pairs}")
        self.error_logger.error(f"Traceback:\n{traceback.format_exc()}")

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.main_logger.debug(_with_details("DEBUG", message, details))

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.main_logger.info(_with_details("INFO", message, details))

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        """
        Log the error and return the line to show the user.

        Examples:
            >>> logger.log_cli_error(InputUnavailableError("File TIME_USAGE.md not found"))
            '❌ InputUnavailableError: File TIME_USAGE.md not found'
        """
        self.log_error(error, context or {"source": "cli"})
        message = f"❌ {type(error).__name__}: {error}"
        if show_traceback:
            return f"{message}\n\n{traceback.format_exc()}"
        return message


def handle_cli_error(
    ctx: "click.Context",
    error: Exception,
    operation: str,
    additional_context: Optional[Dict[str, Any]] = None,
    exit_code: int = 1,
) -> None:
    """
    Log a failed command, print one line to stderr and exit.

    The logger and the verbose flag come from ``ctx.obj``; with --verbose the
    traceback is printed too. Never returns.
    """
    logger: Optional[WorkToolsLogger] = ctx.obj.get("logger")
    verbose: bool = ctx.obj.get("verbose", False)

    context = {"operation": operation, **(additional_context or {})}
    click.echo(
        safe_logger(logger).log_cli_error(error, context, show_traceback=verbose),
        err=True,
    )
    sys.exit(exit_code)


class NullLogger:
    """Stands in for WorkToolsLogger when no logger was given."""

    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        """Same message as WorkToolsLogger.log_cli_error(), nothing logged."""
        return f"❌ {type(error).__name__}: {error}"


_null_logger = NullLogger()


def safe_logger(logger: Optional[WorkToolsLogger]) -> WorkToolsLogger:
    """The given logger, or a shared NullLogger for None."""
    return logger if logger is not None else _null_logger  # type: ignore[return-value]
