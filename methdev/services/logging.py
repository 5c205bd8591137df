"""
Diagnostics logging for methdev runs.

Records go to ~/.methdev/methdev.log, tagged with the process id so a build
started in one shell and a gdb session in another can be told apart.
Console logging is opt-in; it writes to stderr with a "methdev:" prefix
because stdout carries the echoed commands and the program's own output.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from ..core.interfaces.logger import ILogger

LOG_FILE = Path(".methdev") / "methdev.log"  # relative to the home directory

FILE_FORMAT = "%(asctime)s pid=%(process)d %(levelname)s %(message)s"
CONSOLE_FORMAT = "methdev: %(levelname)s: %(message)s"

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


class MethDevLogger(ILogger):
    """ILogger backed by a stdlib logger with its own handlers."""

    MAX_BYTES = 10 * 1024 * 1024
    BACKUP_COUNT = 3

    def __init__(
        self,
        level: str = "warning",
        console_enabled: bool = False,
        file_enabled: bool = True,
        log_file: Path | None = None,
        name: str = "methdev",
    ) -> None:
        self.log_file = log_file or Path.home() / LOG_FILE
        self._logger = logging.getLogger(name)
        self._logger.setLevel(_LEVELS.get(level.lower(), logging.WARNING))
        self._logger.propagate = False
        # A second MethDevLogger for the same name replaces the first one's handlers
        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            handler.close()

        if console_enabled:
            console = logging.StreamHandler(sys.stderr)
            console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
            self._logger.addHandler(console)

        if file_enabled:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            rotating = RotatingFileHandler(
                self.log_file,
                maxBytes=self.MAX_BYTES,
                backupCount=self.BACKUP_COUNT,
                encoding="utf-8",
            )
            rotating.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
            self._logger.addHandler(rotating)

    def debug(self, message: str, *args: Any) -> None:
        self._logger.debug(message, *args)

    def info(self, message: str, *args: Any) -> None:
        self._logger.info(message, *args)

    def warning(self, message: str, *args: Any) -> None:
        self._logger.warning(message, *args)

    def error(self, message: str, *args: Any) -> None:
        self._logger.error(message, *args)


class NullLogger(ILogger):
    """Discards everything; the default before bootstrap."""

    def debug(self, message: str, *args: Any) -> None:
        pass

    def info(self, message: str, *args: Any) -> None:
        pass

    def warning(self, message: str, *args: Any) -> None:
        pass

    def error(self, message: str, *args: Any) -> None:
        pass
