"""
Console presenter for terminal output.

Implements human-readable output formatting for the CLI.
"""

import shlex
import sys
from typing import TextIO

from ..core.interfaces.presenter import IPresenter


class ConsolePresenter(IPresenter):
    """
    Console output presenter.

    Commands and notices go to stdout, errors and warnings to stderr.
    Streams default to whatever sys.stdout/sys.stderr are at print time.
    """

    def __init__(
        self,
        use_color: bool = True,
        file: TextIO | None = None,
        err_file: TextIO | None = None,
    ) -> None:
        """
        Initialize console presenter.

        Args:
            use_color: Whether to use ANSI color codes (only on a TTY)
            file: Output file (defaults to sys.stdout)
            err_file: Error output file (defaults to sys.stderr)
        """
        self._use_color = use_color
        self._file = file
        self._err_file = err_file

    @property
    def out(self) -> TextIO:
        return self._file or sys.stdout

    @property
    def err(self) -> TextIO:
        return self._err_file or sys.stderr

    def _color(self, stream: TextIO) -> bool:
        return self._use_color and stream.isatty()

    def print(self, message: str) -> None:
        """Print a message to output."""
        print(message, file=self.out, flush=True)

    def print_command(self, command: list[str]) -> None:
        """Echo a command line, quoted so it can be pasted into a shell."""
        line = shlex.join(command)
        if self._color(self.out):
            line = f"\033[1m{line}\033[0m"
        print(line, file=self.out, flush=True)

    def print_error(self, message: str) -> None:
        """Print an error message to stderr."""
        if self._color(self.err):
            print(f"\033[91mError: {message}\033[0m", file=self.err, flush=True)
        else:
            print(f"Error: {message}", file=self.err, flush=True)

    def print_warning(self, message: str) -> None:
        """Print a warning message."""
        if self._color(self.err):
            print(f"\033[93mWarning: {message}\033[0m", file=self.err, flush=True)
        else:
            print(f"Warning: {message}", file=self.err, flush=True)
