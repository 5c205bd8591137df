"""
Command runner for methdev.

Executes external commands synchronously and assembles the bin/meth
invocation for the run phase.

Usage:
    runner = CommandRunner()
    runner.run_command(["shards", "build"])
    runner.run_program(config, root)
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from ..core.exceptions import SubprocessFailure
from ..core.interfaces.logger import ILogger
from ..core.interfaces.presenter import IPresenter

if TYPE_CHECKING:
    from ..core.models.options import Configuration

# Exit codes a shell reports for programs it cannot start
EXIT_NOT_FOUND = 127
EXIT_NOT_EXECUTABLE = 126


def assemble_arguments(
    config: Configuration,
    lib_paths: Sequence[str] = (),
) -> list[str]:
    """
    Build the bin/meth argument list.

    Order is fixed: input path, --keep, --display-tokens, --display-ast,
    then the link flags as given. In sandbox mode each configured library
    path follows as -L<path>.
    """
    args = [config.fixed_input_path]
    if config.keep_intermediate_files:
        args.append("--keep")
    if config.display_tokens:
        args.append("--display-tokens")
    if config.display_ast:
        args.append("--display-ast")
    args.extend(config.extra_link_flags)
    if config.sandbox_mode:
        args.extend(f"-L{path}" for path in lib_paths)
    return args


def format_arguments(args: Sequence[str]) -> str:
    """Join assembled arguments with single spaces."""
    return " ".join(args)


def executable_path(root: Path, executable: str = "bin/meth") -> Path:
    """Path of the compiled program under a deployment root."""
    return root / executable


class CommandRunner:
    """
    Runs external commands and the compiled meth program.

    Every command blocks until it exits. A non-zero exit is raised as
    SubprocessFailure; nothing is retried.
    """

    def __init__(
        self,
        presenter: IPresenter | None = None,
        logger: ILogger | None = None,
        debugger: str = "gdb",
        executable: str = "bin/meth",
        lib_paths: Sequence[str] = (),
        echo_commands: bool = True,
    ) -> None:
        """
        Initialize command runner.

        Args:
            presenter: Presenter used to echo commands
            logger: Optional logger
            debugger: Debugger program used with --gdb
            executable: Program path relative to the deployment root
            lib_paths: Library directories added as -L flags in sandbox mode
            echo_commands: Print each command before running it
        """
        self._presenter = presenter
        self._logger = logger
        self.debugger = debugger
        self.executable = executable
        self.lib_paths = tuple(lib_paths)
        self.echo_commands = echo_commands

    @property
    def logger(self) -> ILogger:
        """Logger given at construction, else the bootstrapped one."""
        if self._logger is None:
            from ..core.di import get_logger

            self._logger = get_logger()
        return self._logger

    @property
    def presenter(self) -> IPresenter:
        """Presenter given at construction, else the bootstrapped one."""
        if self._presenter is None:
            from ..core.di import get_presenter

            self._presenter = get_presenter()
        return self._presenter

    def run_command(self, command: Sequence[str], cwd: Path | None = None) -> None:
        """
        Run a command and wait for it.

        Args:
            command: Program and arguments (no shell involved)
            cwd: Working directory (defaults to the current one)

        Raises:
            SubprocessFailure: If the command exits non-zero or cannot start
        """
        command = [str(part) for part in command]
        if self.echo_commands:
            self.presenter.print_command(command)
        self.logger.info("Running: %s (cwd=%s)", command, cwd or Path.cwd())

        try:
            result = subprocess.run(command, cwd=cwd)
        except FileNotFoundError as e:
            self.logger.error("Command not found: %s", command[0])
            raise SubprocessFailure(
                f"{command[0]}: command not found",
                command=command,
                returncode=EXIT_NOT_FOUND,
                cause=e,
            ) from e
        except PermissionError as e:
            self.logger.error("Command not executable: %s", command[0])
            raise SubprocessFailure(
                f"{command[0]}: permission denied",
                command=command,
                returncode=EXIT_NOT_EXECUTABLE,
                cause=e,
            ) from e

        self.logger.debug("Exit code %d: %s", result.returncode, command)
        if result.returncode != 0:
            raise SubprocessFailure(
                f"{' '.join(command)} failed!",
                command=command,
                returncode=result.returncode,
            )

    def build_run_command(self, config: Configuration, root: Path) -> list[str]:
        """
        Build the command line for the run phase.

        Under the debugger the executable is given twice: once as the
        debuggee and once after --args as the program whose arguments follow.
        """
        program = str(executable_path(root, self.executable))
        args = assemble_arguments(config, self.lib_paths)
        if config.use_debugger:
            return [self.debugger, program, "--args", program, *args]
        return [program, *args]

    def run_program(self, config: Configuration, root: Path) -> None:
        """
        Run the compiled program from a deployment root.

        Runs in the invocation directory so the relative input path resolves.

        Raises:
            SubprocessFailure: If the program (or debugger) exits non-zero
        """
        self.run_command(self.build_run_command(config, root))
