"""
Flag parser for the methdev command line.

Turns the raw token list into a frozen Configuration. Tokens are matched
exactly, one at a time: there is no bundling of short flags and no
"--flag=value" form.
"""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from pathlib import Path

from ..core.exceptions import ParseError
from ..core.interfaces.logger import ILogger
from ..core.models.options import DEFAULT_SANDBOX_SUBPATH, FIXED_INPUT_PATH, Configuration

# token -> Configuration field
FLAG_FIELDS: dict[str, str] = {
    "-b": "build",
    "--build": "build",
    "-g": "use_debugger",
    "--gdb": "use_debugger",
    "-r": "run_after_build",
    "--run": "run_after_build",
    "-t": "sandbox_mode",
    "--termux": "sandbox_mode",
    "-k": "keep_intermediate_files",
    "--keep": "keep_intermediate_files",
    "-dt": "display_tokens",
    "--display-tokens": "display_tokens",
    "-da": "display_ast",
    "--display-ast": "display_ast",
}


def resolve_home(environ: Mapping[str, str] | None = None) -> Path:
    """Home directory from $HOME, falling back to the platform default."""
    env = os.environ if environ is None else environ
    home = env.get("HOME")
    return Path(home) if home else Path.home()


class FlagParser:
    """
    Parses methdev command-line tokens.

    Usage:
        config = FlagParser().parse(["--build", "--run", "-Lmylib"])
    """

    def __init__(
        self,
        sandbox_subpath: str = DEFAULT_SANDBOX_SUBPATH,
        environ: Mapping[str, str] | None = None,
        logger: ILogger | None = None,
    ) -> None:
        """
        Initialize the parser.

        Args:
            sandbox_subpath: Sandbox destination, relative to the home directory
            environ: Environment to read HOME from (defaults to os.environ)
            logger: Optional logger
        """
        self._sandbox_subpath = sandbox_subpath
        self._environ = environ
        self._logger = logger

    @property
    def logger(self) -> ILogger:
        """Logger given at construction, else the bootstrapped one."""
        if self._logger is None:
            from ..core.di import get_logger

            self._logger = get_logger()
        return self._logger

    def parse(self, args: Sequence[str]) -> Configuration:
        """
        Parse command-line tokens.

        Args:
            args: Tokens after the program name

        Returns:
            Configuration with every recognized flag applied

        Raises:
            ParseError: On the first token that is neither a flag nor
                starts with '-'
        """
        self.logger.debug("FlagParser.parse: args=%s", list(args))

        # Build all values in local variables first (model is immutable)
        flags: dict[str, bool] = {}
        link_flags: list[str] = []

        for arg in args:
            field = FLAG_FIELDS.get(arg)
            if field is not None:
                flags[field] = True
            elif arg.startswith("-"):
                link_flags.append(arg)
            else:
                self.logger.error("Unknown argument: %s", arg)
                raise ParseError(f"Unknown argument {arg!r}.", token=arg)

        destination_dir = resolve_home(self._environ) / self._sandbox_subpath

        self.logger.debug(
            "Parsed: flags=%s, link_flags=%s, destination=%s",
            sorted(flags),
            link_flags,
            destination_dir,
        )
        return Configuration(
            **flags,
            extra_link_flags=tuple(link_flags),
            fixed_input_path=FIXED_INPUT_PATH,
            destination_dir=destination_dir,
        )
