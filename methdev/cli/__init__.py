"""
Click-based CLI for methdev.

This module provides the `methdev` command. Click only handles --help and
--version; every other token is passed through untouched to FlagParser,
so link flags such as -Lmylib reach the program exactly as typed.

Usage:
    from methdev.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

import click

from .. import __version__
from ..core.bootstrap import bootstrap
from ..core.exceptions import MethDevException
from ..core.interfaces.logger import ILogger
from ..core.interfaces.presenter import IPresenter
from ..core.settings import load_settings
from ..presenters.console import ConsolePresenter
from ..services.flags import FlagParser
from ..services.logging import NullLogger
from ..services.orchestrator import Orchestrator

RAW_ARGS_KEY = "methdev.raw_args"


class PassthroughCommand(click.Command):
    """
    Command that keeps the exact token list it was invoked with.

    Click's parser swallows a bare "--" as its end-of-options marker, but
    for methdev "--" is an ordinary link flag, so the callback reads the
    untouched list from ctx.meta instead of the parsed arguments.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.meta[RAW_ARGS_KEY] = list(args)
        return super().parse_args(ctx, args)


@click.command(
    "methdev",
    cls=PassthroughCommand,
    context_settings={
        "ignore_unknown_options": True,
        "allow_extra_args": True,
        "allow_interspersed_args": False,
    },
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.version_option(version=__version__, prog_name="methdev")
@click.pass_context
def cli(ctx: click.Context, args: tuple[str, ...]) -> None:
    """methdev - build, stage and run the meth compiler.

    \b
    Flags:
        -b,  --build            Build with the external build tool
        -r,  --run              Run bin/meth on test/main.mh
        -g,  --gdb              Run bin/meth under gdb
        -t,  --termux           Copy the tree to ~/temp/crystal/meth and
                                build/run from there
        -k,  --keep             Pass --keep to bin/meth
        -dt, --display-tokens   Pass --display-tokens to bin/meth
        -da, --display-ast      Pass --display-ast to bin/meth
        -*                      Any other dash token is passed to bin/meth
                                as a link flag

    \b
    Examples:
        methdev -b -r
        methdev --build --run --termux -Lmylib
        methdev -r -g -dt
    """
    raw_args: list[str] = ctx.meta.get(RAW_ARGS_KEY, list(args))
    # Replaced by the configured services once bootstrap succeeds
    presenter: IPresenter = ConsolePresenter()
    logger: ILogger = NullLogger()

    try:
        settings = load_settings()
        container = bootstrap(settings)
        presenter = container.presenter()
        logger = container.logger()

        if settings.config_error:
            presenter.print_warning(settings.config_error)
        logger.debug("methdev %s: args=%s, config_file=%s", __version__, raw_args, settings.config_file)

        config = FlagParser(sandbox_subpath=settings.sandbox.destination, logger=logger).parse(raw_args)
        orchestrator = Orchestrator.from_settings(
            settings.to_config(), presenter=presenter, logger=logger
        )
        exit_code = orchestrator.execute(config)
    except MethDevException as e:
        logger.error("%s: %s", type(e).__name__, e)
        presenter.print_error(e.message)
        raise SystemExit(e.exit_code) from e
    except OSError as e:
        # e.g. ~/.methdev can't be created for the log file
        logger.error("OSError: %s", e)
        presenter.print_error(str(e))
        raise SystemExit(1) from e

    if exit_code != 0:
        raise SystemExit(exit_code)


__all__ = [
    "PassthroughCommand",
    "__version__",
    "cli",
]
