"""
Orchestrator for one methdev invocation.

Runs the build phase, then the run phase, each only when its flag is set.
Both phases use the same deployment root, so whatever was built is what
gets run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..core.interfaces.logger import ILogger
from ..core.interfaces.presenter import IPresenter
from .deployment import DeploymentResolver
from .runner import CommandRunner

if TYPE_CHECKING:
    from ..core.models.config import MethDevConfig
    from ..core.models.options import Configuration


class Orchestrator:
    """
    Service coordinating the build and run phases.

    Usage:
        orchestrator = Orchestrator.from_settings(settings.to_config())
        orchestrator.execute(config)
    """

    def __init__(
        self,
        resolver: DeploymentResolver,
        runner: CommandRunner,
        presenter: IPresenter | None = None,
        logger: ILogger | None = None,
    ) -> None:
        self._resolver = resolver
        self._runner = runner
        self._presenter = presenter
        self._logger = logger

    @classmethod
    def from_settings(
        cls,
        settings: MethDevConfig,
        presenter: IPresenter | None = None,
        logger: ILogger | None = None,
    ) -> Orchestrator:
        """Wire a runner and resolver from the tools/sandbox/output sections."""
        runner = CommandRunner(
            presenter=presenter,
            logger=logger,
            debugger=settings.tools.debugger,
            executable=settings.tools.executable,
            lib_paths=settings.sandbox.lib_paths,
            echo_commands=settings.output.echo_commands,
        )
        resolver = DeploymentResolver(
            runner,
            build_command=settings.tools.build_command,
            logger=logger,
        )
        return cls(resolver, runner, presenter=presenter, logger=logger)

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

    def execute(self, config: Configuration) -> int:
        """
        Execute the requested phases.

        Returns:
            0 when every requested phase succeeded

        Raises:
            FilesystemFailure: If sandbox staging fails
            SubprocessFailure: If the build, the program or the debugger fails;
                a failed build means the run phase never starts
        """
        if not config.has_work:
            self.logger.info("Nothing to do: neither --build nor --run given")
            self.presenter.print("Nothing to do. Pass --build and/or --run.")
            return 0

        if config.build:
            self.logger.info("Build phase (sandbox=%s)", config.sandbox_mode)
            self._resolver.build(config)

        if config.run_after_build:
            # A sandbox run without --build reuses the last sandbox build
            root = self._resolver.resolve_root(config)
            self.logger.info("Run phase from %s (debugger=%s)", root, config.use_debugger)
            self._runner.run_program(config, root)

        return 0
