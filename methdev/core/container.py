"""
Service container for methdev.

Holds the two process-wide services, the diagnostics logger and the console
presenter, wired from the loaded settings through a Configuration provider.
"""

from __future__ import annotations

from dependency_injector import containers, providers

from ..presenters.console import ConsolePresenter
from ..services.logging import MethDevLogger


class ServiceContainer(containers.DeclarativeContainer):
    """
    Logger and presenter for one methdev invocation.

    Usage:
        container = ServiceContainer()
        container.config.from_dict(settings.to_config().model_dump())
        container.logger().info("...")
    """

    config = providers.Configuration()

    # Created on first use; the file handler makes ~/.methdev
    logger = providers.Singleton(
        MethDevLogger,
        level=config.logging.level,
        console_enabled=config.logging.console,
        file_enabled=config.logging.file,
    )

    presenter = providers.Singleton(ConsolePresenter, use_color=config.output.color)
