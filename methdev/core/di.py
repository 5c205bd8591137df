"""
Service lookup for methdev.

Services take an explicit logger/presenter when they are given one and
otherwise fall back to the bootstrapped container, or to quiet defaults when
methdev was not bootstrapped (unit tests, library use).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .bootstrap import current_container

if TYPE_CHECKING:
    from .interfaces.logger import ILogger
    from .interfaces.presenter import IPresenter


def get_logger() -> ILogger:
    """Container logger, or a NullLogger before bootstrap."""
    container = current_container()
    if container is None:
        from ..services.logging import NullLogger

        return NullLogger()
    return container.logger()


def get_presenter() -> IPresenter:
    """Container presenter, or a plain ConsolePresenter before bootstrap."""
    container = current_container()
    if container is None:
        from ..presenters.console import ConsolePresenter

        return ConsolePresenter()
    return container.presenter()
