"""
Application bootstrap for methdev.

The CLI calls bootstrap() once with the loaded settings; services built
afterwards pick the logger and presenter up through core.di.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .container import ServiceContainer
    from .settings import MethDevSettings

_container: ServiceContainer | None = None


def bootstrap(settings: MethDevSettings) -> ServiceContainer:
    """
    Build the service container from settings, once per process.

    Args:
        settings: Loaded settings (logging and output sections are used)

    Returns:
        The process-wide ServiceContainer
    """
    global _container

    if _container is None:
        from .container import ServiceContainer

        container = ServiceContainer()
        container.config.from_dict(settings.to_config().model_dump())
        _container = container
    return _container


def current_container() -> ServiceContainer | None:
    """The bootstrapped container, or None before bootstrap()."""
    return _container


def reset() -> None:
    """Forget the bootstrapped container (tests start each case clean)."""
    global _container
    _container = None
